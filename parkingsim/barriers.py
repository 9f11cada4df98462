"""Entry and exit barriers that let vehicles through."""

from __future__ import annotations

import logging

from parkingsim.devs import INFINITY, AtomicModel, Event
from parkingsim.rng import DEFAULT_SEED, MersenneTwister

logger = logging.getLogger(__name__)

OPEN_TIME = 4.0
CLOSE_TIME = 4.0
MIN_CROSSING = 1.0
MAX_CROSSING = 3.0
MAX_TURN_AWAY = 2.0


class _Barrier(AtomicModel):
    """Shared behaviour: a barrier opens on a grant arriving on port 0."""

    label = "Barrier"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.rng = MersenneTwister(DEFAULT_SEED)
        self.is_open = False
        self.vehicle_id = 0.0
        self.crossing_time = 0.0

    def init(self, t: float) -> None:
        super().init(t)
        self.is_open = False
        self.sigma = INFINITY

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        self.is_open = False
        self.sigma = INFINITY

    def _let_through(self, event: Event, t: float) -> None:
        self.is_open = True
        r = self.rng.random()
        self.crossing_time = MIN_CROSSING + r * (MAX_CROSSING - MIN_CROSSING)
        self.vehicle_id = event.value
        self.sigma = OPEN_TIME + self.crossing_time + CLOSE_TIME
        logger.debug("%s: vehicle %f let through at t = %f, crossing %f",
                     self.label, self.vehicle_id, t, self.crossing_time)

    def dext(self, event: Event, t: float) -> None:
        if event.port == 0:
            self._let_through(event, t)

    def output(self, t: float) -> Event:
        logger.debug("%s: vehicle %f passed at t = %f", self.label, self.vehicle_id, t)
        return Event(self.vehicle_id, 0)


class EntryBarrier(_Barrier):
    """Barrier at the entrance.

    Port 0 carries an entry grant: the barrier opens, the vehicle crosses
    and the barrier closes.  Port 1 carries a denial: the vehicle turns
    away.  Either way the vehicle id is emitted on port 0 when done.
    """

    label = "Entry barrier"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.turn_away_time = 0.0

    def init(self, t: float) -> None:
        super().init(t)

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        super().dint(t)

    def dext(self, event: Event, t: float) -> None:
        if event.port == 1:
            self.is_open = False
            self.turn_away_time = self.rng.random() * MAX_TURN_AWAY
            self.sigma = self.turn_away_time
            logger.debug("Entry barrier: vehicle %f refused at t = %f, leaving in %f",
                         self.vehicle_id, t, self.turn_away_time)
        else:
            super().dext(event, t)

    def output(self, t: float) -> Event:
        outcome = "entered" if self.is_open else "left"
        logger.debug("Entry barrier: vehicle %f %s at t = %f", self.vehicle_id, outcome, t)
        return Event(self.vehicle_id, 0)


class ExitBarrier(_Barrier):
    """Barrier at the exit: on a grant (port 0) it lets the vehicle out."""

    label = "Exit barrier"

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def init(self, t: float) -> None:
        super().init(t)

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        super().dint(t)

    def dext(self, event: Event, t: float) -> None:
        super().dext(event, t)

    def output(self, t: float) -> Event:
        return super().output(t)