"""Parking lot that holds each vehicle for a random stay."""

from __future__ import annotations

import logging

from parkingsim.devs import INFINITY, AtomicModel, Event
from parkingsim.rng import DEFAULT_SEED, MersenneTwister

logger = logging.getLogger(__name__)

MIN_STAY = 120.0
MAX_STAY = 300.0


class ParkingLot(AtomicModel):
    """Keeps parked vehicles ordered by remaining stay.

    A vehicle id arriving on any port is parked for a stay drawn uniformly
    from [120, 300).  When the shortest remaining stay expires, that
    vehicle's id is emitted on port 0.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.rng = MersenneTwister(DEFAULT_SEED)
        self._parked: list[list[float]] = []
        self.vehicle_id = 0.0
        self.stay = 0.0

    @property
    def vehicles(self) -> list[tuple[float, float]]:
        """Parked vehicles as ``(id, remaining stay)``, soonest first."""
        return [(vid, remaining) for vid, remaining in self._parked]

    def _first(self) -> list[float]:
        if not self._parked:
            raise IndexError("no vehicle is parked")
        return self._parked[0]

    def _age(self, amount: float) -> None:
        for entry in self._parked:
            entry[1] -= amount

    def init(self, t: float) -> None:
        super().init(t)
        self.sigma = INFINITY

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        self._parked.remove(self._first())
        if self._parked:
            self._age(self.sigma)
            self.sigma = self._parked[0][1]
        else:
            self.sigma = INFINITY
        logger.debug("Parking dint: t=%f sigma=%f", t, self.sigma)

    def dext(self, event: Event, t: float) -> None:
        self._age(self.elapsed)
        self.vehicle_id = event.value
        self.stay = MIN_STAY + self.rng.random() * (MAX_STAY - MIN_STAY)
        logger.debug("Vehicle %f stays %f, leaving at %f",
                     self.vehicle_id, self.stay, t + self.stay)
        position = next(
            (i for i, (_, remaining) in enumerate(self._parked) if self.stay < remaining),
            len(self._parked),
        )
        self._parked.insert(position, [self.vehicle_id, self.stay])
        self.sigma = self._parked[0][1]

    def output(self, t: float) -> Event:
        self.vehicle_id = self._first()[0]
        logger.debug("Vehicle %f wants to leave at t = %f", self.vehicle_id, t)
        return Event(self.vehicle_id, 0)