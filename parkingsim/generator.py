"""Vehicle arrival generator with exponentially distributed inter-arrival times."""

from __future__ import annotations

import logging
import math

from parkingsim.devs import AtomicModel, Event
from parkingsim.rng import DEFAULT_SEED, MersenneTwister

logger = logging.getLogger(__name__)

ARRIVAL_RATE = 0.1


class ArrivalGenerator(AtomicModel):
    """Emits consecutive vehicle ids on port 0 at exponential intervals.

    The generator has no inputs, so external events leave it unchanged.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.rng = MersenneTwister(DEFAULT_SEED)
        self.vehicle_id = 0.0

    def _interarrival(self) -> float:
        r = self.rng.random()
        while r <= 0.0 or r >= 1.0:
            r = self.rng.random()
        return -(1.0 / ARRIVAL_RATE) * math.log(1.0 - r)

    def init(self, t: float) -> None:
        self.vehicle_id = 0.0
        self.sigma = self._interarrival()

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        self.vehicle_id += 1
        self.sigma = self._interarrival()

    def dext(self, event: Event, t: float) -> None:
        """Ignore inputs: the generator has none."""

    def output(self, t: float) -> Event:
        logger.debug("Vehicle %f arrived at t = %f", self.vehicle_id, t)
        return Event(self.vehicle_id, 0)