"""Entry and exit presence sensors that detect vehicles one at a time."""

from __future__ import annotations

import logging
from collections import deque

from parkingsim.devs import INFINITY, AtomicModel, Event

logger = logging.getLogger(__name__)

DETECTION_TIME = 1.0


class Sensor(AtomicModel):
    """A sensor that takes a fixed time to detect each vehicle.

    Vehicles arriving on port 0 while the sensor is busy wait in a FIFO
    queue.  Each detected vehicle id is emitted on port 0.
    """

    label = "Sensor"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.queue: deque[float] = deque()
        self.busy = False
        self.vehicle_id = 0.0

    def init(self, t: float) -> None:
        self.busy = False
        self.sigma = INFINITY

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        if self.queue:
            self.vehicle_id = self.queue.popleft()
            self.busy = True
            self.sigma = DETECTION_TIME
            logger.debug("%s: vehicle %f taken from queue at t = %f",
                         self.label, self.vehicle_id, t)
        else:
            self.busy = False
            self.sigma = INFINITY
            logger.debug("%s: idle at t = %f", self.label, t)

    def dext(self, event: Event, t: float) -> None:
        if event.port != 0:
            return
        if not self.busy:
            self.busy = True
            self.sigma = DETECTION_TIME
            self.vehicle_id = event.value
            logger.debug("%s: detecting vehicle %f at t = %f",
                         self.label, self.vehicle_id, t)
        else:
            self.queue.append(event.value)
            logger.debug("%s: vehicle %f queued at t = %f (%d waiting)",
                         self.label, event.value, t, len(self.queue))
            if self.sigma != INFINITY:
                self.sigma -= self.elapsed

    def output(self, t: float) -> Event:
        logger.debug("%s: vehicle %f detected at t = %f",
                     self.label, self.vehicle_id, t)
        return Event(self.vehicle_id, 0)


class EntrySensor(Sensor):
    """Sensor at the entrance, fed by the arrival generator."""

    label = "Entry sensor"


class ExitSensor(Sensor):
    """Sensor at the exit, fed by the parking lot."""

    label = "Exit sensor"