"""Parking controller that grants entry and exit and tracks occupancy."""

from __future__ import annotations

import logging
from collections import deque

from parkingsim.devs import INFINITY, AtomicModel, Event
from parkingsim.rng import DEFAULT_SEED, MersenneTwister

logger = logging.getLogger(__name__)

CAPACITY = 30.0
MAX_RESPONSE_TIME = 3.0

ENTRY_REQUEST_PORT = 0
EXIT_REQUEST_PORT = 1
ADMITTED_PORT = 2
LEFT_PORT = 3

GRANT_ENTRY_PORT = 0
DENY_ENTRY_PORT = 1
GRANT_EXIT_PORT = 2
REGISTERED_PORT = 3


class Controller(AtomicModel):
    """Decides whether vehicles may enter or leave the parking lot.

    Inputs:
      port 0 -- a vehicle at the entry sensor asks to enter;
      port 1 -- a vehicle at the exit sensor asks to leave;
      port 2 -- a vehicle has passed the entry barrier;
      port 3 -- a vehicle has passed the exit barrier.

    Outputs:
      port 0 -- entry granted; port 1 -- entry denied (lot full);
      port 2 -- exit granted; port 3 -- vehicle registered inside the lot.

    Requests arriving while the matching process is busy wait in a single
    queue of ``(vehicle id, input port)`` pairs.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.rng = MersenneTwister(DEFAULT_SEED)
        self.queue: deque[tuple[float, int]] = deque()
        self.entry_busy = False
        self.exit_busy = False
        self.admitted = False
        self.occupancy = 0.0
        self.vehicle_id = 0.0
        self.response_time = 0.0

    def _respond(self, vehicle_id: float | None = None) -> None:
        """Schedule an answer after a random delay, optionally for a new vehicle."""
        self.response_time = self.rng.random() * MAX_RESPONSE_TIME
        self.sigma = self.response_time
        if vehicle_id is not None:
            self.vehicle_id = vehicle_id

    def init(self, t: float) -> None:
        super().init(t)
        self.entry_busy = False
        self.exit_busy = False
        self.admitted = False
        self.occupancy = 0.0
        self.sigma = INFINITY

    def ta(self, t: float) -> float:
        return self.sigma

    def dint(self, t: float) -> None:
        if self.entry_busy and self.exit_busy or not self.queue:
            self.sigma = INFINITY
            return
        vehicle_id, _ = self.queue.popleft()
        if not self.entry_busy:
            self.entry_busy = True
            purpose = "enter"
        else:
            self.exit_busy = True
            purpose = "leave"
        self._respond(vehicle_id)
        logger.debug("Controller: vehicle %f dequeued to %s", vehicle_id, purpose)

    def _enqueue(self, vehicle_id: float, port: int) -> None:
        self.queue.append((vehicle_id, port))
        logger.debug("Controller: waiting list %s", list(self.queue))
        self.sigma -= self.elapsed

    def _log_state(self, stage: str, t: float) -> None:
        logger.debug("Controller dext %s: t=%f sigma=%f entry=%s exit=%s",
                     stage, t, self.sigma, self.entry_busy, self.exit_busy)

    def dext(self, event: Event, t: float) -> None:
        self._log_state("start", t)
        if event.port == ENTRY_REQUEST_PORT:
            if self.occupancy >= CAPACITY:
                self.entry_busy = False
                self._respond()
                logger.debug("Controller: lot full, answering in %f", self.response_time)
            elif not self.entry_busy:
                self.entry_busy = True
                self._respond(event.value)
                logger.debug("Controller: room for %f, answering in %f",
                             self.vehicle_id, self.response_time)
            else:
                self._enqueue(event.value, event.port)
        elif event.port == EXIT_REQUEST_PORT:
            if not self.exit_busy:
                self.exit_busy = True
                self._respond(event.value)
                logger.debug("Controller: vehicle %f wants to leave, answering in %f",
                             self.vehicle_id, self.response_time)
            else:
                # The queued id is the one currently being processed.
                self._enqueue(self.vehicle_id, event.port)
        elif event.port == ADMITTED_PORT:
            self.vehicle_id = event.value
            self.entry_busy = False
            self.occupancy += 1.0
            self.sigma = 0.0
            self.admitted = True
        elif event.port == LEFT_PORT:
            self.exit_busy = False
            self.occupancy -= 1.0
            self.sigma = INFINITY
        self._log_state("end", t)

    def output(self, t: float) -> Event:
        if self.admitted:
            self.admitted = False
            port, verdict = REGISTERED_PORT, "registered"
        elif self.entry_busy:
            port, verdict = GRANT_ENTRY_PORT, "entry granted"
        elif self.exit_busy:
            port, verdict = GRANT_EXIT_PORT, "exit granted"
        else:
            port, verdict = DENY_ENTRY_PORT, "entry denied"
        logger.debug("Controller: %s for %f at t = %f", verdict, self.vehicle_id, t)
        return Event(self.vehicle_id, port)