"""Core discrete-event (DEVS) building blocks: events and atomic models."""

from __future__ import annotations

import math
from dataclasses import dataclass

INFINITY = math.inf


@dataclass(frozen=True)
class Event:
    """An output or input event: a value travelling through a numbered port."""

    value: float
    port: int = 0


class AtomicModel:
    """Base class for atomic DEVS models.

    The base behaviour is that of a passive model: it never schedules an
    internal transition and ignores every input.  Subclasses override the
    transition and output functions.

    ``elapsed`` holds the time since the model's last transition; the
    coordinator driving the simulation sets it before calling :meth:`dext`.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.sigma = INFINITY
        self.elapsed = 0.0

    def init(self, t: float) -> None:
        """Reset the model to its initial state at time ``t``."""
        self.sigma = INFINITY

    def ta(self, t: float) -> float:
        """Return the time remaining until the next internal transition."""
        return self.sigma

    def dint(self, t: float) -> None:
        """Internal transition, taken when the time advance expires."""
        self.sigma = INFINITY

    def dext(self, event: Event, t: float) -> None:
        """External transition, taken when an input event arrives."""

    def output(self, t: float) -> Event | None:
        """Output function, called just before an internal transition."""
        return None

    def exit(self) -> None:
        """Passivate the model when the simulation ends."""
        self.sigma = INFINITY

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"