"""Discrete-event atomic models of a parking lot, with events and a Mersenne Twister."""

__version__ = "0.1.0"