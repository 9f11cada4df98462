"""A 32-bit Mersenne Twister (MT19937) pseudo-random number generator."""

from __future__ import annotations

DEFAULT_SEED = 5489

_N = 624
_M = 397
_MASK32 = 0xFFFFFFFF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF
_MATRIX_A = 0x9908B0DF
_INIT_FACTOR = 1812433253


class MersenneTwister:
    """MT19937 generator with its own state, independent of :mod:`random`."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state: list[int] = []
        self._index = _N
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reinitialise the state from a 32-bit seed."""
        value = seed & _MASK32
        state = [value]
        for i in range(1, _N):
            value = (_INIT_FACTOR * (value ^ (value >> 30)) + i) & _MASK32
            state.append(value)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def random_bits(self) -> int:
        """Return the next 32-bit unsigned integer."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def random(self) -> float:
        """Return a float uniformly distributed in [0, 1)."""
        return self.random_bits() / 4294967296.0