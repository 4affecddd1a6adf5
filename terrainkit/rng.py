"""Reproducible uniform random numbers in [0, 1) from a 32-bit Mersenne Twister."""

from __future__ import annotations

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_WORD_MASK = 0xFFFFFFFF
_TWO_TO_32 = 4294967296.0


class _MersenneTwister:
    """MT19937 seeded with a single 32-bit word, yielding 32-bit integers."""

    __slots__ = ("_state", "_index")

    def __init__(self, seed: int) -> None:
        state = [seed & _WORD_MASK]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _WORD_MASK)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        s = self._state
        for i in range(_N):
            y = (s[i] & _UPPER_MASK) | (s[(i + 1) % _N] & _LOWER_MASK)
            value = s[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            s[i] = value
        self._index = 0

    def next_word(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _WORD_MASK


class Random01:
    """Generates random numbers in the range [0, 1).

    The sequence depends only on the seed, so anything built from it can be
    regenerated exactly.
    """

    __slots__ = ("_engine",)

    def __init__(self, seed: int = 0) -> None:
        self._engine = _MersenneTwister(seed)

    def __call__(self) -> float:
        """Return the next number in [0, 1)."""
        return self._engine.next_word() / _TWO_TO_32