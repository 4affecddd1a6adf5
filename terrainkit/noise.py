"""Perlin gradient noise and multi-octave sums of it."""

from __future__ import annotations

import math
from typing import Sequence

from .matrix33 import Vector
from .rng import Random01

_N = 256
_MASK = _N - 1


def _random_unit_vector(r01: Random01) -> Vector:
    """A direction drawn uniformly on the unit sphere."""
    while True:
        x = 2.0 * r01() - 1.0
        y = 2.0 * r01() - 1.0
        z = 2.0 * r01() - 1.0
        m2 = x * x + y * y + z * z
        if 0.0 < m2 <= 1.0:
            m = math.sqrt(m2)
            return (x / m, y / m, z / m)


def _value(q: Vector, rx: float, ry: float, rz: float) -> float:
    return rx * q[0] + ry * q[1] + rz * q[2]


def _surve(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


class Noise:
    """Perlin noise generator; the same seed always gives the same field."""

    def __init__(self, seed: int) -> None:
        r01 = Random01(seed)

        gradients = [_random_unit_vector(r01) for _ in range(_N)]

        perm = list(range(_N + 1))
        for i in range(_N, 0, -2):
            j = int(r01() * _N)
            perm[i], perm[j] = perm[j], perm[i]

        # Extend both tables so that lookups need no wrapping; the copy is
        # sequential, so later entries may read ones written earlier.
        perm.extend([0] * (_N + 1))
        gradients.extend([(0.0, 0.0, 0.0)] * (_N + 2))
        for i in range(_N + 2):
            perm[_N + i] = perm[i]
            gradients[_N + i] = gradients[i]

        self._p = perm
        self._g = gradients

    def __call__(self, p: Sequence[float]) -> float:
        """Noise value at point ``p``."""
        # Raise the frequency a little so the base case shows some variation.
        tx = 2.0 * p[0] + 10000.0
        ty = 2.0 * p[1] + 10000.0
        tz = 2.0 * p[2] + 10000.0

        itx, ity, itz = int(tx), int(ty), int(tz)

        bx0 = itx & _MASK
        bx1 = (bx0 + 1) & _MASK
        by0 = ity & _MASK
        by1 = (by0 + 1) & _MASK
        bz0 = itz & _MASK
        bz1 = (bz0 + 1) & _MASK

        perm, g = self._p, self._g
        i = perm[bx0]
        b00 = perm[i + by0]
        b01 = perm[i + by1]
        j = perm[bx1]
        b10 = perm[j + by0]
        b11 = perm[j + by1]

        rx0 = tx - itx
        ry0 = ty - ity
        rz0 = tz - itz
        rx1 = rx0 - 1.0
        ry1 = ry0 - 1.0
        rz1 = rz0 - 1.0

        sx = _surve(rx0)
        a0 = _lerp(sx, _value(g[b00 + bz0], rx0, ry0, rz0), _value(g[b10 + bz0], rx1, ry0, rz0))
        b0 = _lerp(sx, _value(g[b01 + bz0], rx0, ry1, rz0), _value(g[b11 + bz0], rx1, ry1, rz0))
        a1 = _lerp(sx, _value(g[b00 + bz1], rx0, ry0, rz1), _value(g[b10 + bz1], rx1, ry0, rz1))
        b1 = _lerp(sx, _value(g[b01 + bz1], rx0, ry1, rz1), _value(g[b11 + bz1], rx1, ry1, rz1))

        sy = _surve(ry0)
        c = _lerp(sy, a0, b0)
        d = _lerp(sy, a1, b1)

        sz = _surve(rz0)
        return 1.5 * _lerp(sz, c, d)


class MultiscaleNoise:
    """Sum of noise terms at doubling frequencies with decaying amplitudes.

    The amplitudes are normalised to sum to one.
    """

    def __init__(self, seed: int, terms: int, decay: float) -> None:
        self._noise = [Noise(seed + i) for i in range(terms)]
        raw = [decay**i for i in range(terms)]
        total = sum(raw)
        self._amplitude = [k / total for k in raw]

    @property
    def amplitudes(self) -> tuple[float, ...]:
        return tuple(self._amplitude)

    def __call__(self, p: Sequence[float]) -> float:
        """Noise value at point ``p``."""
        x, y, z = p
        return sum(
            amplitude * noise((x * (1 << i), y * (1 << i), z * (1 << i)))
            for i, (amplitude, noise) in enumerate(zip(self._amplitude, self._noise))
        )