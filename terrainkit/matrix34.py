"""3x4 affine transforms: a 3x3 linear part plus a translation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .matrix33 import Matrix33, Vector
from .matrix33 import identity as _identity33
from .matrix33 import rotate_about_axis as _rotate_about_axis33


def _vec(v: Sequence[float]) -> Vector:
    x, y, z = v
    return (float(x), float(y), float(z))


def _add(a: Sequence[float], b: Sequence[float]) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


@dataclass(frozen=True)
class Matrix34:
    """Affine transform applying ``rotate`` and then adding ``translate``."""

    rotate: Matrix33
    translate: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "translate", _vec(self.translate))

    def __mul__(self, other):
        """Compose with another transform, or apply to a 3-vector."""
        if isinstance(other, Matrix34):
            return Matrix34(
                self.rotate * other.rotate,
                _add(self.rotate * other.translate, self.translate),
            )
        try:
            v = _vec(other)
        except (TypeError, ValueError):
            return NotImplemented
        return _add(self.rotate * v, self.translate)


def identity() -> Matrix34:
    return Matrix34(_identity33(), (0.0, 0.0, 0.0))


def translation(t: Sequence[float]) -> Matrix34:
    return Matrix34(_identity33(), t)


def rotate_about_axis_through(
    axis: Sequence[float], angle: float, pt: Sequence[float]
) -> Matrix34:
    """Rotation by ``angle`` about a normalised ``axis`` passing through ``pt``."""
    pt = _vec(pt)
    neg = (-pt[0], -pt[1], -pt[2])
    return (
        translation(pt)
        * Matrix34(_rotate_about_axis33(axis, angle), (0.0, 0.0, 0.0))
        * translation(neg)
    )


def rotate_by_axis_vector_through(
    axis: Sequence[float], pt: Sequence[float]
) -> Matrix34:
    """Rotation about ``axis`` through ``pt`` by an angle equal to its length.

    A zero-length axis gives the identity.
    """
    axis = _vec(axis)
    magnitude = math.sqrt(sum(c * c for c in axis))
    if magnitude == 0.0:
        return identity()
    unit = tuple(c / magnitude for c in axis)
    return rotate_about_axis_through(unit, magnitude, pt)