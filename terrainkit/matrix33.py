"""3x3 matrices stored as three column vectors, with rotation constructors."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Sequence, Tuple

Vector = Tuple[float, float, float]


def _vec(v: Sequence[float]) -> Vector:
    x, y, z = v
    return (float(x), float(y), float(z))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalised(v: Sequence[float]) -> Vector:
    magnitude = math.sqrt(_dot(v, v))
    if magnitude == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return (v[0] / magnitude, v[1] / magnitude, v[2] / magnitude)


def _check_index(i: int) -> None:
    if not 0 <= i < 3:
        raise IndexError(f"index {i} outside 0..2")


@dataclass(frozen=True)
class Matrix33:
    """A 3x3 matrix; ``x``, ``y`` and ``z`` are its column vectors."""

    x: Vector
    y: Vector
    z: Vector

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, _vec(getattr(self, name)))

    @property
    def basis(self) -> tuple[Vector, Vector, Vector]:
        """The column vectors in order."""
        return (self.x, self.y, self.z)

    def element(self, row: int, col: int) -> float:
        """The element at the given row and column."""
        _check_index(row)
        _check_index(col)
        return self.basis[col][row]

    def row(self, i: int) -> Vector:
        """A copy of row ``i``."""
        _check_index(i)
        return (self.x[i], self.y[i], self.z[i])

    def cofactor(self, row: int, col: int) -> float:
        """The 2x2 minor left after deleting the given row and column."""
        _check_index(row)
        _check_index(col)
        row0 = 1 if row == 0 else 0
        col0 = 1 if col == 0 else 0
        row1 = 1 if row == 2 else 2
        col1 = 1 if col == 2 else 2
        return (
            self.element(row0, col0) * self.element(row1, col1)
            - self.element(row0, col1) * self.element(row1, col0)
        )

    def determinant(self) -> float:
        return (
            self.element(0, 0) * self.cofactor(0, 0)
            - self.element(0, 1) * self.cofactor(0, 1)
            + self.element(0, 2) * self.cofactor(0, 2)
        )

    def inverted(self) -> Matrix33:
        """The inverse matrix; raises ZeroDivisionError if singular."""
        det = self.determinant()
        if det == 0.0:
            raise ZeroDivisionError("matrix is singular")

        def signed_cofactor(row: int, col: int) -> float:
            cf = self.cofactor(row, col)
            return -cf if (row + col) & 1 else cf

        # Element (i, j) of the adjugate is the signed cofactor (j, i).
        columns = (
            tuple(signed_cofactor(j, i) for i in range(3)) for j in range(3)
        )
        return Matrix33(*columns) / det

    def __mul__(self, other):
        """Product with a matrix, a scalar, or a 3-vector."""
        if isinstance(other, Matrix33):
            return Matrix33(*(self * column for column in other.basis))
        if isinstance(other, numbers.Real):
            return Matrix33(*(tuple(e * other for e in c) for c in self.basis))
        try:
            v = _vec(other)
        except (TypeError, ValueError):
            return NotImplemented
        return (_dot(self.row(0), v), _dot(self.row(1), v), _dot(self.row(2), v))

    def __rmul__(self, k):
        if isinstance(k, numbers.Real):
            return Matrix33(*(tuple(k * e for e in c) for c in self.basis))
        return NotImplemented

    def __truediv__(self, k):
        if isinstance(k, numbers.Real):
            return Matrix33(*(tuple(e / k for e in c) for c in self.basis))
        return NotImplemented


def identity() -> Matrix33:
    """The 3x3 identity matrix."""
    return Matrix33((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def rotate_about_x(angle: float) -> Matrix33:
    ca, sa = math.cos(angle), math.sin(angle)
    return Matrix33((1.0, 0.0, 0.0), (0.0, ca, sa), (0.0, -sa, ca))


def rotate_about_y(angle: float) -> Matrix33:
    ca, sa = math.cos(angle), math.sin(angle)
    return Matrix33((ca, 0.0, -sa), (0.0, 1.0, 0.0), (sa, 0.0, ca))


def rotate_about_z(angle: float) -> Matrix33:
    ca, sa = math.cos(angle), math.sin(angle)
    return Matrix33((ca, sa, 0.0), (-sa, ca, 0.0), (0.0, 0.0, 1.0))


def rotate_about_axis(axis: Sequence[float], angle: float) -> Matrix33:
    """Rotation by ``angle`` about a normalised ``axis``.

    Raises ValueError when the axis is parallel to the x axis, since no
    perpendicular frame can then be built from it.
    """
    axis = _vec(axis)
    ortho0 = _normalised(_cross(axis, (1.0, 0.0, 0.0)))
    ortho1 = _cross(axis, ortho0)
    xyz_to_axis = Matrix33(ortho0, ortho1, axis)
    axis_to_xyz = xyz_to_axis.inverted()
    return xyz_to_axis * rotate_about_z(angle) * axis_to_xyz