"""Red-green-blue-alpha colours stored as bytes or as floats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _format_number(x: float) -> str:
    """Format a float with six significant digits, dropping trailing zeros."""
    return f"{x:g}"


def _clamped(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


@dataclass(frozen=True)
class ByteRGBA:
    """Colour with 8-bit components; arithmetic wraps modulo 256."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"component {name}={value} outside 0..255")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def __str__(self) -> str:
        return " ".join(str(c) for c in self)

    def format_comma(self) -> str:
        """Components separated by commas, e.g. for script output."""
        return ",".join(str(c) for c in self)

    def __add__(self, other: ByteRGBA) -> ByteRGBA:
        if not isinstance(other, ByteRGBA):
            return NotImplemented
        return ByteRGBA(*((x + y) % 256 for x, y in zip(self, other)))

    def __sub__(self, other: ByteRGBA) -> ByteRGBA:
        if not isinstance(other, ByteRGBA):
            return NotImplemented
        return ByteRGBA(*((x - y) % 256 for x, y in zip(self, other)))


@dataclass(frozen=True)
class FloatRGBA:
    """Colour with floating point components, nominally in [0, 1]."""

    r: float
    g: float
    b: float
    a: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))

    def __str__(self) -> str:
        return " ".join(_format_number(c) for c in self)

    def format_pov_rgb(self) -> str:
        """POV-Ray colour vector without alpha."""
        return f"<{_format_number(self.r)},{_format_number(self.g)},{_format_number(self.b)}>"

    def format_pov_rgbf(self) -> str:
        """POV-Ray colour vector with filter value (one minus alpha)."""
        return (
            f"<{_format_number(self.r)},{_format_number(self.g)},"
            f"{_format_number(self.b)},{_format_number(1.0 - self.a)}>"
        )

    def __add__(self, other: FloatRGBA) -> FloatRGBA:
        if not isinstance(other, FloatRGBA):
            return NotImplemented
        return FloatRGBA(*(x + y for x, y in zip(self, other)))

    def __sub__(self, other: FloatRGBA) -> FloatRGBA:
        if not isinstance(other, FloatRGBA):
            return NotImplemented
        return FloatRGBA(*(x - y for x, y in zip(self, other)))

    def __neg__(self) -> FloatRGBA:
        return FloatRGBA(*(-x for x in self))

    def __mul__(self, other: FloatRGBA | float) -> FloatRGBA:
        """Componentwise product with a colour, or scaling by a number."""
        if isinstance(other, FloatRGBA):
            return FloatRGBA(*(x * y for x, y in zip(self, other)))
        if isinstance(other, (int, float)):
            return FloatRGBA(*(other * x for x in self))
        return NotImplemented

    def __rmul__(self, other: float) -> FloatRGBA:
        if isinstance(other, (int, float)):
            return FloatRGBA(*(other * x for x in self))
        return NotImplemented

    def __truediv__(self, k: float) -> FloatRGBA:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return FloatRGBA(*(x / k for x in self))


def byte_from_float(c: FloatRGBA) -> ByteRGBA:
    """Scale components clamped to [0, 1] onto 0..255, truncating."""
    return ByteRGBA(*(int(255.0 * _clamped(x, 0.0, 1.0)) for x in c))


def float_from_byte(c: ByteRGBA) -> FloatRGBA:
    """Normalise byte components 0..255 onto [0, 1]."""
    return FloatRGBA(*(x / 255.0 for x in c))