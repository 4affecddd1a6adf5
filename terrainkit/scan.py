"""Interfaces for scan-converting triangles onto a raster."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from .matrix33 import Vector


@dataclass
class ScanEdge:
    """One end of a scanline span.

    The span end lies at ``x`` on the edge from triangle corner ``vertex0``
    to ``vertex1``, weighted by ``lambda_`` towards ``vertex1``, so clients
    can interpolate any per-vertex quantity.
    """

    x: float
    vertex0: int
    vertex1: int
    lambda_: float


class ScanConverter(ABC):
    """Turns a triangle into a series of half-open scanline spans."""

    @abstractmethod
    def scan_convert(
        self, vertices: Sequence[Vector], backend: ScanConvertBackend
    ) -> None:
        """Emit spans for the three ``vertices`` to ``backend``."""


class ScanConvertBackend(ABC):
    """Receives scanline spans for a raster of fixed size."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @abstractmethod
    def scan_convert_backend(self, y: int, edge0: ScanEdge, edge1: ScanEdge) -> None:
        """Handle the span on row ``y`` between the two edges."""

    @abstractmethod
    def subdivide(
        self, vertices: Sequence[Vector], point: Vector, converter: ScanConverter
    ) -> None:
        """Split the triangle at ``point`` and convert the parts."""