"""Triangles described by three vertex indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Triangle:
    """A triangle referring to three vertices of a mesh by index."""

    v0: int
    v1: int
    v2: int

    def vertex(self, i: int) -> int:
        """Index of corner ``i`` (0, 1 or 2)."""
        if not 0 <= i < 3:
            raise IndexError(f"triangle corner {i} outside 0..2")
        return (self.v0, self.v1, self.v2)[i]

    def __iter__(self) -> Iterator[int]:
        return iter((self.v0, self.v1, self.v2))