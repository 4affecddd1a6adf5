"""Undirected triangle edges identified by their two vertex indices."""

from __future__ import annotations


class TriangleEdge:
    """An edge between two vertices, stored with the lesser index first.

    Edges compare and hash by their ordered vertex pair, so they can key
    dictionaries when finding triangles that share an edge.
    """

    __slots__ = ("_vertex0", "_vertex1")

    def __init__(self, v0: int, v1: int) -> None:
        self._vertex0 = min(v0, v1)
        self._vertex1 = max(v0, v1)

    @property
    def vertex0(self) -> int:
        """The lesser vertex index."""
        return self._vertex0

    @property
    def vertex1(self) -> int:
        """The greater vertex index."""
        return self._vertex1

    def _key(self) -> tuple[int, int]:
        return (self._vertex0, self._vertex1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleEdge):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: TriangleEdge) -> bool:
        if not isinstance(other, TriangleEdge):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"TriangleEdge({self._vertex0}, {self._vertex1})"