"""
Result types for bipartiteness analysis.

This module provides the values produced by the analyzer:
- Color: Vertex color during two-coloring
- Partition: The two color classes of a bipartite graph
- NotBipartite: Outcome of a failed two-coloring
- OddCycle: A concrete odd cycle witnessing non-bipartiteness

All vertex indices stored here are 0-based.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

import numpy as np


class Color(IntEnum):
    """
    Vertex color used by the two-coloring traversal.

    Traversal roots always receive ``A``.
    """

    UNCOLORED = -1
    A = 0
    B = 1

    def opposite(self) -> Color:
        """Get the other color of the pair."""
        if self is Color.A:
            return Color.B
        if self is Color.B:
            return Color.A
        raise ValueError("UNCOLORED has no opposite")


@dataclass(frozen=True)
class Partition:
    """
    Two color classes of a bipartite graph.

    Vertices appear in the order the traversal colored them, not sorted.
    Either class may be empty (e.g. a graph with a single vertex).
    """

    first: tuple[int, ...]
    second: tuple[int, ...]

    def __iter__(self):
        yield self.first
        yield self.second

    def __len__(self) -> int:
        return len(self.first) + len(self.second)

    def side_of(self, vertex: int) -> Color:
        """Get the color class holding ``vertex``."""
        if vertex in self.first:
            return Color.A
        if vertex in self.second:
            return Color.B
        raise KeyError(vertex)

    def swapped(self) -> Partition:
        """Return the same partition with the classes exchanged."""
        return Partition(first=self.second, second=self.first)


@dataclass(frozen=True)
class NotBipartite:
    """
    Outcome of a two-coloring that hit an edge between equal colors.

    Attributes:
        conflict: The (vertex, neighbor) edge where coloring stopped
    """

    conflict: tuple[int, int]


@dataclass(frozen=True)
class OddCycle:
    """
    An odd cycle, stored as extracted by the traversal.

    ``vertices`` starts at the back-edge source and follows parent links
    back to the back-edge target. The closing vertex is not repeated.
    """

    vertices: tuple[int, ...]

    @property
    def forward(self) -> tuple[int, ...]:
        """Vertices in discovery order (reverse of extraction order)."""
        return self.vertices[::-1]

    def edges(self) -> list[tuple[int, int]]:
        """Consecutive vertex pairs, including the closing edge."""
        n = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)


ColoringResult = Union[Partition, NotBipartite]
MatrixLike = Union[Sequence[Sequence[Union[int, bool]]], np.ndarray]


__all__ = [
    "Color",
    "Partition",
    "NotBipartite",
    "OddCycle",
    "ColoringResult",
    "MatrixLike",
]
