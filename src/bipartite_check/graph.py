"""
Read-only undirected graph backed by an adjacency matrix.

The matrix is validated once at construction and then frozen; the
traversals in :mod:`bipartite_check.analyzer` only ever read it through
``neighbors()``, which yields vertices in ascending index order.
"""

from __future__ import annotations

import warnings
from typing import Iterable, Iterator

import numpy as np

from .types import MatrixLike
from .validation import (
    GraphStructureWarning,
    InvalidMatrixError,
    as_matrix_array,
    validate_adjacency_matrix,
    validate_vertex,
)


class Graph:
    """
    Undirected simple graph given as a V x V adjacency matrix.

    Example:
        graph = Graph([
            [0, 1, 0, 1],
            [1, 0, 1, 0],
            [0, 1, 0, 1],
            [1, 0, 1, 0],
        ])
        graph.neighbors(0)  # [1, 3]

    Attributes:
        num_vertices: Number of vertices V
        matrix: Read-only boolean adjacency matrix
    """

    def __init__(self, matrix: MatrixLike, *, symmetrize: bool = False) -> None:
        """
        Initialize graph from an adjacency matrix.

        Args:
            matrix: Square 0/1 (or boolean) matrix, nested sequences or numpy array
            symmetrize: If True, an asymmetric matrix is replaced by M | M.T
                with a GraphStructureWarning instead of being rejected
        """
        if isinstance(matrix, Graph):
            matrix = matrix.matrix

        validate_adjacency_matrix(matrix, check_symmetry=not symmetrize)
        adjacency = as_matrix_array(matrix).astype(bool)

        if symmetrize:
            mismatched = int(np.count_nonzero(adjacency != adjacency.T)) // 2
            if mismatched:
                warnings.warn(
                    f"Adjacency matrix is not symmetric ({mismatched} mismatched pair(s)); "
                    "treating every entry as an undirected edge.",
                    GraphStructureWarning,
                    stacklevel=2,
                )
                adjacency = adjacency | adjacency.T

        adjacency.flags.writeable = False
        self._matrix = adjacency
        self._adjacency: list[list[int]] = [
            np.flatnonzero(row).tolist() for row in adjacency
        ]

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[tuple[int, int]]) -> Graph:
        """
        Build a graph from 0-based undirected edges.

        Args:
            num_vertices: Number of vertices
            edges: (u, v) pairs; each pair adds both M[u][v] and M[v][u]

        Returns:
            New Graph
        """
        if num_vertices < 0:
            raise InvalidMatrixError(f"num_vertices must be >= 0, got {num_vertices}")

        matrix = np.zeros((num_vertices, num_vertices), dtype=bool)
        for u, v in edges:
            validate_vertex(u, num_vertices)
            validate_vertex(v, num_vertices)
            matrix[u, v] = True
            matrix[v, u] = True
        return cls(matrix)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        """Get the number of vertices."""
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        """Get the number of undirected edges."""
        return sum(len(nbrs) for nbrs in self._adjacency) // 2

    @property
    def matrix(self) -> np.ndarray:
        """Get the read-only boolean adjacency matrix."""
        return self._matrix

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def neighbors(self, vertex: int) -> list[int]:
        """Get neighbors of ``vertex`` in ascending index order."""
        return self._adjacency[vertex]

    def has_edge(self, u: int, v: int) -> bool:
        """Check whether u and v are adjacent."""
        return bool(self._matrix[u, v])

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate over edges (u, v) with u < v in lexicographic order."""
        for u, nbrs in enumerate(self._adjacency):
            for v in nbrs:
                if u < v:
                    yield u, v

    def transpose(self) -> Graph:
        """Return the graph of the transposed matrix."""
        return Graph(self._matrix.T)

    def __len__(self) -> int:
        return self.num_vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return np.array_equal(self._matrix, other._matrix)

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"


__all__ = ["Graph"]
