"""Tests for the adjacency matrix graph."""

import numpy as np
import pytest

from bipartite_check import (
    AsymmetricMatrixError,
    Graph,
    GraphStructureWarning,
    InvalidMatrixError,
    ValidationError,
)


class TestGraphConstruction:
    """Tests for building graphs."""

    def test_from_nested_lists(self):
        """Nested lists of 0/1 are accepted."""
        graph = Graph([[0, 1], [1, 0]])
        assert graph.num_vertices == 2
        assert graph.num_edges == 1

    def test_from_boolean_array(self):
        """Boolean numpy arrays are accepted."""
        graph = Graph(np.array([[False, True], [True, False]]))
        assert graph.has_edge(0, 1)

    def test_from_graph(self):
        """A Graph can be copied from another Graph."""
        graph = Graph([[0, 1], [1, 0]])
        assert Graph(graph) == graph

    def test_empty(self):
        """Empty matrix gives a graph with no vertices."""
        graph = Graph([])
        assert len(graph) == 0
        assert list(graph.edges()) == []

    def test_from_edges(self):
        """Edges are added in both directions."""
        graph = Graph.from_edges(3, [(0, 2)])
        assert graph.has_edge(0, 2)
        assert graph.has_edge(2, 0)
        assert not graph.has_edge(0, 1)

    def test_from_edges_out_of_bounds(self):
        """Out-of-range endpoints raise."""
        with pytest.raises(ValidationError, match="out of bounds"):
            Graph.from_edges(2, [(0, 2)])

    def test_from_edges_negative_count(self):
        """Negative vertex count raises."""
        with pytest.raises(InvalidMatrixError, match="num_vertices"):
            Graph.from_edges(-1, [])

    def test_asymmetric_rejected(self):
        """Asymmetric matrices are rejected by default."""
        with pytest.raises(AsymmetricMatrixError, match="not symmetric"):
            Graph([[0, 1], [0, 0]])

    def test_symmetrize(self):
        """symmetrize=True adds the missing reverse entries with a warning."""
        with pytest.warns(GraphStructureWarning, match="2 mismatched pair"):
            graph = Graph([[0, 1, 0], [0, 0, 0], [0, 1, 0]], symmetrize=True)
        assert graph.has_edge(1, 0)
        assert graph.has_edge(1, 2)
        assert graph.num_edges == 2

    def test_symmetrize_still_rejects_self_loops(self):
        """symmetrize does not relax other checks."""
        with pytest.raises(InvalidMatrixError, match="self-loop"):
            Graph([[1, 0], [0, 0]], symmetrize=True)


class TestGraphQueries:
    """Tests for graph accessors."""

    @pytest.fixture
    def graph(self):
        return Graph.from_edges(4, [(3, 0), (0, 1), (2, 0)])

    def test_neighbors_ascending(self, graph):
        """Neighbors are listed in ascending order."""
        assert graph.neighbors(0) == [1, 2, 3]
        assert graph.neighbors(3) == [0]

    def test_edges_lexicographic(self, graph):
        """Edges are listed once with u < v."""
        assert list(graph.edges()) == [(0, 1), (0, 2), (0, 3)]

    def test_matrix_is_read_only(self, graph):
        """The stored matrix cannot be modified."""
        with pytest.raises(ValueError):
            graph.matrix[0, 1] = False

    def test_input_is_not_frozen(self):
        """The caller's array stays writeable."""
        matrix = np.array([[0, 1], [1, 0]])
        Graph(matrix)
        matrix[0, 1] = 0

    def test_transpose_of_symmetric(self, graph):
        """Transpose of an undirected graph is the same graph."""
        assert graph.transpose() == graph

    def test_repr(self, graph):
        """repr shows size."""
        assert repr(graph) == "Graph(num_vertices=4, num_edges=3)"

    def test_hashable(self, graph):
        """Equal graphs hash equally."""
        assert hash(graph) == hash(Graph(graph.matrix))
