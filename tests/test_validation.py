"""Tests for input validation module."""

import numpy as np
import pytest

from bipartite_check.validation import (
    AsymmetricMatrixError,
    InvalidMatrixError,
    ValidationError,
    as_matrix_array,
    validate_adjacency_matrix,
    validate_vertex,
)


class TestMatrixShape:
    """Tests for matrix shape validation."""

    def test_valid_matrix(self):
        """Valid matrix returns empty issues list."""
        assert validate_adjacency_matrix([[0, 1], [1, 0]]) == []

    def test_empty_list(self):
        """Empty list is a 0x0 matrix."""
        assert as_matrix_array([]).shape == (0, 0)
        assert validate_adjacency_matrix([]) == []

    def test_non_square_raises(self):
        """Non-square matrix raises InvalidMatrixError."""
        with pytest.raises(InvalidMatrixError, match="must be square, got 2x3"):
            validate_adjacency_matrix([[0, 1, 0], [1, 0, 1]])

    def test_ragged_raises(self):
        """Rows of different lengths raise InvalidMatrixError."""
        with pytest.raises(InvalidMatrixError, match="ragged"):
            validate_adjacency_matrix([[0, 1], [1]])

    def test_three_dimensional_raises(self):
        """Arrays with more than two dimensions raise."""
        with pytest.raises(InvalidMatrixError, match="two-dimensional"):
            validate_adjacency_matrix(np.zeros((2, 2, 2)))

    def test_non_square_non_strict(self):
        """strict=False returns the shape issue."""
        issues = validate_adjacency_matrix([[0, 1, 0], [1, 0, 1]], strict=False)
        assert issues == ["Adjacency matrix must be square, got 2x3"]


class TestMatrixEntries:
    """Tests for matrix entry validation."""

    def test_boolean_accepted(self):
        """Boolean matrices are valid."""
        assert validate_adjacency_matrix(np.eye(2, dtype=bool)[::-1]) == []

    def test_float_ones_accepted(self):
        """Float 0.0/1.0 entries are valid."""
        assert validate_adjacency_matrix([[0.0, 1.0], [1.0, 0.0]]) == []

    def test_non_binary_raises(self):
        """Entries other than 0/1 raise."""
        with pytest.raises(InvalidMatrixError, match=r"Entry \(0, 1\) is 2, expected 0 or 1"):
            validate_adjacency_matrix([[0, 2], [2, 0]])

    def test_non_numeric_raises(self):
        """String entries raise."""
        with pytest.raises(InvalidMatrixError, match="must be numeric"):
            validate_adjacency_matrix([["0", "1"], ["1", "0"]])

    def test_many_non_binary_truncated(self):
        """Only the first few bad entries are listed."""
        issues = validate_adjacency_matrix(np.full((3, 3), 7), strict=False)
        assert len(issues) == 6
        assert issues[-1] == "... and 4 more non-binary entries"

    def test_self_loop_raises(self):
        """Non-zero diagonal raises."""
        with pytest.raises(InvalidMatrixError, match="Vertex 1 has a self-loop"):
            validate_adjacency_matrix([[0, 0], [0, 1]])


class TestMatrixSymmetry:
    """Tests for symmetry validation."""

    def test_asymmetric_raises(self):
        """Asymmetric matrix raises AsymmetricMatrixError."""
        with pytest.raises(AsymmetricMatrixError, match=r"\(0, 1\) and \(1, 0\) differ"):
            validate_adjacency_matrix([[0, 1], [0, 0]])

    def test_asymmetric_is_invalid_matrix(self):
        """AsymmetricMatrixError is an InvalidMatrixError."""
        assert issubclass(AsymmetricMatrixError, InvalidMatrixError)
        assert issubclass(InvalidMatrixError, ValidationError)
        assert issubclass(ValidationError, ValueError)

    def test_asymmetric_non_strict(self):
        """strict=False lists each mismatched pair once."""
        matrix = [[0, 1, 1], [0, 0, 0], [0, 1, 0]]
        issues = validate_adjacency_matrix(matrix, strict=False)
        assert issues == [
            "Entries (0, 1) and (1, 0) differ",
            "Entries (0, 2) and (2, 0) differ",
            "Entries (1, 2) and (2, 1) differ",
        ]

    def test_symmetry_check_disabled(self):
        """check_symmetry=False skips the symmetry check."""
        assert validate_adjacency_matrix([[0, 1], [0, 0]], check_symmetry=False) == []


class TestVertexValidation:
    """Tests for vertex index validation."""

    def test_valid_vertex(self):
        """In-range vertex is returned."""
        assert validate_vertex(2, 3) == 2

    def test_negative_vertex(self):
        """Negative vertex raises."""
        with pytest.raises(ValidationError, match="out of bounds"):
            validate_vertex(-1, 3)

    def test_too_large_vertex(self):
        """Vertex equal to count raises."""
        with pytest.raises(ValidationError, match=r"\[0, 3\)"):
            validate_vertex(3, 3)
