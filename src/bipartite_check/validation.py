"""
Input validation utilities for bipartiteness analysis.

Provides the exception hierarchy shared by the package and centralized
checks for adjacency matrices and analysis results. Validators raise
descriptive exceptions, or return a list of issues when ``strict=False``.
"""

from __future__ import annotations

from typing import Any

import numpy as np


class ValidationError(ValueError):
    """Base exception for graph validation errors."""

    pass


class InvalidMatrixError(ValidationError):
    """Raised when an adjacency matrix is malformed."""

    pass


class AsymmetricMatrixError(InvalidMatrixError):
    """Raised when an adjacency matrix does not describe an undirected graph."""

    pass


class MatrixFormatError(ValidationError):
    """Raised when matrix text cannot be parsed."""

    pass


class InvalidResultError(ValidationError):
    """Raised when a partition or cycle does not hold for its graph."""

    pass


class TraversalInconsistencyError(RuntimeError):
    """Raised when coloring fails but no odd cycle can be extracted."""

    pass


class GraphStructureWarning(UserWarning):
    """Warning issued when graph structure doesn't match algorithm assumptions."""

    pass


def as_matrix_array(matrix: Any) -> np.ndarray:
    """
    Convert a matrix-like object to a 2D numpy array.

    Args:
        matrix: Nested sequences or numpy array

    Returns:
        Array with at least two dimensions (not yet checked for values)

    Raises:
        InvalidMatrixError: If the input is ragged or not two-dimensional
    """
    try:
        arr = np.asarray(matrix)
    except ValueError as exc:
        raise InvalidMatrixError(f"Adjacency matrix rows are ragged: {exc}") from exc

    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 0)
    if arr.ndim != 2:
        raise InvalidMatrixError(
            f"Adjacency matrix must be two-dimensional, got {arr.ndim} dimension(s)"
        )
    return arr


def validate_adjacency_matrix(
    matrix: Any,
    strict: bool = True,
    check_symmetry: bool = True,
) -> list[str]:
    """
    Validate that a matrix is a square 0/1 adjacency matrix.

    Args:
        matrix: Nested sequences or numpy array
        strict: If True, raises on invalid. If False, returns list of issues.
        check_symmetry: If False, asymmetric entries are not reported

    Returns:
        List of issue descriptions

    Raises:
        InvalidMatrixError: If strict=True and the matrix is malformed
        AsymmetricMatrixError: If strict=True and the only problem is asymmetry
    """
    arr = as_matrix_array(matrix)
    issues: list[str] = []

    rows, cols = arr.shape
    if rows != cols:
        issues.append(f"Adjacency matrix must be square, got {rows}x{cols}")
        if strict:
            raise InvalidMatrixError(issues[0])
        return issues

    if arr.dtype != np.bool_:
        if not np.issubdtype(arr.dtype, np.number):
            issues.append(f"Adjacency matrix entries must be numeric, got dtype {arr.dtype}")
        else:
            bad = np.argwhere((arr != 0) & (arr != 1))
            for i, j in bad[:5]:
                issues.append(f"Entry ({i}, {j}) is {arr[i, j].item()!r}, expected 0 or 1")
            if len(bad) > 5:
                issues.append(f"... and {len(bad) - 5} more non-binary entries")

    if issues:
        if strict:
            raise InvalidMatrixError("Invalid adjacency matrix:\n" + "\n".join(issues))
        return issues

    adjacency = arr.astype(bool)

    for v in np.flatnonzero(np.diag(adjacency)):
        issues.append(f"Vertex {v} has a self-loop")

    if issues and strict:
        raise InvalidMatrixError("Invalid adjacency matrix:\n" + "\n".join(issues))

    if check_symmetry:
        asymmetric = [
            (int(i), int(j)) for i, j in np.argwhere(adjacency != adjacency.T) if i < j
        ]
        for i, j in asymmetric:
            issues.append(f"Entries ({i}, {j}) and ({j}, {i}) differ")
        if asymmetric and strict:
            raise AsymmetricMatrixError(
                "Adjacency matrix is not symmetric:\n" + "\n".join(issues)
            )

    return issues


def validate_vertex(vertex: int, num_vertices: int) -> int:
    """
    Validate a vertex index is within bounds.

    Raises:
        ValidationError: If vertex not in [0, num_vertices)
    """
    if vertex < 0 or vertex >= num_vertices:
        raise ValidationError(
            f"Vertex index {vertex} out of bounds [0, {num_vertices})"
        )
    return vertex


__all__ = [
    "ValidationError",
    "InvalidMatrixError",
    "AsymmetricMatrixError",
    "MatrixFormatError",
    "InvalidResultError",
    "TraversalInconsistencyError",
    "GraphStructureWarning",
    "as_matrix_array",
    "validate_adjacency_matrix",
    "validate_vertex",
]
