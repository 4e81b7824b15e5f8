"""
Text input and report output for bipartiteness analysis.

Input format:
    V
    row 1 (V space-separated 0/1 entries)
    ...
    row V

Report format (vertex IDs are 1-based):
    bipartite:      one line per color class
    not bipartite:  ``NOT BIPARTITE`` followed by the odd cycle

Example usage:
    from bipartite_check import BipartitenessAnalyzer
    from bipartite_check.fileio import format_report, load_matrix, write_report

    analyzer = BipartitenessAnalyzer(load_matrix("input.txt")).run()
    write_report("output.txt", format_report(analyzer.result, analyzer.cycle))
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from .graph import Graph
from .types import ColoringResult, NotBipartite, OddCycle, Partition
from .validation import MatrixFormatError

PathLike = Union[str, Path]

NOT_BIPARTITE = "NOT BIPARTITE"


# =============================================================================
# Input
# =============================================================================


def parse_matrix(text: str, *, symmetrize: bool = False) -> Graph:
    """
    Parse a vertex count and adjacency matrix rows.

    Args:
        text: File contents
        symmetrize: Passed to Graph

    Returns:
        Parsed Graph

    Raises:
        MatrixFormatError: If the text does not follow the input format
        InvalidMatrixError: If the entries do not form a valid adjacency matrix
    """
    lines = text.splitlines()

    # Skip leading blank lines
    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1
    if index == len(lines):
        raise MatrixFormatError("Input is empty, expected a vertex count")

    header = lines[index].strip()
    try:
        num_vertices = int(header)
    except ValueError:
        raise MatrixFormatError(
            f"Line {index + 1}: vertex count must be an integer, got {header!r}"
        ) from None
    if num_vertices < 0:
        raise MatrixFormatError(
            f"Line {index + 1}: vertex count must be >= 0, got {num_vertices}"
        )

    rows: list[list[int]] = []
    for offset in range(num_vertices):
        line_no = index + offset + 2
        if index + offset + 1 >= len(lines):
            raise MatrixFormatError(
                f"Expected {num_vertices} matrix rows, found {offset} "
                f"(input ends at line {len(lines)})"
            )
        rows.append(_parse_row(lines[index + offset + 1], line_no, num_vertices))

    for line_no, line in enumerate(lines[index + num_vertices + 1 :], start=index + num_vertices + 2):
        if line.strip():
            raise MatrixFormatError(
                f"Line {line_no}: unexpected content after {num_vertices} matrix rows"
            )

    matrix = np.array(rows, dtype=np.int64).reshape(num_vertices, num_vertices)
    return Graph(matrix, symmetrize=symmetrize)


def _parse_row(line: str, line_no: int, num_vertices: int) -> list[int]:
    tokens = line.split()
    if len(tokens) != num_vertices:
        raise MatrixFormatError(
            f"Line {line_no}: expected {num_vertices} entries, got {len(tokens)}"
        )
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise MatrixFormatError(f"Line {line_no}: {exc}") from None
    for column, value in enumerate(values):
        if value not in (0, 1):
            raise MatrixFormatError(
                f"Line {line_no}: entry {column + 1} is {tokens[column]}, expected 0 or 1"
            )
    return values


def load_matrix(path: PathLike, *, symmetrize: bool = False) -> Graph:
    """
    Read and parse an adjacency matrix file.

    Raises:
        OSError: If the file cannot be read (missing, a directory, no permission)
        MatrixFormatError: If the file is not UTF-8 text or does not follow
            the input format
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MatrixFormatError(f"{path}: not valid UTF-8 text ({exc.reason})") from None
    return parse_matrix(text, symmetrize=symmetrize)


# =============================================================================
# Output
# =============================================================================


def format_vertices(vertices: Sequence[int]) -> str:
    """Join 0-based vertices as space-separated 1-based IDs."""
    return " ".join(str(vertex + 1) for vertex in vertices)


def format_report(result: ColoringResult, cycle: Optional[OddCycle] = None) -> str:
    """
    Render an analysis outcome in the report format.

    The last line is terminated with a newline too, so the text differs
    from a report written without one only in that final byte.

    Args:
        result: Two-coloring outcome
        cycle: Odd cycle, required when ``result`` is NotBipartite

    Returns:
        Report text ending with a newline

    Example:
        >>> format_report(Partition(first=(0, 2), second=(1, 3)))
        '1 3\\n2 4\\n'
    """
    if isinstance(result, Partition):
        lines = [format_vertices(result.first), format_vertices(result.second)]
    elif isinstance(result, NotBipartite):
        if cycle is None:
            raise ValueError("A not-bipartite report needs an odd cycle")
        lines = [NOT_BIPARTITE, format_vertices(cycle.forward)]
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")

    return "\n".join(lines) + "\n"


def write_report(path: PathLike, report: str) -> None:
    """Write report text to a file, replacing any existing contents."""
    Path(path).write_text(report, encoding="utf-8")


__all__ = [
    "NOT_BIPARTITE",
    "parse_matrix",
    "load_matrix",
    "format_vertices",
    "format_report",
    "write_report",
]
