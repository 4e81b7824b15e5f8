"""
Bipartiteness analysis.

Two independent depth-first traversals over the same graph:

- Two-coloring: alternates colors and stops at the first edge joining
  equal colors (``analyze_bipartiteness``).
- Odd-cycle extraction: tracks parents and depths and reconstructs a
  cycle from the first back-edge that closes an odd cycle
  (``find_odd_cycle``).

Both scan start vertices and neighbors in ascending index order and use
an explicit stack, visiting vertices in the same order a recursive DFS
would.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import Graph
from .types import Color, ColoringResult, MatrixLike, NotBipartite, OddCycle, Partition
from .validation import InvalidResultError, TraversalInconsistencyError

GraphLike = Union[Graph, MatrixLike]


def _as_graph(graph: GraphLike) -> Graph:
    return graph if isinstance(graph, Graph) else Graph(graph)


# =============================================================================
# Two-Coloring
# =============================================================================


def analyze_bipartiteness(graph: GraphLike) -> ColoringResult:
    """
    Attempt to two-color a graph.

    Each uncolored vertex, in ascending order, starts a DFS with color A;
    every newly reached neighbor gets the opposite color of the vertex
    that reached it. The first edge found between two vertices of the same
    color ends the whole traversal.

    Args:
        graph: Graph or adjacency matrix

    Returns:
        Partition with the A and B classes in coloring order, or
        NotBipartite holding the conflicting edge.

    Example:
        >>> analyze_bipartiteness([[0, 1], [1, 0]])
        Partition(first=(0,), second=(1,))
    """
    graph = _as_graph(graph)
    n = graph.num_vertices

    colors = [Color.UNCOLORED] * n
    classes: dict[Color, list[int]] = {Color.A: [], Color.B: []}

    for start in range(n):
        if colors[start] is not Color.UNCOLORED:
            continue

        colors[start] = Color.A
        classes[Color.A].append(start)
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(graph.neighbors(start)))]

        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if colors[neighbor] is Color.UNCOLORED:
                    color = colors[vertex].opposite()
                    colors[neighbor] = color
                    classes[color].append(neighbor)
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
                if colors[neighbor] is colors[vertex]:
                    return NotBipartite(conflict=(vertex, neighbor))
            else:
                stack.pop()

    return Partition(first=tuple(classes[Color.A]), second=tuple(classes[Color.B]))


def is_bipartite(graph: GraphLike) -> bool:
    """Check whether a graph admits a two-coloring."""
    return isinstance(analyze_bipartiteness(graph), Partition)


# =============================================================================
# Odd-Cycle Extraction
# =============================================================================


def find_odd_cycle(graph: GraphLike) -> Optional[OddCycle]:
    """
    Find one odd cycle using DFS with parent tracking.

    A visited neighbor that is shallower than the current vertex (and is
    not its parent) is an ancestor, so the edge closes a cycle of
    ``depth[vertex] - depth[ancestor] + 1`` vertices. Back-edges closing
    an even cycle are passed over; the first one closing an odd cycle is
    reconstructed by walking parents from the current vertex up to the
    ancestor.

    Args:
        graph: Graph or adjacency matrix

    Returns:
        OddCycle in extraction order, or None if the graph is bipartite.

    Example:
        >>> find_odd_cycle([[0, 1, 1], [1, 0, 1], [1, 1, 0]]).vertices
        (2, 1, 0)
    """
    graph = _as_graph(graph)
    n = graph.num_vertices

    visited = [False] * n
    parent: list[Optional[int]] = [None] * n
    depth = [0] * n

    for start in range(n):
        if visited[start]:
            continue

        visited[start] = True
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(graph.neighbors(start)))]

        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    parent[neighbor] = vertex
                    depth[neighbor] = depth[vertex] + 1
                    stack.append((neighbor, iter(graph.neighbors(neighbor))))
                    break
                if neighbor == parent[vertex] or depth[neighbor] >= depth[vertex]:
                    continue
                if (depth[vertex] - depth[neighbor]) % 2 == 0:
                    return OddCycle(vertices=_walk_parents(parent, vertex, neighbor))
            else:
                stack.pop()

    return None


def _walk_parents(parent: list[Optional[int]], source: int, ancestor: int) -> tuple[int, ...]:
    """Collect source, its parent, ... up to and including ancestor."""
    path = [source]
    current = parent[source]
    while current != ancestor:
        assert current is not None, "ancestor not on parent chain"
        path.append(current)
        current = parent[current]
    path.append(ancestor)
    return tuple(path)


# =============================================================================
# Result Verification
# =============================================================================


def verify_partition(
    graph: GraphLike,
    partition: Partition,
    strict: bool = True,
) -> list[str]:
    """
    Check that a partition is a proper two-coloring of the graph.

    Args:
        graph: Graph or adjacency matrix
        partition: Candidate partition
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of issue descriptions

    Raises:
        InvalidResultError: If strict=True and the partition is invalid
    """
    graph = _as_graph(graph)
    n = graph.num_vertices
    issues: list[str] = []

    seen: set[int] = set()
    for vertex in (*partition.first, *partition.second):
        if vertex < 0 or vertex >= n:
            issues.append(f"Vertex {vertex} out of bounds [0, {n})")
        elif vertex in seen:
            issues.append(f"Vertex {vertex} appears more than once")
        seen.add(vertex)

    missing = sorted(set(range(n)) - seen)
    if missing:
        issues.append(f"Vertices not covered: {missing}")

    for name, members in (("first", partition.first), ("second", partition.second)):
        member_set = set(members)
        for u, v in graph.edges():
            if u in member_set and v in member_set:
                issues.append(f"Edge ({u}, {v}) lies inside the {name} class")

    if strict and issues:
        raise InvalidResultError("Invalid partition:\n" + "\n".join(issues))

    return issues


def verify_odd_cycle(
    graph: GraphLike,
    cycle: OddCycle,
    strict: bool = True,
) -> list[str]:
    """
    Check that a cycle is a simple odd cycle of the graph.

    Args:
        graph: Graph or adjacency matrix
        cycle: Candidate cycle
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of issue descriptions

    Raises:
        InvalidResultError: If strict=True and the cycle is invalid
    """
    graph = _as_graph(graph)
    n = graph.num_vertices
    issues: list[str] = []

    if len(cycle) < 3:
        issues.append(f"Cycle has {len(cycle)} vertices, expected at least 3")
    if len(cycle) % 2 == 0:
        issues.append(f"Cycle has even length {len(cycle)}")
    if len(set(cycle.vertices)) != len(cycle):
        issues.append("Cycle repeats a vertex")

    out_of_bounds = [v for v in cycle.vertices if v < 0 or v >= n]
    if out_of_bounds:
        issues.append(f"Vertices out of bounds [0, {n}): {out_of_bounds}")
    elif len(cycle) >= 2:
        for u, v in cycle.edges():
            if not graph.has_edge(u, v):
                issues.append(f"Missing edge ({u}, {v})")

    if strict and issues:
        raise InvalidResultError("Invalid odd cycle:\n" + "\n".join(issues))

    return issues


# =============================================================================
# Analyzer
# =============================================================================


class BipartitenessAnalyzer:
    """
    Runs the full analysis: two-coloring, then odd-cycle extraction if the
    coloring fails.

    Exactly one of ``partition`` and ``cycle`` is set after ``run()``.

    Example:
        analyzer = BipartitenessAnalyzer(matrix=[
            [0, 1, 1],
            [1, 0, 1],
            [1, 1, 0],
        ]).run()

        analyzer.is_bipartite  # False
        analyzer.cycle.forward  # (0, 1, 2)

    Attributes:
        graph: Graph under analysis
        is_bipartite: Whether the graph is bipartite (after run)
        partition: Color classes, or None if not bipartite
        cycle: Odd cycle, or None if bipartite
        conflict: Edge where two-coloring stopped, or None if bipartite
    """

    def __init__(
        self,
        graph: Optional[Graph] = None,
        *,
        matrix: Optional[MatrixLike] = None,
        symmetrize: bool = False,
        verify: bool = False,
    ) -> None:
        """
        Initialize analyzer.

        Args:
            graph: Prebuilt graph (mutually exclusive with matrix)
            matrix: Adjacency matrix to build the graph from
            symmetrize: Passed to Graph when building from ``matrix``
            verify: If True, check the produced partition or cycle and raise
                InvalidResultError when it does not hold
        """
        if graph is None and matrix is None:
            raise ValueError("Either graph or matrix must be given")
        if graph is not None and (matrix is not None or symmetrize):
            raise ValueError("matrix and symmetrize only apply when graph is not given")

        self._graph = graph if graph is not None else Graph(matrix, symmetrize=symmetrize)
        self._verify = bool(verify)

        # Output data
        self._result: Optional[ColoringResult] = None
        self._cycle: Optional[OddCycle] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Graph:
        """Get the graph under analysis."""
        return self._graph

    @property
    def verify(self) -> bool:
        """Get whether results are verified after run."""
        return self._verify

    @verify.setter
    def verify(self, value: bool) -> None:
        """Set whether results are verified after run."""
        self._verify = bool(value)

    @property
    def result(self) -> ColoringResult:
        """Get the two-coloring outcome."""
        if self._result is None:
            raise RuntimeError("run() has not been called")
        return self._result

    @property
    def is_bipartite(self) -> bool:
        """Check if the graph is bipartite."""
        return isinstance(self.result, Partition)

    @property
    def partition(self) -> Optional[Partition]:
        """Get the color classes (None if not bipartite)."""
        result = self.result
        return result if isinstance(result, Partition) else None

    @property
    def conflict(self) -> Optional[tuple[int, int]]:
        """Get the edge where coloring failed (None if bipartite)."""
        result = self.result
        return result.conflict if isinstance(result, NotBipartite) else None

    @property
    def cycle(self) -> Optional[OddCycle]:
        """Get the odd cycle (None if bipartite)."""
        if self._result is None:
            raise RuntimeError("run() has not been called")
        return self._cycle

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def run(self) -> Self:
        """
        Analyze the graph.

        Returns:
            self for chaining

        Raises:
            TraversalInconsistencyError: If coloring fails but no odd cycle
                is found
        """
        result = analyze_bipartiteness(self._graph)
        cycle: Optional[OddCycle] = None

        if isinstance(result, NotBipartite):
            cycle = find_odd_cycle(self._graph)
            if cycle is None:
                raise TraversalInconsistencyError(
                    f"Two-coloring failed at edge {result.conflict} "
                    "but no odd cycle was found"
                )

        if self._verify:
            if cycle is not None:
                verify_odd_cycle(self._graph, cycle)
            else:
                assert isinstance(result, Partition)
                verify_partition(self._graph, result)

        self._result = result
        self._cycle = cycle
        return self


__all__ = [
    "BipartitenessAnalyzer",
    "analyze_bipartiteness",
    "find_odd_cycle",
    "is_bipartite",
    "verify_partition",
    "verify_odd_cycle",
]
