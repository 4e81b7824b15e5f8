"""
bipartite-check: bipartiteness testing with odd-cycle certificates.

Given an undirected graph as an adjacency matrix, this package either
splits its vertices into two color classes with no edge inside a class,
or returns an odd cycle proving that no such split exists.

Modules:
- analyzer: Two-coloring and odd-cycle traversals
- graph: Read-only adjacency matrix graph
- fileio: Matrix text input and report output
- validation: Exceptions and input/result checks
"""

__version__ = "1.0.1"

# Core analysis
from .analyzer import (
    BipartitenessAnalyzer,
    analyze_bipartiteness,
    find_odd_cycle,
    is_bipartite,
    verify_odd_cycle,
    verify_partition,
)

# Input and report output
from .fileio import (
    format_report,
    load_matrix,
    parse_matrix,
    write_report,
)
from .graph import Graph
from .types import (
    Color,
    ColoringResult,
    MatrixLike,
    NotBipartite,
    OddCycle,
    Partition,
)

# Validation utilities
from .validation import (
    AsymmetricMatrixError,
    GraphStructureWarning,
    InvalidMatrixError,
    InvalidResultError,
    MatrixFormatError,
    TraversalInconsistencyError,
    ValidationError,
    validate_adjacency_matrix,
)

__all__ = [
    # Version
    "__version__",
    # Graph and result types
    "Graph",
    "Color",
    "Partition",
    "NotBipartite",
    "OddCycle",
    "ColoringResult",
    "MatrixLike",
    # Analysis
    "BipartitenessAnalyzer",
    "analyze_bipartiteness",
    "find_odd_cycle",
    "is_bipartite",
    "verify_partition",
    "verify_odd_cycle",
    # Input and output
    "parse_matrix",
    "load_matrix",
    "format_report",
    "write_report",
    # Validation
    "ValidationError",
    "InvalidMatrixError",
    "AsymmetricMatrixError",
    "MatrixFormatError",
    "InvalidResultError",
    "TraversalInconsistencyError",
    "GraphStructureWarning",
    "validate_adjacency_matrix",
]
