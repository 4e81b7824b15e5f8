#!/usr/bin/env python3
"""
Generate random adjacency matrix input files.

Creates bipartite and general random graphs in the input format read by
``bipartite-check`` (vertex count, then one matrix row per line).

Usage:
    uv run python scripts/generate_matrices.py --vertices 20 --count 5
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from bipartite_check import BipartitenessAnalyzer, Graph

OUTPUT_DIR = Path(__file__).parent.parent / "build" / "matrices"


def generate_erdos_renyi(n: int, p: float, rng: np.random.Generator) -> np.ndarray:
    """
    Generate Erdős-Rényi random graph G(n, p) as an adjacency matrix.

    Each possible edge exists independently with probability p.
    """
    upper = np.triu(rng.random((n, n)) < p, k=1)
    return (upper | upper.T).astype(np.int64)


def generate_bipartite(n_top: int, n_bottom: int, p: float, rng: np.random.Generator) -> np.ndarray:
    """Generate a random bipartite graph with shuffled vertex labels."""
    n = n_top + n_bottom
    matrix = np.zeros((n, n), dtype=np.int64)
    block = (rng.random((n_top, n_bottom)) < p).astype(np.int64)
    matrix[:n_top, n_top:] = block
    matrix[n_top:, :n_top] = block.T

    perm = rng.permutation(n)
    return matrix[np.ix_(perm, perm)]


def to_input_text(matrix: np.ndarray) -> str:
    """Render a matrix in the input file format."""
    lines = [str(len(matrix))]
    lines.extend(" ".join(str(int(x)) for x in row) for row in matrix)
    return "\n".join(lines) + "\n"


def main():
    parser = argparse.ArgumentParser(description="Generate random adjacency matrix files")
    parser.add_argument("--vertices", type=int, default=12, help="Vertices per graph")
    parser.add_argument("--count", type=int, default=4, help="Graphs per family")
    parser.add_argument("--density", type=float, default=0.3, help="Edge probability")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR, help="Output directory")
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    args.output.mkdir(parents=True, exist_ok=True)

    print(f"{'File':<30} {'Edges':>8} {'Bipartite':>10}")
    print("-" * 50)

    for i in range(args.count):
        top = args.vertices // 2
        families = {
            f"bipartite_{i:02d}": generate_bipartite(top, args.vertices - top, args.density, rng),
            f"random_{i:02d}": generate_erdos_renyi(args.vertices, args.density, rng),
        }
        for name, matrix in families.items():
            path = args.output / f"{name}.txt"
            path.write_text(to_input_text(matrix), encoding="utf-8")

            analyzer = BipartitenessAnalyzer(Graph(matrix), verify=True).run()
            print(f"{path.name:<30} {analyzer.graph.num_edges:>8} {str(analyzer.is_bipartite):>10}")

    print(f"\nMatrices saved to {args.output}")


if __name__ == "__main__":
    main()
