"""
Command-line entry point.

Usage:
    bipartite-check [INPUT] [-o OUTPUT] [--symmetrize] [--verify]

Reads ``input.txt`` and writes ``output.txt`` by default.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from . import __version__
from .analyzer import BipartitenessAnalyzer
from .fileio import format_report, load_matrix, write_report
from .validation import TraversalInconsistencyError, ValidationError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bipartite-check",
        description="Check whether a graph is bipartite; report its two color "
        "classes or an odd cycle.",
    )
    parser.add_argument(
        "input", nargs="?", default="input.txt", help="Adjacency matrix file (default: input.txt)"
    )
    parser.add_argument(
        "-o", "--output", default="output.txt", help="Report file, or '-' for stdout (default: output.txt)"
    )
    parser.add_argument(
        "--symmetrize",
        action="store_true",
        help="Accept an asymmetric matrix by treating every entry as an undirected edge",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check the partition or cycle against the matrix before reporting",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_parser().parse_args(argv)

    try:
        graph = load_matrix(args.input, symmetrize=args.symmetrize)
        analyzer = BipartitenessAnalyzer(graph, verify=args.verify).run()
    except FileNotFoundError:
        print(f"error: input file not found: {args.input}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except (ValidationError, TraversalInconsistencyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    report = format_report(analyzer.result, analyzer.cycle)

    if args.output == "-":
        sys.stdout.write(report)
    else:
        try:
            write_report(args.output, report)
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc.strerror or exc}", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
