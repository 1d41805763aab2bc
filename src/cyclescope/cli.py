"""cyclescope CLI entry point.

Usage: uv run cyclescope [command]
"""
import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cyclescope.graph.adjacency import Graph

log = logging.getLogger(__name__)


def _add_detect_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "detect",
        help="Check a directed graph for a cycle with DFS, Kahn, or both.",
    )
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--matrix", metavar="PATH",
        help="Read a 0/1 adjacency matrix from PATH ('-' for stdin).",
    )
    source.add_argument(
        "--sample", metavar="NAME",
        help="Use a bundled sample graph (see 'cyclescope samples').",
    )
    source.add_argument(
        "--edges", metavar="LIST",
        help="Comma-separated edges like '0-1,1-2,2-0' (needs --vertices).",
    )
    p.add_argument(
        "--vertices", type=int, default=None,
        help="Vertex count; fixes the matrix size or resizes a sample.",
    )
    p.add_argument(
        "--algorithm", choices=("dfs", "kahn", "both"), default="both",
        help="Detector to run (default: both)",
    )
    p.add_argument(
        "--dfs-mode", choices=("auto", "recursive", "iterative"), default="auto",
        help="DFS form: call recursion or an explicit stack (default: auto)",
    )
    p.add_argument(
        "--show-matrix", action="store_true",
        help="Print the adjacency matrix and in-degrees before detecting.",
    )
    p.add_argument(
        "--fail-on-cycle", action="store_true",
        help="Exit with status 1 when a cycle is found.",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log the step-by-step trace of each algorithm.",
    )


def _add_samples_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser("samples", help="List the bundled sample graphs.")


def _load_graph(args: argparse.Namespace) -> "Graph":
    from cyclescope.loader import parse_edges, read_matrix
    from cyclescope.samples import build_sample

    if args.matrix is not None:
        return read_matrix(args.matrix, args.vertices)
    if args.sample is not None:
        return build_sample(args.sample, args.vertices)
    if args.vertices is None:
        raise ValueError("--edges needs --vertices")
    return parse_edges(args.edges, args.vertices)


def _run_detect(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    from cyclescope.graph import GraphError, detect_cycle, detect_cycle_kahn
    from cyclescope.report import (
        format_comparison,
        format_in_degrees,
        format_matrix,
        format_result,
    )

    try:
        graph = _load_graph(args)
    except (GraphError, KeyError, ValueError, OSError) as exc:
        # KeyError wraps its message in quotes; unwrap for display
        msg = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        parser.exit(2, f"cyclescope: error: {msg}\n")
    log.info("loaded %r", graph)

    if args.show_matrix:
        print(format_matrix(graph))
        print()
        print(format_in_degrees(graph))
        print()

    iterative = {"auto": None, "recursive": False, "iterative": True}[args.dfs_mode]
    results = {}
    if args.algorithm in ("dfs", "both"):
        results["dfs"] = detect_cycle(graph, iterative=iterative)
    if args.algorithm in ("kahn", "both"):
        results["kahn"] = detect_cycle_kahn(graph)

    for name, result in results.items():
        print(format_result(result, name, graph))
        print()
    if len(results) == 2:
        print(format_comparison(results["dfs"], results["kahn"]))

    found = any(r.has_cycle for r in results.values())
    return 1 if found and args.fail_on_cycle else 0


def _run_samples() -> int:
    from cyclescope.report import format_path
    from cyclescope.samples import SAMPLES

    for name in sorted(SAMPLES):
        s = SAMPLES[name]
        edges = ", ".join(format_path(e) for e in s.edges)
        print(f"{name:<12} {s.vertex_count} vertices  {s.description}")
        print(f"{'':<12} edges: {edges}")
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cyclescope",
        description="Directed cycle detection -- DFS recursion stack vs. Kahn's peel.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_detect_parser(subparsers)
    _add_samples_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "detect":
        sys.exit(_run_detect(args, parser))
    if args.command == "samples":
        sys.exit(_run_samples())
