"""Command-line interface for eulertrail."""

from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter
from typing import List, Optional

from eulertrail.algorithms.brute import longest_trails_brute
from eulertrail.algorithms.longest_trail import (
    find_longest_trail,
    longest_trail_summary,
)
from eulertrail.algorithms.matching import matcher_fabric
from eulertrail.config import TRAIL_CONFIG
from eulertrail.io import read_graph
from eulertrail.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _format_weight(weight: Optional[int]) -> str:
    return "no path" if weight is None else str(weight)


def _solve(
    mode: str,
    path: str,
    problem: int,
    source: int,
    target: Optional[int],
    show_trail: bool,
    matcher_kind: Optional[str],
) -> None:
    """Load a component list and print the longest trail from ``source``.

    Args:
        mode: ``"fast"`` for the matching-based solver, ``"brute"`` for the
            exhaustive search.
        path: Component list file, or ``-`` for stdin.
        problem: Weight rule for components without an explicit weight.
        source: Node the trails start from.
        target: Optional node whose trail weight is printed as well.
        show_trail: Print the node sequence of the longest trail (fast only).
        matcher_kind: Matching solver name for fast mode.
    """
    logger.info(f"Loading components from: {path}")
    _start_time = perf_counter()

    try:
        graph = read_graph(path, problem=problem)
        print(f"{graph.number_of_nodes()} nodes")
        if source not in graph:
            raise KeyError(f"Source node '{source}' is not in the graph.")
        if target is not None and target not in graph:
            raise KeyError(f"Target node '{target}' is not in the graph.")

        if mode == "brute":
            weights = longest_trails_brute(graph, source)
            best_target = max(weights, key=lambda n: weights[n])
            best_weight = weights[best_target]
            target_weight = weights.get(target) if target is not None else None
        else:
            matcher = matcher_fabric(matcher_kind)
            summary = longest_trail_summary(graph, source, matcher=matcher)
            best_target, best_weight = summary.best_target, summary.best_weight
            target_weight = summary.weights[target] if target is not None else None

        if target is not None:
            print(f"longest path to {target}: {_format_weight(target_weight)}")
        print(f"longest path length: {best_weight}")

        if show_trail:
            if mode == "brute":
                logger.warning("--trail is only available in fast mode")
            else:
                trail = find_longest_trail(graph, source, best_target, matcher=matcher)
                if trail is not None:
                    print("trail: " + " ".join(str(n) for n in trail.nodes))

        _elapsed = perf_counter() - _start_time
        logger.info(f"Solved in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to solve: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``eulertrail`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="eulertrail",
        description="Find the heaviest trail (no repeated edge) in a component list.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{fast,brute}",
        help="Available commands",
    )

    fast_parser = subparsers.add_parser(
        "fast", help="Matching-based solver (polynomial time)"
    )
    fast_parser.add_argument(
        "--matcher",
        "-m",
        choices=["blossom", "exhaustive"],
        default=None,
        help=f"Perfect matching solver (default: {TRAIL_CONFIG.default_matcher})",
    )
    fast_parser.add_argument(
        "--trail",
        action="store_true",
        help="Also print the node sequence of the longest trail",
    )
    brute_parser = subparsers.add_parser(
        "brute", help="Exhaustive search (exponential time, small inputs only)"
    )

    for p in (fast_parser, brute_parser):
        p.add_argument(
            "input",
            nargs="?",
            default="-",
            help="Component list file ('-' or omitted reads stdin)",
        )
        p.add_argument(
            "--problem",
            "-p",
            type=int,
            choices=[1, 2],
            default=1,
            help="Weight rule for components without '@weight': 1 = a+b, 2 = longest first",
        )
        p.add_argument(
            "--source",
            "-s",
            type=int,
            default=TRAIL_CONFIG.default_source,
            help=f"Start node (default: {TRAIL_CONFIG.default_source})",
        )
        p.add_argument(
            "--target",
            "-t",
            type=int,
            default=None,
            help="Also report the longest trail ending at this node",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    _solve(
        mode=args.command,
        path=args.input,
        problem=args.problem,
        source=args.source,
        target=args.target,
        show_trail=getattr(args, "trail", False),
        matcher_kind=getattr(args, "matcher", None),
    )


if __name__ == "__main__":
    main()
