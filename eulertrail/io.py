"""Read trail graphs from component lists.

A component list has one edge per line, written ``a/b`` or ``a/b@weight``
where ``a`` and ``b`` are integer node ids. Without an explicit weight, the
weight follows the problem rules in ``TrailConfig.edge_weight``: ``a + b``
for problem 1, and ``a + b`` plus a large offset for problem 2 so that
longer trails always outrank stronger ones. Blank lines are ignored.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Union

from eulertrail.config import TRAIL_CONFIG
from eulertrail.graph import TrailGraph
from eulertrail.logging import get_logger

logger = get_logger(__name__)

_COMPONENT_RE = re.compile(r"^\s*(-?\d+)/(-?\d+)(?:@(\d+))?\s*$")


def components_to_graph(
    lines: Iterable[str],
    problem: int = 1,
    graph: Optional[TrailGraph] = None,
) -> TrailGraph:
    """Build or extend a TrailGraph from component lines.

    Args:
        lines: Lines of the form ``a/b`` or ``a/b@weight``.
        problem: Weight rule for lines without an explicit weight (1 or 2).
        graph: An existing graph to extend; if None, a new graph is created.

    Returns:
        The updated (or newly created) TrailGraph.

    Raises:
        RuntimeError: If a non-blank line is not a component.
        ValueError: If ``problem`` is not 1 or 2.
    """
    if graph is None:
        graph = TrailGraph()

    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        match = _COMPONENT_RE.match(line)
        if match is None:
            raise RuntimeError(
                f"Line {lineno} '{line}' is not a component (expected 'a/b' or 'a/b@weight')."
            )
        a, b = int(match.group(1)), int(match.group(2))
        if match.group(3) is not None:
            weight = int(match.group(3))
        else:
            weight = TRAIL_CONFIG.edge_weight(problem, a, b)
        graph.add_weighted_edge(a, b, weight)

    return graph


def read_graph(source: Union[str, Path], problem: int = 1) -> TrailGraph:
    """Read a component list from a file, or from stdin when ``source`` is ``-``."""
    if str(source) == "-":
        lines: List[str] = sys.stdin.readlines()
        graph = components_to_graph(lines, problem=problem)
    else:
        with open(source, "r", encoding="utf-8") as fh:
            graph = components_to_graph(fh, problem=problem)
    logger.debug(
        "Loaded %d nodes and %d edges from %s",
        graph.number_of_nodes(),
        graph.number_of_edges(),
        source,
    )
    return graph


def graph_to_components(graph: TrailGraph) -> List[str]:
    """Write a graph back as ``a/b@weight`` lines in edge-key order."""
    return [
        f"{u}/{v}@{attr['weight']}"
        for _, (u, v, _, attr) in sorted(graph.get_edges().items())
    ]
