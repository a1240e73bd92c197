"""Longest trail queries.

A trail from ``s`` to ``t`` uses every edge at most once. The heaviest such
trail is found by removing the lightest edge set that leaves an Euler trail
between ``s`` and ``t`` (see ``eulerize``) and keeping everything still
connected to ``s``.

The result is exact whenever the edges left after eulerization form a single
component. When the removal disconnects a heavy part of the graph that a
slightly heavier removal would have kept, the returned weight is a valid
trail but not the heaviest one; ``longest_trails_brute`` is the exhaustive
reference for such cases.
"""

from __future__ import annotations

from typing import Dict, Optional

from eulertrail.algorithms.aggregate import euler_trail, trail_weight
from eulertrail.algorithms.base import Cost
from eulertrail.algorithms.eulerize import eulerize
from eulertrail.algorithms.matching import Matcher, matcher_fabric
from eulertrail.algorithms.spf import cached_shortest_paths
from eulertrail.algorithms.types import Trail, TrailSummary
from eulertrail.graph import NodeID, TrailGraph
from eulertrail.logging import get_logger

logger = get_logger(__name__)


def longest_trail(
    graph: TrailGraph,
    src: NodeID,
    dst: NodeID,
    matcher: Optional[Matcher] = None,
) -> Optional[Cost]:
    """Weight of the longest trail from ``src`` to ``dst``.

    Args:
        graph: Trail graph.
        src: Trail start.
        dst: Trail end.
        matcher: Matching solver; defaults to ``matcher_fabric()``.

    Returns:
        The trail weight, ``0`` for the empty trail when ``src == dst`` has no
        usable circuit, or ``None`` when ``dst`` is unreachable from ``src``.

    Raises:
        KeyError: If ``src`` or ``dst`` is not in the graph.
        RuntimeError: If the matching or edge removal cannot be completed.
    """
    if dst not in graph:
        raise KeyError(f"Node '{dst}' is not in the graph.")
    if dst not in cached_shortest_paths(graph, src):
        logger.debug("Query %s -> %s: no path", src, dst)
        return None

    removed = eulerize(graph, src, dst, matcher=matcher)
    weight = trail_weight(graph, src, removed)
    logger.debug(
        "Query %s -> %s: removed %d edges, trail weight %d",
        src,
        dst,
        len(removed),
        weight,
    )
    return weight


def find_longest_trail(
    graph: TrailGraph,
    src: NodeID,
    dst: NodeID,
    matcher: Optional[Matcher] = None,
) -> Optional[Trail]:
    """The longest trail from ``src`` to ``dst`` as a node/edge sequence.

    Returns ``None`` when ``dst`` is unreachable from ``src``. The trail's
    weight equals ``longest_trail`` for the same query.
    """
    if dst not in graph:
        raise KeyError(f"Node '{dst}' is not in the graph.")
    if dst not in cached_shortest_paths(graph, src):
        return None
    removed = eulerize(graph, src, dst, matcher=matcher)
    return euler_trail(graph, src, dst, removed)


def longest_paths_from(
    graph: TrailGraph,
    src: NodeID,
    matcher: Optional[Matcher] = None,
) -> Dict[NodeID, Optional[Cost]]:
    """Longest trail weight from ``src`` to every node of the graph.

    Each target is an independent query; unreachable targets map to
    ``None``. One matcher instance serves all queries.
    """
    if matcher is None:
        matcher = matcher_fabric()
    return {dst: longest_trail(graph, src, dst, matcher=matcher) for dst in graph.nodes}


def longest_trail_summary(
    graph: TrailGraph,
    src: NodeID,
    matcher: Optional[Matcher] = None,
) -> TrailSummary:
    """Longest trails from ``src`` and the heaviest among them.

    Ties keep the earliest target in graph order. When no trail weighs more
    than ``0`` the summary reports ``src`` itself.
    """
    weights = longest_paths_from(graph, src, matcher=matcher)
    best_target: NodeID = src
    best_weight: Cost = 0
    for dst, weight in weights.items():
        if weight is not None and weight > best_weight:
            best_target, best_weight = dst, weight
    logger.debug(
        "Longest trail from %s ends at %s with weight %d", src, best_target, best_weight
    )
    return TrailSummary(
        source=src, weights=weights, best_target=best_target, best_weight=best_weight
    )
