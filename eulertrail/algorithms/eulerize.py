"""Edge removal that leaves a graph with an Euler trail between two nodes.

The exposed nodes of a query are paired by a minimum-weight perfect matching
over shortest-path distances; removing the edges of each pair's shortest
path flips the parity of exactly the two paired nodes. The union of these
paths is a minimum-weight T-join whenever the paths are edge-disjoint, which
holds for any optimal matching when all weights are positive.

Removed edges are collected in a per-query set of edge keys; the graph is
never modified.
"""

from __future__ import annotations

from typing import Optional, Set

from eulertrail.algorithms.exposed import exposed_nodes, matching_edges
from eulertrail.algorithms.matching import Matcher, matched_pairs, matcher_fabric
from eulertrail.algorithms.spf import cached_shortest_paths, path_edges
from eulertrail.graph import EdgeID, NodeID, TrailGraph
from eulertrail.logging import get_logger

logger = get_logger(__name__)


def mark_edge(graph: TrailGraph, u: NodeID, v: NodeID, removed: Set[EdgeID]) -> EdgeID:
    """Remove one edge between ``u`` and ``v`` from the query's edge set.

    Picks the lightest edge not yet removed (ties keep the earliest key).

    Returns:
        EdgeID: The key of the removed edge.

    Raises:
        RuntimeError: If every edge between ``u`` and ``v`` is already removed.
    """
    candidates = graph._adj[u].get(v, {})  # type: ignore[attr-defined]
    chosen: Optional[EdgeID] = None
    chosen_weight = 0
    for e_id, e_attr in candidates.items():
        if e_id in removed:
            continue
        if chosen is None or e_attr["weight"] < chosen_weight:
            chosen = e_id
            chosen_weight = e_attr["weight"]

    if chosen is None:
        raise RuntimeError(
            f"No unmarked edge left between {u} and {v}; "
            "shortest paths of two matched pairs need the same edge."
        )
    removed.add(chosen)
    logger.debug("    mark %s - %s (edge %s, weight %d)", u, v, chosen, chosen_weight)
    return chosen


def mark_path(
    graph: TrailGraph, src: NodeID, dst: NodeID, removed: Set[EdgeID]
) -> None:
    """Remove the edges of the cached shortest path from ``src`` to ``dst``.

    Walks the predecessor chain from ``dst`` back to ``src``.
    """
    for u, v, _ in path_edges(cached_shortest_paths(graph, src), dst):
        mark_edge(graph, u, v, removed)


def eulerize(
    graph: TrailGraph,
    src: NodeID,
    dst: NodeID,
    matcher: Optional[Matcher] = None,
) -> Set[EdgeID]:
    """Edges to remove so that an Euler trail from ``src`` to ``dst`` exists.

    Afterwards every node has even degree over the remaining edges, except
    ``src`` and ``dst`` which are odd (all even if ``src == dst``). The
    remaining component containing ``src`` then holds an Euler trail from
    ``src`` to ``dst``.

    Args:
        graph: Trail graph.
        src: Trail start.
        dst: Trail end.
        matcher: Matching solver; defaults to ``matcher_fabric()``.

    Returns:
        Set[EdgeID]: Keys of the removed edges.

    Raises:
        KeyError: If ``src`` or ``dst`` is not in the graph.
        RuntimeError: If the exposed nodes have no perfect matching, or two
            matched shortest paths compete for the same edge.
    """
    exposed = exposed_nodes(graph, src, dst)
    removed: Set[EdgeID] = set()
    if not exposed:
        return removed

    logger.debug(
        "Query %s -> %s: %d exposed nodes %s", src, dst, len(exposed), exposed
    )
    edges = matching_edges(graph, exposed)
    if matcher is None:
        matcher = matcher_fabric()
    mate = matcher.solve(len(exposed), edges)

    for id_u, id_v in matched_pairs(mate):
        u, v = exposed[id_u], exposed[id_v]
        # Each pair once, walked from the smaller node
        if v < u:
            u, v = v, u
        logger.debug("  match: [%d] %s - [%d] %s", id_u, u, id_v, v)
        mark_path(graph, u, v, removed)

    return removed
