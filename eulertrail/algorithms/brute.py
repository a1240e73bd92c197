"""Exhaustive longest-trail search.

Backtracks over every trail starting at the source. Exponential in the number
of edges; intended as a reference for small graphs and for checking the
matching-based solver.
"""

from __future__ import annotations

from typing import Dict, Set

from eulertrail.algorithms.base import Cost
from eulertrail.graph import EdgeID, NodeID, TrailGraph


def longest_trails_brute(graph: TrailGraph, src_node: NodeID) -> Dict[NodeID, Cost]:
    """Heaviest trail from ``src_node`` to every node it can reach.

    Args:
        graph: Trail graph.
        src_node: Trail start.

    Returns:
        Maps each reachable node to the weight of the heaviest trail ending
        there. ``src_node`` maps to at least ``0`` (the empty trail).

    Raises:
        KeyError: If ``src_node`` is not in the graph.
    """
    adjacencies = graph._adj  # type: ignore[attr-defined]
    if src_node not in adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    best: Dict[NodeID, Cost] = {}
    used: Set[EdgeID] = set()

    def extend(node_id: NodeID, cost: Cost) -> None:
        if node_id not in best or best[node_id] < cost:
            best[node_id] = cost
        for neighbor_id, edges_map in adjacencies[node_id].items():
            for e_id, e_attr in edges_map.items():
                if e_id in used:
                    continue
                used.add(e_id)
                extend(neighbor_id, cost + e_attr["weight"])
                used.remove(e_id)

    extend(src_node, 0)
    return best
