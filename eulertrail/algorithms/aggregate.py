"""Measure and walk what is left of a graph after eulerization."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

from eulertrail.algorithms.base import Cost
from eulertrail.algorithms.types import Trail
from eulertrail.graph import EdgeID, NodeID, TrailGraph


def trail_weight(graph: TrailGraph, start: NodeID, removed: Set[EdgeID]) -> Cost:
    """Total weight of the remaining component that contains ``start``.

    Walks from ``start`` over edges not in ``removed`` and adds up every
    reached edge exactly once.
    """
    adjacencies = graph._adj  # type: ignore[attr-defined]
    total: Cost = 0
    counted: Set[EdgeID] = set()
    seen: Set[NodeID] = set()
    stack: List[NodeID] = [start]
    while stack:
        node_id = stack.pop()
        if node_id in seen:
            continue
        seen.add(node_id)
        for neighbor_id, edges_map in adjacencies[node_id].items():
            for e_id, e_attr in edges_map.items():
                if e_id in removed or e_id in counted:
                    continue
                counted.add(e_id)
                total += e_attr["weight"]
                stack.append(neighbor_id)
    return total


def remaining_degrees(graph: TrailGraph, removed: Set[EdgeID]) -> Dict[NodeID, int]:
    """Degree of every node counting only edges not in ``removed``.

    Self-loops count twice, as in ``TrailGraph.degree``.
    """
    degrees: Dict[NodeID, int] = {}
    for node_id, neighbors in graph._adj.items():  # type: ignore[attr-defined]
        degree = 0
        for neighbor_id, edges_map in neighbors.items():
            kept = sum(1 for e_id in edges_map if e_id not in removed)
            degree += 2 * kept if neighbor_id == node_id else kept
        degrees[node_id] = degree
    return degrees


def euler_trail(
    graph: TrailGraph, src: NodeID, dst: NodeID, removed: Set[EdgeID]
) -> Trail:
    """Euler trail from ``src`` to ``dst`` over the remaining edges.

    Uses Hierholzer's algorithm on the component of ``src``. The remaining
    degrees must already satisfy the Euler condition for ``src``/``dst``,
    which ``eulerize`` guarantees.

    Raises:
        RuntimeError: If the remaining edges do not form an Euler trail that
            ends at ``dst``.
    """
    adjacencies = graph._adj  # type: ignore[attr-defined]
    incident: Dict[NodeID, List[Tuple[NodeID, EdgeID]]] = {
        node_id: [
            (neighbor_id, e_id)
            for neighbor_id, edges_map in neighbors.items()
            for e_id in edges_map
            if e_id not in removed
        ]
        for node_id, neighbors in adjacencies.items()
    }

    used: Set[EdgeID] = set()
    cursor: Dict[NodeID, int] = defaultdict(int)
    stack: List[Tuple[NodeID, Optional[EdgeID]]] = [(src, None)]
    walk: List[Tuple[NodeID, Optional[EdgeID]]] = []
    while stack:
        node_id, _ = stack[-1]
        options = incident[node_id]
        while cursor[node_id] < len(options) and options[cursor[node_id]][1] in used:
            cursor[node_id] += 1
        if cursor[node_id] < len(options):
            neighbor_id, e_id = options[cursor[node_id]]
            used.add(e_id)
            stack.append((neighbor_id, e_id))
        else:
            walk.append(stack.pop())
    walk.reverse()

    nodes = tuple(node_id for node_id, _ in walk)
    edges = tuple(e_id for _, e_id in walk[1:])
    if nodes[-1] != dst:
        raise RuntimeError(
            f"Remaining edges form a trail from {src} to {nodes[-1]}, not to {dst}."
        )
    weight = sum(graph.get_edge_attr(e_id)["weight"] for e_id in edges)
    return Trail(nodes=nodes, edges=edges, weight=weight)
