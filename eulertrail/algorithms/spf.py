"""Shortest-path-first (SPF) over the full trail graph.

Dijkstra with a binary heap and lazy deletion: a node may sit in the heap
several times, and entries whose cost exceeds the node's settled cost are
skipped when popped. Among parallel edges the cheapest one is relaxed (ties
keep the earliest inserted edge).

Notes:
    Shortest paths are always computed over every edge of the graph. Trail
    queries remove edges only in a per-query set and never touch the graph, so
    cached results stay valid for the lifetime of the topology. Mutating the
    graph structure clears the cache (see ``TrailGraph``).
"""

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from eulertrail.algorithms.base import Cost
from eulertrail.algorithms.types import PathRecord
from eulertrail.graph import EdgeID, NodeID, TrailGraph
from eulertrail.logging import get_logger

logger = get_logger(__name__)


def shortest_paths(graph: TrailGraph, src_node: NodeID) -> Dict[NodeID, PathRecord]:
    """Single-source shortest paths from ``src_node``.

    Args:
        graph: Undirected multigraph with integer ``weight`` on every edge.
        src_node: Source node.

    Returns:
        Maps each reachable node to its ``PathRecord`` (predecessor, cost and
        the edge taken from the predecessor). Unreachable nodes are absent.

    Raises:
        KeyError: If ``src_node`` is not in the graph.
    """
    adjacencies = graph._adj  # type: ignore[attr-defined]
    if src_node not in adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: Dict[NodeID, Tuple[Optional[NodeID], Optional[EdgeID]]] = {
        src_node: (None, None)
    }
    min_pq: List[Tuple[Cost, NodeID]] = [(0, src_node)]

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if current_cost > costs[node_id]:
            continue

        for neighbor_id, edges_map in adjacencies[node_id].items():
            min_edge_cost: Optional[Cost] = None
            selected_edge: Optional[EdgeID] = None

            for e_id, e_attr in edges_map.items():
                edge_cost = e_attr["weight"]
                if min_edge_cost is None or edge_cost < min_edge_cost:
                    min_edge_cost = edge_cost
                    selected_edge = e_id

            if min_edge_cost is None:
                continue

            new_cost = current_cost + min_edge_cost
            if (neighbor_id not in costs) or (new_cost < costs[neighbor_id]):
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = (node_id, selected_edge)
                heappush(min_pq, (new_cost, neighbor_id))

    return {
        node_id: PathRecord(prev=prev, cost=costs[node_id], edge=edge)
        for node_id, (prev, edge) in pred.items()
    }


def cached_shortest_paths(
    graph: TrailGraph, src_node: NodeID
) -> Dict[NodeID, PathRecord]:
    """Shortest paths from ``src_node``, memoised on the graph.

    The first call per source runs ``shortest_paths``; later calls return the
    stored map until the graph topology changes.
    """
    cache = graph.path_cache
    paths = cache.get(src_node)
    if paths is None:
        paths = shortest_paths(graph, src_node)
        cache[src_node] = paths
        logger.debug(
            "Computed shortest paths from %s (%d reachable nodes)",
            src_node,
            len(paths),
        )
    return paths


def path_edges(
    paths: Dict[NodeID, PathRecord], dst_node: NodeID
) -> List[Tuple[NodeID, NodeID, EdgeID]]:
    """Hops of the shortest path to ``dst_node`` as ``(u, v, edge)`` triples.

    Walks the predecessor chain back to the source and returns the hops in
    source-to-destination order. The path to the source itself is empty.

    Raises:
        KeyError: If ``dst_node`` is not reachable in ``paths``.
    """
    if dst_node not in paths:
        raise KeyError(f"Node '{dst_node}' is not reachable from the path source.")

    hops: List[Tuple[NodeID, NodeID, EdgeID]] = []
    node_id = dst_node
    record = paths[node_id]
    while record.prev is not None:
        hops.append((record.prev, node_id, record.edge))
        node_id = record.prev
        record = paths[node_id]
    hops.reverse()
    return hops
