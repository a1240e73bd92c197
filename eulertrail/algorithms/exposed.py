"""Parity analysis for an ``s``-``t`` trail query.

An Euler trail from ``s`` to ``t`` exists in a connected multigraph exactly
when ``s`` and ``t`` have odd degree and every other node even degree (all
even when ``s == t``). Adding a virtual ``s``-``t`` edge turns both cases
into "every degree even", so the nodes that violate the condition are those
with odd degree once the virtual edge is counted. These are the exposed
nodes; each needs an odd number of its edges removed.
"""

from __future__ import annotations

from typing import List, Tuple

from eulertrail.algorithms.base import Cost
from eulertrail.algorithms.spf import cached_shortest_paths
from eulertrail.graph import NodeID, TrailGraph


def query_degree(graph: TrailGraph, node: NodeID, src: NodeID, dst: NodeID) -> int:
    """Degree of ``node`` counting the virtual ``src``-``dst`` edge.

    Self-loops count twice. When ``src == dst`` the virtual edge is a loop
    and adds two to that node.
    """
    degree = graph.degree(node)
    if node == src:
        degree += 1
    if node == dst:
        degree += 1
    return degree


def exposed_nodes(graph: TrailGraph, src: NodeID, dst: NodeID) -> List[NodeID]:
    """Nodes with odd query degree, in graph order.

    The position of a node in the returned list is its dense id in the
    matching problem. The list always has even length, since the sum of all
    query degrees is twice the number of edges (virtual one included).

    Raises:
        KeyError: If ``src`` or ``dst`` is not in the graph.
    """
    for node in (src, dst):
        if node not in graph:
            raise KeyError(f"Node '{node}' is not in the graph.")
    return [n for n in graph.nodes if query_degree(graph, n, src, dst) % 2 == 1]


def matching_edges(
    graph: TrailGraph, exposed: List[NodeID]
) -> List[Tuple[int, int, Cost]]:
    """Weighted pairs for the matching over exposed nodes.

    Returns ``(id_u, id_v, distance)`` for every pair ``id_u < id_v`` whose
    nodes are connected, where the ids are positions in ``exposed`` and the
    distance is the shortest-path distance between the nodes. Unreachable
    pairs are omitted.
    """
    edges: List[Tuple[int, int, Cost]] = []
    for id_u, u in enumerate(exposed):
        paths_u = cached_shortest_paths(graph, u)
        for id_v in range(id_u + 1, len(exposed)):
            record = paths_u.get(exposed[id_v])
            if record is not None:
                edges.append((id_u, id_v, record.cost))
    return edges
