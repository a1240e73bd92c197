"""Strict undirected multigraph with validated integer edge weights.

`TrailGraph` extends `networkx.MultiGraph` to enforce explicit node
management, unique edge identifiers and non-negative integer weights. Each
logical edge has a single key shared by both endpoints' adjacency, so the
two directions of an edge can never be removed independently.

The graph also owns the per-source shortest-path cache used by the trail
solvers. Cached paths are always computed over the full topology; any
structural mutation clears the cache.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

if TYPE_CHECKING:
    from eulertrail.algorithms.types import PathRecord

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


def _check_weight(weight: Any) -> int:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise ValueError(f"Edge weight must be an integer, got {weight!r}.")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}.")
    return weight


class TrailGraph(nx.MultiGraph):
    """An undirected multigraph with strict rules and unique edge IDs.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - No duplicate edges by key (raises ValueError on duplicates).
      - Every edge carries a non-negative integer ``weight``.
      - Removing non-existent nodes or edges raises ValueError.
      - ``copy()`` performs a pickle-based deep copy by default.

    Parallel edges and self-loops are allowed. A self-loop counts twice
    towards its node's degree.

    Inherits from:
        networkx.MultiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize a TrailGraph.

        Args:
            *args: Positional arguments forwarded to the MultiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiGraph constructor.

        Attributes:
            _edges: Map edge key to ``(u, v, edge_key, attribute_dict)``.
            _path_cache: Map source node to its shortest-path records.
        """
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._path_cache: Dict[NodeID, Dict[NodeID, PathRecord]] = {}
        # Monotonically increasing; removed edges do not reuse IDs.
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: NodeID, v: NodeID) -> int:  # type: ignore[override]
        """Return a new unique integer edge ID.

        Args:
            u: First endpoint (unused here).
            v: Second endpoint (unused here).

        Returns:
            int: A new unique integer edge id.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return int(next_edge_id)

    def copy(self, as_view: bool = False, pickle: bool = True) -> TrailGraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying. With ``pickle=False`` the
        nodes and edges are re-added one by one, keeping edge keys; attribute
        dicts are shallow-copied.

        Args:
            as_view: If True, return a read-only view instead of a copy.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            TrailGraph: A new instance (or view) of the graph.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        if pickle:
            return loads(dumps(self))

        graph = self.__class__()
        graph.graph.update(self.graph)
        for node, node_attr in self._node.items():  # type: ignore[attr-defined]
            graph.add_node(node, **node_attr)
        # One entry per logical edge; _adj would list each edge from both ends
        graph.add_edges_from(
            (u, v, key, dict(attr)) for u, v, key, attr in self._edges.values()
        )
        graph._next_edge_id = self._next_edge_id
        return graph

    #
    # Shortest-path cache
    #
    @property
    def path_cache(self) -> Dict[NodeID, Dict[NodeID, PathRecord]]:
        """Shortest-path records per source, valid for the current topology."""
        return self._path_cache

    def clear_path_cache(self) -> None:
        """Drop every cached shortest-path map."""
        self._path_cache.clear()

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Args:
            node_for_adding: The node to add.
            **attr: Arbitrary attributes for this node.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)
        self.clear_path_cache()

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Args:
            n: The node to remove.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        to_delete = [
            e_id for e_id, (u, v, _, _) in self._edges.items() if u == n or v == n
        ]
        for e_id in to_delete:
            del self._edges[e_id]

        super().remove_node(n)
        self.clear_path_cache()

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an undirected edge between u_for_edge and v_for_edge.

        If no key is provided, a unique monotonically increasing integer key is
        assigned via ``new_edge_key``. Both endpoints must already exist. When
        an explicit integer key is provided, the internal counter is advanced
        to avoid collisions with future auto-assigned keys.

        Args:
            u_for_edge: First endpoint. Must exist in the graph.
            v_for_edge: Second endpoint. Must exist in the graph.
            key: The unique edge key. If None, a new key is generated.
            **attr: Edge attributes; ``weight`` is required.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            ValueError: If either node does not exist, the key is already in
                use, or the weight is missing, negative or not an integer.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")
        if "weight" not in attr:
            raise ValueError(
                f"Edge {u_for_edge} - {v_for_edge} is missing a 'weight' attribute."
            )
        _check_weight(attr["weight"])

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # pyright: ignore[reportArgumentType]
        )
        self.clear_path_cache()
        return key

    def add_weighted_edge(self, u: NodeID, v: NodeID, weight: int) -> EdgeID:
        """Add an edge, creating missing endpoints first.

        Loaders use this to build graphs from edge lists where nodes are only
        implied by the edges that touch them.
        """
        if u not in self:
            self.add_node(u)
        if v not in self:
            self.add_node(v)
        return self.add_edge(u, v, weight=weight)

    def add_edges_from(  # pyright: ignore[reportIncompatibleMethodOverride]
        self, ebunch_to_add: Iterable[tuple], **attr: Any
    ) -> List[EdgeID]:
        """Add several edges through ``add_edge``.

        Accepts the networkx edge forms ``(u, v)``, ``(u, v, data)``,
        ``(u, v, key)`` and ``(u, v, key, data)``. Per-edge data overrides
        ``attr``. Each edge is validated as a whole, so the combined
        attributes must include ``weight``. Endpoints must already exist.

        Returns:
            List[EdgeID]: Keys of the added edges, in input order.

        Raises:
            ValueError: If an edge tuple has the wrong length, or ``add_edge``
                rejects an edge.
        """
        keys: List[EdgeID] = []
        for e in ebunch_to_add:
            key: Optional[EdgeID] = None
            data: AttrDict = {}
            if len(e) == 4:
                u, v, key, data = e
            elif len(e) == 3:
                u, v, data = e
                if not isinstance(data, dict):
                    key, data = data, {}
            elif len(e) == 2:
                u, v = e
            else:
                raise ValueError(f"Edge tuple {e} must be a 2-tuple, 3-tuple or 4-tuple.")
            keys.append(self.add_edge(u, v, key=key, **{**attr, **data}))
        return keys

    def remove_edge(
        self,
        u: NodeID,
        v: NodeID,
        key: Optional[EdgeID] = None,
    ) -> None:
        """Remove an edge (or all edges) between nodes u and v.

        Args:
            u: One endpoint. Must exist in the graph.
            v: The other endpoint. Must exist in the graph.
            key: If provided, remove only that edge. Otherwise, remove every
                edge between u and v.

        Raises:
            ValueError: If the nodes do not exist, the key does not exist or
                does not connect u and v, or no edges join u and v.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")

        if key is not None:
            if key not in self._edges:
                raise ValueError(f"No edge with id='{key}' found between {u} and {v}.")
            a, b, _, _ = self._edges[key]
            if {a, b} != {u, v}:
                raise ValueError(
                    f"Edge with id='{key}' connects {a} and {b}, not {u} and {v}."
                )
            self.remove_edge_by_id(key)
        else:
            edge_ids = self.edges_between(u, v)
            if not edge_ids:
                raise ValueError(f"No edges between '{u}' and '{v}' to remove.")
            for e_id in edge_ids:
                self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove an edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        u, v, _, _ = self._edges.pop(key)
        super().remove_edge(u, v, key=key)
        self.clear_path_cache()

    #
    # Convenience methods
    #
    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Retrieve a dictionary of all edges by their keys.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to
                ``(u, v, edge_key, edge_attributes)``.
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """Retrieve the attribute dictionary of a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def has_edge_by_id(self, key: EdgeID) -> bool:
        """Check whether an edge with the given key exists."""
        return key in self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List all edge keys joining node u and node v.

        Returns:
            List[EdgeID]: Edge keys in insertion order, or an empty list.
        """
        if u not in self._adj or v not in self._adj[u]:
            return []
        return list(self._adj[u][v].keys())

    def total_weight(self) -> int:
        """Sum of the weights of all edges."""
        return sum(attr["weight"] for _, _, _, attr in self._edges.values())
