"""Types and data structures for trail solver outputs.

Defines immutable containers for shortest-path records, reconstructed
trails and per-source summaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Tuple

from eulertrail.algorithms.base import Cost


@dataclass(frozen=True)
class PathRecord:
    """One step of a shortest-path tree.

    Attributes:
        prev: Predecessor node on the shortest path, ``None`` for the source.
        cost: Total shortest-path distance from the source.
        edge: Key of the edge used from ``prev``, ``None`` for the source.
    """

    prev: Optional[Hashable]
    cost: Cost
    edge: Optional[Hashable] = None


@dataclass(frozen=True)
class Trail:
    """A trail reconstructed from the edges left after eulerization.

    Attributes:
        nodes: Visited nodes in order, starting at the source and ending at
            the target. A single node for the empty trail.
        edges: Edge keys in traversal order; one shorter than ``nodes``.
        weight: Sum of the weights of ``edges``.
    """

    nodes: Tuple[Hashable, ...]
    edges: Tuple[Hashable, ...]
    weight: Cost

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class TrailSummary:
    """Longest trails from one source to every node.

    Attributes:
        source: Node the trails start from.
        weights: Longest trail weight per target; ``None`` where the target is
            unreachable.
        best_target: Target of the heaviest trail (``source`` if nothing else
            is reachable).
        best_weight: Weight of the heaviest trail.
    """

    source: Hashable
    weights: Dict[Hashable, Optional[Cost]]
    best_target: Hashable
    best_weight: Cost
