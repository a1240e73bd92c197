"""Minimum-weight perfect matching solvers.

Trail queries delegate the matching step through the ``Matcher`` protocol:
given ``n`` vertices (``0..n-1``) and weighted edges, return each vertex's
partner in a minimum-weight perfect matching, or raise ``RuntimeError`` when
no perfect matching exists. ``matcher_fabric`` builds the stock solvers.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, Union

import networkx as nx

from eulertrail.algorithms.base import Cost, MatcherKind
from eulertrail.config import TRAIL_CONFIG
from eulertrail.logging import get_logger

logger = get_logger(__name__)

WeightedPair = Tuple[int, int, Cost]


class Matcher(Protocol):
    """Protocol for minimum-weight perfect matching solvers."""

    def solve(self, n: int, edges: Iterable[WeightedPair]) -> List[int]:
        """Return ``mate`` with ``mate[i]`` the partner of vertex ``i``.

        Raises:
            RuntimeError: If the edges admit no perfect matching on ``n``
                vertices.
        """
        ...


def _check_vertex_count(n: int) -> None:
    if n < 0 or n % 2:
        raise ValueError(f"Perfect matching needs an even vertex count, got {n}.")


class BlossomMatcher:
    """Minimum-weight perfect matching via ``networkx.min_weight_matching``.

    networkx computes a minimum-weight matching among the maximum-cardinality
    matchings, so the result is optimal whenever a perfect matching exists.
    """

    def solve(self, n: int, edges: Iterable[WeightedPair]) -> List[int]:
        _check_vertex_count(n)
        g = nx.Graph()
        g.add_nodes_from(range(n))
        for u, v, w in edges:
            # Keep the cheapest of duplicate pairs
            if g.has_edge(u, v) and g[u][v]["weight"] <= w:
                continue
            g.add_edge(u, v, weight=w)

        matching = nx.min_weight_matching(g, weight="weight")
        if 2 * len(matching) != n:
            raise RuntimeError(
                f"No perfect matching among {n} exposed nodes "
                f"(largest matching covers {2 * len(matching)})."
            )

        mate = [-1] * n
        for u, v in matching:
            mate[u] = v
            mate[v] = u
        return mate


class ExhaustiveMatcher:
    """Exact minimum-weight perfect matching by bitmask dynamic programming.

    Runs in ``O(2**n * n)``; ``max_nodes`` caps ``n`` to keep that bounded.
    """

    def __init__(self, max_nodes: Optional[int] = None) -> None:
        if max_nodes is None:
            max_nodes = TRAIL_CONFIG.exhaustive_max_nodes
        self.max_nodes = max_nodes

    def solve(self, n: int, edges: Iterable[WeightedPair]) -> List[int]:
        _check_vertex_count(n)
        if n > self.max_nodes:
            raise ValueError(
                f"Exhaustive matching limited to {self.max_nodes} vertices, got {n}."
            )

        cost: Dict[Tuple[int, int], Cost] = {}
        for u, v, w in edges:
            pair = (min(u, v), max(u, v))
            if pair not in cost or w < cost[pair]:
                cost[pair] = w

        @lru_cache(maxsize=None)
        def best(mask: int) -> Tuple[Optional[Cost], Tuple[Tuple[int, int], ...]]:
            # mask holds the vertices still unmatched
            if mask == 0:
                return 0, ()
            i = (mask & -mask).bit_length() - 1
            rest = mask ^ (1 << i)
            best_cost: Optional[Cost] = None
            best_pairs: Tuple[Tuple[int, int], ...] = ()
            for j in range(i + 1, n):
                if not (rest >> j) & 1 or (i, j) not in cost:
                    continue
                sub_cost, sub_pairs = best(rest ^ (1 << j))
                if sub_cost is None:
                    continue
                total = cost[(i, j)] + sub_cost
                if best_cost is None or total < best_cost:
                    best_cost = total
                    best_pairs = sub_pairs + ((i, j),)
            return best_cost, best_pairs

        total, pairs = best((1 << n) - 1)
        best.cache_clear()
        if total is None:
            raise RuntimeError(f"No perfect matching among {n} exposed nodes.")

        mate = [-1] * n
        for u, v in pairs:
            mate[u] = v
            mate[v] = u
        return mate


def matcher_fabric(kind: Union[MatcherKind, str, None] = None) -> Matcher:
    """Build a matching solver.

    Args:
        kind: A ``MatcherKind``, its name in any case (``"blossom"``,
            ``"exhaustive"``), or ``None`` for the configured default.

    Returns:
        Matcher: A fresh solver instance.

    Raises:
        ValueError: If ``kind`` names no known solver.
    """
    if kind is None:
        kind = TRAIL_CONFIG.default_matcher
    if isinstance(kind, str):
        try:
            kind = MatcherKind[kind.upper()]
        except KeyError:
            raise ValueError(f"Unknown matcher kind: {kind!r}") from None

    if kind == MatcherKind.BLOSSOM:
        return BlossomMatcher()
    if kind == MatcherKind.EXHAUSTIVE:
        return ExhaustiveMatcher()
    raise ValueError(f"Unknown matcher kind: {kind!r}")


def matched_pairs(mate: List[int]) -> List[Tuple[int, int]]:
    """Each matched pair once, as ``(i, j)`` with ``i < j``."""
    return [(i, j) for i, j in enumerate(mate) if i < j]
