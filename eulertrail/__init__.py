"""eulertrail: heaviest trails in weighted undirected multigraphs.

A trail is a walk that repeats no edge. eulertrail finds the heaviest trail
between two nodes by removing the lightest edge set that leaves an Euler
trail between them, computed with shortest paths and a minimum-weight
perfect matching over the odd-degree nodes.

Primary API:
    TrailGraph - Undirected multigraph with integer edge weights
    longest_trail() - Heaviest trail weight between two nodes
    longest_paths_from() - Heaviest trail weight from one node to every node
    longest_trail_summary() - Per-target weights plus the overall best
    find_longest_trail() - The trail itself as a node/edge sequence
    longest_trails_brute() - Exhaustive reference search for small graphs

Example:
    from eulertrail import TrailGraph, longest_trail

    g = TrailGraph()
    g.add_weighted_edge(0, 1, 5)
    g.add_weighted_edge(1, 2, 3)
    longest_trail(g, 0, 2)  # 8
"""

from __future__ import annotations

from eulertrail import cli, logging
from eulertrail._version import __version__
from eulertrail.algorithms.base import Cost, MatcherKind
from eulertrail.algorithms.brute import longest_trails_brute
from eulertrail.algorithms.longest_trail import (
    find_longest_trail,
    longest_paths_from,
    longest_trail,
    longest_trail_summary,
)
from eulertrail.algorithms.matching import (
    BlossomMatcher,
    ExhaustiveMatcher,
    Matcher,
    matcher_fabric,
)
from eulertrail.algorithms.types import PathRecord, Trail, TrailSummary
from eulertrail.config import TRAIL_CONFIG, TrailConfig
from eulertrail.graph import TrailGraph
from eulertrail.io import components_to_graph, read_graph

__all__ = [
    # Version
    "__version__",
    # Model
    "TrailGraph",
    "PathRecord",
    "Trail",
    "TrailSummary",
    "Cost",
    # Queries (primary API)
    "longest_trail",
    "longest_paths_from",
    "longest_trail_summary",
    "find_longest_trail",
    "longest_trails_brute",
    # Matching
    "Matcher",
    "MatcherKind",
    "BlossomMatcher",
    "ExhaustiveMatcher",
    "matcher_fabric",
    # Configuration
    "TrailConfig",
    "TRAIL_CONFIG",
    # Input
    "components_to_graph",
    "read_graph",
    # Utilities
    "cli",
    "logging",
]
