"""Trail algorithms: shortest paths, parity repair, matching and queries."""

from eulertrail.algorithms.aggregate import euler_trail, remaining_degrees, trail_weight
from eulertrail.algorithms.base import Cost, MatcherKind
from eulertrail.algorithms.brute import longest_trails_brute
from eulertrail.algorithms.eulerize import eulerize
from eulertrail.algorithms.exposed import exposed_nodes, matching_edges
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
from eulertrail.algorithms.spf import cached_shortest_paths, shortest_paths
from eulertrail.algorithms.types import PathRecord, Trail, TrailSummary

__all__ = [
    "BlossomMatcher",
    "Cost",
    "ExhaustiveMatcher",
    "Matcher",
    "MatcherKind",
    "PathRecord",
    "Trail",
    "TrailSummary",
    "cached_shortest_paths",
    "euler_trail",
    "eulerize",
    "exposed_nodes",
    "find_longest_trail",
    "longest_paths_from",
    "longest_trail",
    "longest_trail_summary",
    "longest_trails_brute",
    "matcher_fabric",
    "matching_edges",
    "remaining_degrees",
    "shortest_paths",
    "trail_weight",
]
