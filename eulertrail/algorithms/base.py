from __future__ import annotations

from enum import IntEnum

#: Trail and path weights are non-negative integers.
Cost = int


class MatcherKind(IntEnum):
    """
    Minimum-weight perfect matching solvers available to the trail solvers.
    """

    #: Edmonds' blossom algorithm (networkx), polynomial in the exposed-set size.
    BLOSSOM = 1
    #: Exact bitmask dynamic programme, exponential; for small exposed sets.
    EXHAUSTIVE = 2
