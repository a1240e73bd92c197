import pytest

from eulertrail.algorithms.longest_trail import (
    find_longest_trail,
    longest_paths_from,
    longest_trail,
    longest_trail_summary,
)
from eulertrail.algorithms.matching import ExhaustiveMatcher
from eulertrail.algorithms.types import TrailSummary
from eulertrail.graph import TrailGraph


class TestScenarios:
    def test_single_edge(self, single_edge):
        assert longest_trail(single_edge, 0, 1) == 5
        assert longest_trail(single_edge, 1, 0) == 5

    def test_single_edge_closed_is_empty_trail(self, single_edge):
        """A degree-1 start cannot come back; the empty trail weighs 0."""
        assert longest_trail(single_edge, 0, 0) == 0

    def test_square_opposite_corners(self, square):
        """Going from 0 to 2 uses exactly one of the two arcs."""
        assert longest_trail(square, 0, 2) == 2

    def test_square_adjacent_corners(self, square):
        assert longest_trail(square, 0, 1) == 3

    def test_square_closed(self, square):
        assert longest_trail(square, 0, 0) == 4

    def test_disconnected(self, two_components):
        assert longest_trail(two_components, 0, 3) is None
        assert longest_trail(two_components, 0, 1) == 1
        assert longest_trail(two_components, 2, 2) == 0

    def test_parallel_edges(self, parallel):
        assert longest_trail(parallel, 0, 2) == 7
        assert longest_trail(parallel, 0, 0) == 5
        assert longest_trail(parallel, 0, 1) == 3

    def test_self_loop(self, self_loop):
        assert longest_trail(self_loop, 0, 1) == 8
        assert longest_trail(self_loop, 0, 0) == 7
        assert longest_trail(self_loop, 1, 1) == 0

    def test_unknown_nodes(self, square):
        with pytest.raises(KeyError):
            longest_trail(square, 0, 9)
        with pytest.raises(KeyError):
            longest_trail(square, 9, 0)


def test_symmetry(bridge_gap, parallel, square, self_loop):
    for g in (bridge_gap, parallel, square, self_loop):
        for s in g.nodes:
            for t in g.nodes:
                assert longest_trail(g, s, t) == longest_trail(g, t, s)


def test_repeated_queries_are_independent(bridge_gap):
    """Queries leave no state behind that changes later answers."""
    first = longest_trail(bridge_gap, 0, 4)
    longest_trail(bridge_gap, 0, 0)
    longest_trail(bridge_gap, 1, 2)
    assert longest_trail(bridge_gap, 0, 4) == first
    assert bridge_gap.total_weight() == 362


def test_injected_matcher_gives_same_weights(bridge_gap):
    default = longest_paths_from(bridge_gap, 0)
    exhaustive = longest_paths_from(bridge_gap, 0, matcher=ExhaustiveMatcher())
    assert default == exhaustive


def test_longest_paths_from(square):
    assert longest_paths_from(square, 0) == {0: 4, 1: 3, 2: 2, 3: 3}


def test_longest_paths_from_marks_unreachable(two_components):
    assert longest_paths_from(two_components, 0) == {0: 0, 1: 1, 2: None, 3: None}


def test_summary(square):
    summary = longest_trail_summary(square, 0)
    assert summary == TrailSummary(
        source=0,
        weights={0: 4, 1: 3, 2: 2, 3: 3},
        best_target=0,
        best_weight=4,
    )


def test_summary_nothing_reachable():
    from eulertrail.graph import TrailGraph

    g = TrailGraph()
    g.add_node(0)
    g.add_weighted_edge(1, 2, 3)
    summary = longest_trail_summary(g, 0)
    assert summary.best_target == 0
    assert summary.best_weight == 0
    assert summary.weights == {0: 0, 1: None, 2: None}


class TestFindLongestTrail:
    def test_trail_matches_weight(self, bridge_gap, parallel, square):
        for g in (bridge_gap, parallel, square):
            for s in g.nodes:
                for t in g.nodes:
                    trail = find_longest_trail(g, s, t)
                    assert trail.nodes[0] == s
                    assert trail.nodes[-1] == t
                    assert len(set(trail.edges)) == len(trail.edges)
                    assert trail.weight == longest_trail(g, s, t)

    def test_unreachable(self, two_components):
        assert find_longest_trail(two_components, 0, 2) is None

    def test_unknown_target(self, square):
        with pytest.raises(KeyError):
            find_longest_trail(square, 0, 9)


def _double_star(weight):
    # Hubs 0 and 1; leaves alternate sides in node order:
    #   2,4,6 hang off 0 and 3,5,7 hang off 1
    g = TrailGraph()
    for n in range(8):
        g.add_node(n)
    g.add_edge(0, 1, weight=weight)
    for leaf in range(2, 8):
        g.add_edge(leaf % 2, leaf, weight=weight)
    return g


def test_zero_weight_overlap_aborts_query():
    """Tied zero-cost pairs may all cross the single hub edge.

    The exhaustive matcher pairs 2-3, 4-5 and 6-7; each shortest path
    crosses 0-1, and the second one finds it already removed.
    """
    g = _double_star(0)
    with pytest.raises(RuntimeError, match="No unmarked edge left between 0 and 1"):
        longest_trail(g, 0, 0, matcher=ExhaustiveMatcher())
    assert g.total_weight() == 0
    assert g.number_of_edges() == 7


def test_positive_weight_double_star_completes():
    g = _double_star(1)
    assert longest_trail(g, 0, 0, matcher=ExhaustiveMatcher()) == 0
    assert longest_trail(g, 2, 3) == 3
