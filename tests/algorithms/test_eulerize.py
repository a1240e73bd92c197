import pytest

from eulertrail.algorithms.aggregate import remaining_degrees
from eulertrail.algorithms.eulerize import eulerize, mark_edge, mark_path
from eulertrail.algorithms.matching import BlossomMatcher, ExhaustiveMatcher


def _odd_nodes(graph, removed):
    return {n for n, d in remaining_degrees(graph, removed).items() if d % 2}


class TestMarkEdge:
    def test_marks_lightest_parallel_edge(self, parallel):
        """Key 1 (weight 2) goes before key 0 (weight 3)."""
        removed = set()
        assert mark_edge(parallel, 0, 1, removed) == 1
        assert removed == {1}

    def test_second_mark_takes_next_parallel_edge(self, parallel):
        removed = set()
        mark_edge(parallel, 1, 0, removed)
        assert mark_edge(parallel, 1, 0, removed) == 0
        assert removed == {0, 1}

    def test_no_unmarked_edge_left(self, parallel):
        removed = {0, 1}
        with pytest.raises(RuntimeError, match="No unmarked edge left between 0 and 1"):
            mark_edge(parallel, 0, 1, removed)

    def test_no_edge_at_all(self, line):
        with pytest.raises(RuntimeError, match="No unmarked edge"):
            mark_edge(line, 0, 3, set())


def test_mark_path_removes_shortest_path(line):
    removed = set()
    mark_path(line, 0, 3, removed)
    assert removed == {0, 1, 2}


def test_eulerize_nothing_to_fix(square):
    assert eulerize(square, 0, 0) == set()


def test_eulerize_square_opposite_corners(square):
    removed = eulerize(square, 0, 2)
    # One of the two arcs between 0 and 2
    assert removed in ({0, 1}, {2, 3})
    assert _odd_nodes(square, removed) == {0, 2}


def test_eulerize_single_edge_closed(single_edge):
    assert eulerize(single_edge, 0, 0) == {0}


def test_eulerize_prefers_light_parallel_copy(parallel):
    # Exposed 0 and 2; the path 0-1-2 uses the weight-2 copy of 0-1
    assert eulerize(parallel, 0, 1) == {1, 2}


def test_eulerize_bridge_gap_cuts_detour(bridge_gap):
    assert eulerize(bridge_gap, 0, 0) == {3, 4}


@pytest.mark.parametrize("matcher", [BlossomMatcher(), ExhaustiveMatcher()])
def test_parity_after_eulerize(matcher, bridge_gap, parallel, line, self_loop):
    for g in (bridge_gap, parallel, line, self_loop):
        for s in g.nodes:
            for t in g.nodes:
                removed = eulerize(g, s, t, matcher=matcher)
                expected = set() if s == t else {s, t}
                assert _odd_nodes(g, removed) == expected


def test_eulerize_leaves_graph_untouched(bridge_gap):
    edges_before = dict(bridge_gap.get_edges())
    eulerize(bridge_gap, 0, 0)
    eulerize(bridge_gap, 1, 4)
    assert bridge_gap.get_edges() == edges_before
    assert bridge_gap.total_weight() == 362


def test_eulerize_uses_injected_matcher(square):
    calls = []

    class RecordingMatcher(BlossomMatcher):
        def solve(self, n, edges):
            edges = list(edges)
            calls.append((n, edges))
            return super().solve(n, edges)

    eulerize(square, 0, 1, matcher=RecordingMatcher())
    assert calls == [(2, [(0, 1, 1)])]
