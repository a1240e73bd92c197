import io

import pytest

from eulertrail.graph import TrailGraph
from eulertrail.io import components_to_graph, graph_to_components, read_graph


def test_components_to_graph_problem1(components_example):
    graph = components_to_graph(components_example)
    assert list(graph.nodes) == [0, 2, 3, 4, 5, 1, 10, 9]
    assert graph.number_of_edges() == 8
    assert graph.total_weight() == 57
    # The 2/2 component is a self-loop
    assert graph.get_edges()[1] == (2, 2, 1, {"weight": 4})


def test_components_to_graph_problem2(components_example):
    graph = components_to_graph(components_example, problem=2)
    assert graph.get_edge_attr(0)["weight"] == 10_000_002
    assert graph.total_weight() == 8 * 10_000_000 + 57


def test_explicit_weight_overrides_rule():
    graph = components_to_graph(["0/1@40", "1/2"], problem=2)
    assert graph.get_edge_attr(0)["weight"] == 40
    assert graph.get_edge_attr(1)["weight"] == 10_000_003


def test_blank_lines_and_whitespace_ignored():
    graph = components_to_graph(["", "  0/1  \n", "\n", "1/2\r\n"])
    assert graph.number_of_edges() == 2
    assert graph.total_weight() == 4


def test_parallel_components_kept():
    graph = components_to_graph(["0/1", "1/0"])
    assert len(graph.edges_between(0, 1)) == 2


def test_extends_existing_graph():
    graph = TrailGraph()
    graph.add_weighted_edge(7, 8, 1)
    result = components_to_graph(["8/9"], graph=graph)
    assert result is graph
    assert graph.number_of_edges() == 2


@pytest.mark.parametrize("line", ["0-1", "0/1/2", "a/b", "0/1@", "0/1@-3"])
def test_malformed_line(line):
    with pytest.raises(RuntimeError, match="Line 2 .* is not a component"):
        components_to_graph(["0/1", line])


def test_unknown_problem():
    with pytest.raises(ValueError, match="Unknown problem"):
        components_to_graph(["0/1"], problem=3)


def test_read_graph_from_file(tmp_path, components_example):
    path = tmp_path / "components.txt"
    path.write_text("\n".join(components_example) + "\n")
    graph = read_graph(path)
    assert graph.number_of_nodes() == 8
    assert graph.total_weight() == 57


def test_read_graph_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0/1\n1/2@9\n"))
    graph = read_graph("-")
    assert graph.total_weight() == 10


def test_read_graph_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_graph(tmp_path / "nope.txt")


def test_graph_to_components():
    graph = components_to_graph(["0/1", "2/1@7", "3/3"])
    assert graph_to_components(graph) == ["0/1@1", "2/1@7", "3/3@6"]
    again = components_to_graph(graph_to_components(graph))
    assert again.get_edges() == graph.get_edges()
