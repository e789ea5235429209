import math

import pytest

from strategies import Strategy, explore, path_cost
from util import FormatBytes, Graph, GraphReader, Node


def test_read_problem_file(test_cases_dir):
    graph = GraphReader(str(test_cases_dir / "PathFinder-test.txt")).read_problem()

    assert len(graph.nodes) == 6
    assert graph.origin == 2
    assert graph.destinations == {4, 5}
    assert graph.get_coordinates(1) == (4, 1)
    assert graph.successors(2) == [(1, 4), (3, 4)]


def test_malformed_lines_are_reported_and_skipped(write_file, capsys):
    path = write_file("broken.txt", "\n".join([
        "Nodes:",
        "1: (0,0)",
        "2: (oops)",
        "Edges:",
        "(1,2): 3",
        "(1,2) 3",
        "(2,1): -4",
        "Origin:",
        "1",
        "Destinations:",
        "2",
    ]))
    graph = GraphReader(path).read_problem()

    out = capsys.readouterr().out
    assert "Error parsing node line '2: (oops)'" in out
    assert "Error parsing edge line '(1,2) 3'" in out
    assert "Error parsing edge line '(2,1): -4'" in out
    assert list(graph.nodes) == [1]
    assert graph.adjacency == {1: [(2, 3)]}


def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        GraphReader(str(tmp_path / "nope.txt")).read_problem()
    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().out


def test_heuristic_is_distance_to_nearest_destination():
    graph = Graph()
    for node_id, x, y in ((1, 0, 0), (2, 3, 4), (3, 10, 0)):
        graph.add_node(Node(node_id, x, y))
    graph.destinations = {2, 3}

    assert graph.heuristic(1) == pytest.approx(5.0)
    assert graph.heuristic(2) == 0
    assert graph.heuristic(99) == 0


def test_path_cost():
    graph = Graph()
    graph.add_edge(1, 2, 4)
    graph.add_edge(2, 3, 1.5)

    assert path_cost([1, 2, 3], graph.successors) == 5.5
    assert path_cost([1], graph.successors) == 0
    assert path_cost([1, 3], graph.successors) is None


def test_add_edge_rejects_negative_cost():
    with pytest.raises(ValueError):
        Graph().add_edge(1, 2, -1)


@pytest.mark.parametrize("method, goal, expanded, path, cost", [
    ("DFS", 5, 3, [2, 1, 3, 5], 15),
    ("BFS", 4, 4, [2, 1, 4], 10),
    ("UCS", 4, 3, [2, 1, 4], 10),
    ("AS", 5, 3, [2, 3, 5], 10),
])
def test_search_sample_problem(test_cases_dir, method, goal, expanded, path, cost):
    graph = GraphReader(str(test_cases_dir / "PathFinder-test.txt")).read_problem()
    result = explore(graph.origin, graph.is_goal, graph.successors,
                     heuristic=graph.heuristic, strategy=Strategy.parse(method))

    assert result.goal == goal
    assert result.nodes_expanded == expanded
    assert result.path == path
    assert math.isclose(result.cost, cost)
    assert path_cost(result.path, graph.successors) == result.cost


@pytest.mark.parametrize("n_bytes, expected", [
    (512, "512 B"),
    (2048, "2.00 KB"),
    (5 * 1024 * 1024, "5.00 MB"),
    (3 * 1024 ** 3, "3.00 GB"),
])
def test_format_bytes(n_bytes, expected):
    assert FormatBytes(n_bytes) == expected
