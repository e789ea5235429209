import pytest

from maze import Maze
from strategies import Strategy, explore, search

CORRIDOR_PATH = [
    (1, 1), (1, 2), (1, 3), (2, 3), (3, 3), (3, 4), (3, 5),
    (2, 5), (1, 5), (1, 6), (1, 7), (2, 7), (3, 7),
]


@pytest.fixture
def corridor(test_cases_dir):
    return Maze.from_file(test_cases_dir / "corridor.maze")


def test_parse_maze(corridor):
    assert corridor.rows == 5
    assert corridor.cols == 9
    assert corridor.start == (1, 1)
    assert corridor.goals == {(3, 7)}
    assert (1, 4) in corridor.walls
    assert not corridor.is_open((0, 0))
    assert corridor.is_open((2, 1))


def test_successors_stay_on_open_floor(corridor):
    assert sorted(t.state for t in corridor.successors((1, 1))) == [(1, 2), (2, 1)]
    assert all(t.cost == 1 for t in corridor.successors((1, 3)))


def test_heuristic_is_manhattan_to_nearest_goal():
    maze = Maze.from_text("S..G\n....\nG...")
    assert maze.heuristic((0, 0)) == 2
    assert maze.heuristic((1, 3)) == 1


@pytest.mark.parametrize("strategy", list(Strategy))
def test_every_strategy_solves_corridor(corridor, strategy):
    result = explore(corridor.start, corridor.is_goal, corridor.successors,
                     heuristic=corridor.heuristic, strategy=strategy)
    # only one route exists; the dead end at (2,1)/(3,1) must not matter
    assert result.path == CORRIDOR_PATH
    assert result.cost == 12


def test_walled_in_goal():
    maze = Maze.from_text("S.#G")
    for strategy in Strategy:
        assert search(maze.start, maze.is_goal, maze.successors, maze.heuristic, strategy) is None


@pytest.mark.parametrize("text, message", [
    ("...G", "no start"),
    ("S...", "no goal"),
])
def test_incomplete_maze(text, message):
    with pytest.raises(ValueError, match=message):
        Maze.from_text(text)


def test_render_marks_path():
    maze = Maze.from_text("S..\n##.\nG..")
    path = search(maze.start, maze.is_goal, maze.successors, strategy=Strategy.BFS)
    assert maze.render(path) == "S**\n##*\nG**"


def test_blank_rows_are_open_floor():
    maze = Maze.from_text("\nS  \n   \n  G\n")

    assert maze.rows == 3
    assert maze.start == (0, 0)
    assert maze.goals == {(2, 2)}
    assert search(maze.start, maze.is_goal, maze.successors, strategy=Strategy.UNIFORM_COST)[-1] == (2, 2)
