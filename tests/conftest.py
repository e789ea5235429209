"""
Pytest configuration and shared fixtures.

Small hand-built state spaces used across the engine tests.
"""

from pathlib import Path

import pytest

from strategies.common import Transition


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def test_cases_dir(project_root: Path) -> Path:
    """Return the folder holding the sample problem files."""
    return project_root / "Test_Cases"


def adjacency_successors(adjacency):
    """Successor function over a {state: [(next_state, cost), ...]} dict."""
    def successors(state):
        return [Transition(nxt, cost) for nxt, cost in adjacency.get(state, [])]
    return successors


@pytest.fixture
def grid_2x2():
    """2x2 grid of (row, col) cells, unit moves between horizontal/vertical neighbours."""
    cells = [(0, 0), (0, 1), (1, 0), (1, 1)]

    def successors(cell):
        r, c = cell
        moves = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = (r + dr, c + dc)
            if nxt in cells:
                moves.append(Transition(nxt, 1))
        return moves

    return (0, 0), (lambda cell: cell == (1, 1)), successors


@pytest.fixture
def weighted_graph():
    """Directed graph where the fewest-edge route to G is not the cheapest.

    A -> G directly costs 10; A -> B -> C -> G costs 1 + 1 + 1 = 3.
    """
    adjacency = {
        "A": [("G", 10), ("B", 1)],
        "B": [("C", 1), ("A", 1)],
        "C": [("G", 1)],
        "G": [],
    }
    return "A", (lambda s: s == "G"), adjacency_successors(adjacency)


@pytest.fixture
def disconnected_graph():
    """Two components, start and goal in different ones (with a cycle on each side)."""
    adjacency = {
        1: [(2, 1)],
        2: [(3, 1), (1, 1)],
        3: [(1, 1), (3, 1)],
        10: [(11, 1)],
        11: [(10, 1)],
    }
    return 1, (lambda s: s == 11), adjacency_successors(adjacency)


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path as a string."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
