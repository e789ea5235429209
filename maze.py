"""Grid mazes as search problems.

A maze is rectangular text: ``#`` marks a wall, ``S`` the start cell, ``G`` a
goal cell and anything else is open floor. States are ``(row, col)`` tuples
and every move to a horizontally or vertically adjacent open cell costs 1.
"""
from typing import List, Optional, Set, Tuple

import constants
from strategies.common import Transition, manhattan

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}


class Maze:
    def __init__(self, rows: int, cols: int, start: Coord, goals: Set[Coord], walls: Optional[Set[Coord]] = None):
        self.rows = rows
        self.cols = cols
        self.start = start
        self.goals = set(goals)
        self.walls = walls or set()

    @classmethod
    def from_text(cls, text: str) -> "Maze":
        # blank rows inside the maze are open floor; only the surrounding empty lines go
        lines = [line.rstrip("\r") for line in text.strip("\r\n").split("\n")]
        start = None
        goals = set()
        walls = set()
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == constants.MAZE_WALL:
                    walls.add((r, c))
                elif ch == constants.MAZE_START:
                    start = (r, c)
                elif ch == constants.MAZE_GOAL:
                    goals.add((r, c))
        if start is None:
            raise ValueError(f"Maze has no start cell '{constants.MAZE_START}'")
        if not goals:
            raise ValueError(f"Maze has no goal cell '{constants.MAZE_GOAL}'")
        cols = max(len(line) for line in lines)
        return cls(len(lines), cols, start, goals, walls)

    @classmethod
    def from_file(cls, path) -> "Maze":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_text(f.read())

    def is_open(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def is_goal(self, cell: Coord) -> bool:
        return cell in self.goals

    def successors(self, cell: Coord) -> List[Transition]:
        r, c = cell
        moves = []
        for dr, dc in _MOVES.values():
            nxt = (r + dr, c + dc)
            if self.is_open(nxt):
                moves.append(Transition(nxt, 1))
        return moves

    def heuristic(self, cell: Coord) -> float:
        """Manhattan distance to the nearest goal (admissible with unit 4-neighbour moves)."""
        return min(manhattan(cell, goal) for goal in self.goals)

    def render(self, path=()) -> str:
        """Draw the maze with the path cells (other than start and goals) marked."""
        on_path = set(path)
        rows = []
        for r in range(self.rows):
            row = []
            for c in range(self.cols):
                cell = (r, c)
                if cell in self.walls:
                    row.append(constants.MAZE_WALL)
                elif cell == self.start:
                    row.append(constants.MAZE_START)
                elif cell in self.goals:
                    row.append(constants.MAZE_GOAL)
                elif cell in on_path:
                    row.append(constants.MAZE_PATH)
                else:
                    row.append(constants.MAZE_OPEN)
            rows.append("".join(row))
        return "\n".join(rows)
