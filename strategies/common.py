import math
from typing import Any, Hashable, NamedTuple, Optional, Tuple


class Transition(NamedTuple):
    """An edge to a reachable state and the cost of taking it."""
    state: Hashable
    cost: float = 1


class Node(NamedTuple):
    """A path prefix on the frontier."""
    path: Tuple[Hashable, ...]
    cost: float = 0
    estimate: float = 0

    @property
    def state(self):
        return self.path[-1]

    @property
    def priority(self):
        return self.cost + self.estimate

    def extend(self, state, cost, estimate=0):
        return Node(self.path + (state,), self.cost + cost, estimate)


class SearchResult(NamedTuple):
    """Outcome of a successful search: (goal_node, nodes_expanded, path, total_cost)."""
    goal: Any
    nodes_expanded: int
    path: list
    cost: float


def as_transition(item):
    """Accept a Transition or any (state, cost) pair."""
    if isinstance(item, Transition):
        return item
    state, cost = item
    return Transition(state, cost)


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)


def manhattan(a, b):
    """Manhattan distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return abs(x1 - x2) + abs(y1 - y2)


def path_cost(path, successors) -> Optional[float]:
    """Sum the edge costs along path using the successor function; None if an edge is missing."""
    total = 0
    for from_state, to_state in zip(path, path[1:]):
        edge_cost = None
        for item in successors(from_state):
            move = as_transition(item)
            if move.state == to_state:
                edge_cost = move.cost
                break
        if edge_cost is None:
            return None
        total += edge_cost
    return total
