"""Best-first search loop shared by every strategy.

DFS, BFS, uniform-cost (Dijkstra) and A* differ only in the order in which the
frontier hands back nodes, so a single loop drives all four:

    DFS           stack, most recently added first
    BFS           queue, earliest added first
    UNIFORM_COST  lowest accumulated cost first
    ASTAR         lowest accumulated cost + heuristic estimate first

Ties in the cost-ordered frontiers are broken by insertion order. A state
that was already expanded is expanded again only when it is reached more
cheaply, which with non-negative costs never happens for uniform cost (or A*
with a consistent heuristic) and keeps A* optimal when the heuristic is
admissible but inconsistent.
"""
import enum
import logging

from strategies.common import Node, SearchResult, as_transition
from strategies.frontier import PriorityFrontier, QueueFrontier, StackFrontier

logger = logging.getLogger(__name__)


class Strategy(enum.Enum):
    DFS = "DFS"
    BFS = "BFS"
    UNIFORM_COST = "UCS"
    ASTAR = "AS"

    @classmethod
    def parse(cls, name):
        """Map a method name as typed on the command line to a Strategy."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper()
        if key not in _ALIASES:
            raise ValueError(f"Unknown search strategy: {name!r}")
        return _ALIASES[key]

    @property
    def cost_ordered(self):
        return self in (Strategy.UNIFORM_COST, Strategy.ASTAR)

    def make_frontier(self):
        if self is Strategy.DFS:
            return StackFrontier()
        if self is Strategy.BFS:
            return QueueFrontier()
        if self is Strategy.UNIFORM_COST:
            return PriorityFrontier(key=lambda node: node.cost)
        return PriorityFrontier(key=lambda node: node.priority)


_ALIASES = {
    "DFS": Strategy.DFS,
    "BFS": Strategy.BFS,
    "UCS": Strategy.UNIFORM_COST,
    "UNIFORM_COST": Strategy.UNIFORM_COST,
    "UNIFORMCOST": Strategy.UNIFORM_COST,
    "DIJKSTRA": Strategy.UNIFORM_COST,
    "AS": Strategy.ASTAR,
    "ASTAR": Strategy.ASTAR,
    "A*": Strategy.ASTAR,
}


def explore(start, is_goal, successors, heuristic=None, strategy=Strategy.BFS, max_expansions=None):
    """Run one search and report how it went.

    Args:
        start: hashable start state
        is_goal: callable(state) -> bool
        successors: callable(state) -> iterable of Transition / (state, cost) pairs
        heuristic: callable(state) -> estimated remaining cost, used by A* only
        strategy: a Strategy or one of its names ("DFS", "BFS", "UCS", "AS", ...)
        max_expansions: optional budget; the search gives up once it is spent
    Returns:
        SearchResult(goal, nodes_expanded, path, cost) or None if no path was found
    """
    strategy = Strategy.parse(strategy)
    estimate = heuristic if (strategy is Strategy.ASTAR and heuristic is not None) else _zero

    frontier = strategy.make_frontier()
    frontier.push(Node((start,), 0, estimate(start)))
    closed = {}  # state -> cost at which it was last expanded
    expanded = 0
    logger.debug("Starting %s search from %r", strategy.name, start)

    while frontier:
        node = frontier.pop()
        state = node.state
        if strategy.cost_ordered:
            # a closed state is only reopened when reached more cheaply
            if state in closed and closed[state] <= node.cost:
                continue
            closed[state] = node.cost

        if is_goal(state):
            logger.debug("%s reached %r after %d expansions (cost %s)",
                         strategy.name, state, expanded, node.cost)
            return SearchResult(state, expanded, list(node.path), node.cost)

        if max_expansions is not None and expanded >= max_expansions:
            logger.debug("%s gave up after %d expansions", strategy.name, expanded)
            return None
        expanded += 1

        children = []
        for item in successors(state):
            move = as_transition(item)
            if move.cost < 0:
                raise ValueError(f"Negative transition cost {move.cost} from {state!r} to {move.state!r}")
            # branch closing for DFS/BFS, closed set for the cost-ordered strategies
            if strategy.cost_ordered:
                if move.state in closed and closed[move.state] <= node.cost + move.cost:
                    continue
            elif move.state in node.path:
                continue
            children.append(node.extend(move.state, move.cost, estimate(move.state)))

        # push in reverse so the first listed successor is popped first
        if strategy is Strategy.DFS:
            children.reverse()
        for child in children:
            frontier.push(child)

    logger.debug("%s exhausted the frontier after %d expansions", strategy.name, expanded)
    return None


def search(start, is_goal, successors, heuristic=None, strategy=Strategy.BFS, max_expansions=None):
    """Return the path (list of states from start to a goal) or None if there is none."""
    result = explore(start, is_goal, successors, heuristic, strategy, max_expansions)
    return None if result is None else result.path


def _zero(_state):
    return 0
