from strategies.engine import Strategy, explore


def run_astar(start, is_goal, successors, heuristic=None, max_expansions=None):
    """
    Performs A* search to find the cheapest path from start to any goal state.
    Args:
        start: start state
        is_goal: callable(state) -> bool
        successors: callable(state) -> iterable of (state, cost) pairs, costs >= 0
        heuristic: callable(state) -> estimated remaining cost; must not overestimate
            for the returned path to be optimal. An inconsistent estimate may cause
            states to be expanded more than once. None behaves like Dijkstra.
        max_expansions: optional expansion budget
    Returns:
        SearchResult(goal, nodes_expanded, path, cost) or None
    """
    return explore(start, is_goal, successors, heuristic=heuristic, strategy=Strategy.ASTAR,
                   max_expansions=max_expansions)
