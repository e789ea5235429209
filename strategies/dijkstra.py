from strategies.engine import Strategy, explore


def run_dijkstra(start, is_goal, successors, max_expansions=None):
    """
    Dijkstra's algorithm - uninformed shortest path search.
    Args:
        start: start state
        is_goal: callable(state) -> bool
        successors: callable(state) -> iterable of (state, cost) pairs, costs >= 0
        max_expansions: optional expansion budget
    Returns:
        SearchResult(goal, nodes_expanded, path, cost) or None
    """
    return explore(start, is_goal, successors, strategy=Strategy.UNIFORM_COST,
                   max_expansions=max_expansions)
