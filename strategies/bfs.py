from strategies.engine import Strategy, explore


def run_bfs(start, is_goal, successors, max_expansions=None):
    """Breadth-First Search over the successor function (edge costs are summed but do not steer)."""
    return explore(start, is_goal, successors, strategy=Strategy.BFS, max_expansions=max_expansions)
