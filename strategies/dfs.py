from strategies.engine import Strategy, explore


def run_dfs(start, is_goal, successors, max_expansions=None):
    """Depth-First Search: returns SearchResult(goal, nodes_expanded, path, cost) or None.

    States already on the current branch are never re-entered, so cycles cannot
    trap the search on a finite graph.
    """
    return explore(start, is_goal, successors, strategy=Strategy.DFS, max_expansions=max_expansions)
