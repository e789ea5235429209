"""Package exposing search strategy implementations."""

from .common import Node, SearchResult, Transition, euclidean, manhattan, path_cost
from .engine import Strategy, explore, search
from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar

__all__ = [
    "Node", "SearchResult", "Transition", "euclidean", "manhattan", "path_cost",
    "Strategy", "explore", "search",
    "run_dfs", "run_bfs", "run_dijkstra", "run_astar",
]
