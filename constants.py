"""Shared defaults for the command line tools."""

# Method names accepted by search.py (see strategies.engine.Strategy.parse for aliases)
ENUM_METHODS = ["DFS", "BFS", "UCS", "AS"]
DEFAULT_METHOD = "AS"

# Problem file extensions (anything else is read as a Nodes:/Edges: graph file)
MAP_CONFIG_EXTENSIONS = (".cfg", ".ini")
MAZE_EXTENSIONS = (".maze",)

MAZE_WALL = "#"
MAZE_START = "S"
MAZE_GOAL = "G"
MAZE_PATH = "*"
MAZE_OPEN = "."
