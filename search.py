import argparse
import logging
import os
import sys
import time
import tracemalloc

import constants
import file_reader
from maze import Maze
from strategies.engine import Strategy, explore
from util import GraphReader, FormatBytes

try:
    import psutil  # type: ignore
except ImportError:  # pragma: no cover - optional dependency
    psutil = None


class Problem:
    """Everything the engine needs to search one loaded problem file."""
    def __init__(self, start, is_goal, successors, heuristic, describe=str, render=None):
        self.start = start
        self.is_goal = is_goal
        self.successors = successors
        self.heuristic = heuristic
        self.describe = describe  # how a state is printed on the path line
        self.render = render      # optional path -> str drawing (mazes)


def load_problem(filename):
    """Pick a reader from the file extension and wrap the result as a Problem."""
    ext = os.path.splitext(filename)[1].lower()
    if ext in constants.MAZE_EXTENSIONS:
        try:
            maze = Maze.from_file(filename)
        except FileNotFoundError:
            print(f"Error: File not found: {filename}")
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {filename}: {e}")
            sys.exit(1)
        return Problem(maze.start, maze.is_goal, maze.successors, maze.heuristic,
                       describe=lambda cell: f"({cell[0]},{cell[1]})", render=maze.render)

    if ext in constants.MAP_CONFIG_EXTENSIONS:
        try:
            graph = file_reader.load_graph(filename)
        except FileNotFoundError:
            print(f"Error: File not found: {filename}")
            sys.exit(1)
    else:
        graph = GraphReader(filename).read_problem()
    return Problem(graph.origin, graph.is_goal, graph.successors, graph.heuristic)


def _execute_with_metrics(problem, strategy, max_expansions=None):
    """Run a search and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage); None if psutil missing
    """
    tracemalloc.start()
    proc = psutil.Process() if psutil else None
    t0 = time.perf_counter()
    try:
        result = explore(problem.start, problem.is_goal, problem.successors,
                         heuristic=problem.heuristic, strategy=strategy,
                         max_expansions=max_expansions)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    rss_after = proc.memory_info().rss if proc else None
    return result, dt, peak, rss_after


def _emit_metrics(metrics_mode, method, nodes_expanded, total_cost, runtime_s, peak_bytes, rss_after):
    if metrics_mode not in ("stderr", "stdout"):
        return
    metrics_line = (
        f"Metrics: method={method} nodes_expanded={nodes_expanded} "
        f"path_cost={total_cost if total_cost is not None else 'N/A'} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={FormatBytes(peak_bytes)}"
        + (f" rss_now={FormatBytes(rss_after)}" if rss_after is not None else "")
    )
    if metrics_mode == "stdout":
        print(metrics_line)
    else:
        print(metrics_line, file=sys.stderr)


def main(filename, method, metrics_mode="none", max_expansions=None):
    """Run one search over a problem file and print the result.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output

    Returns the process exit status.
    """
    method = method.upper()
    try:
        strategy = Strategy.parse(method)
    except ValueError:
        print(f"Unknown method: {method}")
        print(f"Methods: {', '.join(constants.ENUM_METHODS)}")
        return 1

    problem = load_problem(filename)
    if problem.start is None:
        print(f"Error: {filename} does not define an origin")
        return 1

    result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(problem, strategy, max_expansions)

    # Expected output:
    # <filename> <method>
    # <goal_node> <nodes_created> <path>
    print(f"{filename} {method}")
    if result is None:
        print("None 0 ")
        # explore() does not report how far a failed search got
        _emit_metrics(metrics_mode, method, "N/A", None, runtime_s, peak_bytes, rss_after)
        return 0

    goal_node, nodes_expanded, path_list, total_cost = result
    print(f"Goal node reached:{problem.describe(goal_node)}")
    print(f"Number of Nodes visited:{nodes_expanded}")
    print(" -> ".join(problem.describe(n) for n in path_list))
    print(f"Total path cost:{total_cost:g}")
    if problem.render is not None:
        print(problem.render(path_list))

    _emit_metrics(metrics_mode, method, nodes_expanded, f"{total_cost:g}", runtime_s, peak_bytes, rss_after)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Run a graph search over a problem file")
    parser.add_argument("filename", help="Problem file (graph .txt, map config .cfg, or .maze)")
    parser.add_argument("method", nargs="?", default=constants.DEFAULT_METHOD,
                        help=f"Search method: {', '.join(constants.ENUM_METHODS)} (default {constants.DEFAULT_METHOD})")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr",
                       help="Print a metrics line to stderr")
    group.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                       help="Print a metrics line to stdout")
    parser.add_argument("--max-expansions", type=int, default=None,
                        help="Give up (and report no path) after this many expansions")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.set_defaults(metrics_mode="none")
    return parser


if __name__ == "__main__":
    # e.g., python search.py problem.txt DFS --metrics
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(main(args.filename, args.method, args.metrics_mode, args.max_expansions))
