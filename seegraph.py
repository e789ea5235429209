import argparse
import sys

import matplotlib
import matplotlib.pyplot as plt

import constants
from strategies.engine import Strategy, search
from util import GraphReader


def plot_graph(graph, path=None, title="Graph Visualization"):
    """Draw a Graph with matplotlib and highlight path (list of node ids) if given.

    Returns the matplotlib Figure; the caller decides whether to show or save it.
    """
    fig, ax = plt.subplots(figsize=(10, 8))
    coords = {node_id: graph.get_coordinates(node_id) for node_id in graph.nodes}
    path = path or []
    path_edges = set(zip(path, path[1:]))

    # Nodes, with the origin and destinations highlighted
    for node, (x, y) in coords.items():
        if node == graph.origin:
            ax.scatter(x, y, s=600, color='lightgreen', edgecolor='darkgreen', linewidth=3, zorder=4)
        elif node in graph.destinations:
            ax.scatter(x, y, s=600, facecolors='lightcoral', edgecolor='darkred', linewidth=3, zorder=4)
        else:
            ax.scatter(x, y, s=500, zorder=3, color='lightblue', edgecolor='darkblue', linewidth=2)
        ax.text(x, y, f"{node}", fontsize=16, ha='center', va='center', color="black",
                fontweight='bold', zorder=5)

    for start, edges in graph.adjacency.items():
        for end, w in edges:
            if start not in coords or end not in coords:
                continue
            x1, y1 = coords[start]
            x2, y2 = coords[end]
            on_path = (start, end) in path_edges
            ax.annotate("", xy=(x2, y2), xytext=(x1, y1),
                        arrowprops=dict(arrowstyle="->", shrinkA=14, shrinkB=14,
                                        color='red' if on_path else 'darkgray',
                                        linewidth=3 if on_path else 1.5, alpha=0.8),
                        zorder=2 if on_path else 1)
            # offset the weight label so both directions of a two-way edge stay readable
            dx, dy = x2 - x1, y2 - y1
            length = (dx**2 + dy**2)**0.5 or 1
            mid_x = (x1 + x2) / 2 - dy / length * 0.2
            mid_y = (y1 + y2) / 2 + dx / length * 0.2
            ax.text(mid_x, mid_y, f"{w:g}", fontsize=10, color='blue',
                    bbox=dict(boxstyle='round,pad=0.3', facecolor='white', edgecolor='blue', alpha=0.8),
                    zorder=2)

    ax.set_title(title, fontsize=18, fontweight='bold', pad=20)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3, linestyle='--')
    fig.tight_layout()
    return fig


def main(argv=None):
    """Plot the graph in a problem file with the path found by the chosen method; returns the exit status."""
    parser = argparse.ArgumentParser(description="Plot a problem graph and the path a search finds on it")
    parser.add_argument("filename", help="Graph problem file (Nodes:/Edges:/Origin:/Destinations:)")
    parser.add_argument("method", nargs="?", default=constants.DEFAULT_METHOD)
    parser.add_argument("--output", "-o", help="Save the figure here instead of opening a window")
    args = parser.parse_args(argv)

    try:
        strategy = Strategy.parse(args.method)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    if args.output:
        matplotlib.use("Agg")
    graph = GraphReader(args.filename).read_problem()
    found = search(graph.origin, graph.is_goal, graph.successors,
                   heuristic=graph.heuristic, strategy=strategy)
    if found is None:
        print(f"No path found with {args.method.upper()}")
    figure = plot_graph(graph, found, title=f"{args.filename} ({args.method.upper()})")
    if args.output:
        figure.savefig(args.output)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
