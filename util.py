import sys

from strategies.common import euclidean


class Node:
    """Represents a node in the 2D graph."""
    def __init__(self, node_id, x, y):
        self.id = int(node_id)
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Node {self.id}: ({self.x:g},{self.y:g})"


class Graph:
    """Represents the complete directed graph."""
    def __init__(self):
        self.nodes = {}           # {node_id: Node_object}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None        # Origin node ID
        self.destinations = set() # Set of destination node IDs

    def add_node(self, node):
        """Adds a Node object to the graph."""
        self.nodes[node.id] = node
        if node.id not in self.adjacency:
            self.adjacency[node.id] = []

    def add_edge(self, from_id, to_id, cost):
        """Adds a directed edge and its cost."""
        if cost < 0:
            raise ValueError(f"Edge ({from_id},{to_id}) has negative cost {cost}")
        self.adjacency.setdefault(from_id, []).append((to_id, cost))

    def get_coordinates(self, node_id):
        """Returns the (x, y) coordinates of a node."""
        node = self.nodes.get(node_id)
        return (node.x, node.y) if node else None

    def successors(self, node_id):
        """Outgoing (to_node_id, cost) pairs in ascending id order, which is the expansion tie-break."""
        return sorted(self.adjacency.get(node_id, []), key=lambda x: x[0])

    def is_goal(self, node_id):
        return node_id in self.destinations

    def heuristic(self, node_id):
        """Straight-line distance to the nearest destination (0 when coordinates are unknown)."""
        coords = self.get_coordinates(node_id)
        goal_coords = [self.get_coordinates(g) for g in self.destinations]
        goal_coords = [gc for gc in goal_coords if gc is not None]
        if coords is None or not goal_coords:
            return 0
        return min(euclidean(coords, gc) for gc in goal_coords)


class GraphReader:
    """Handles parsing the problem specification file."""

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object."""
        try:
            with open(self.filename, 'r', encoding='utf-8') as f:
                lines = [line.strip() for line in f if line.strip()]
        except FileNotFoundError:
            print(f"Error: File not found: {self.filename}")
            sys.exit(1)
        return self.parse_lines(lines)

    def parse_lines(self, lines):
        current_section = None

        for line in lines:
            # Determining which section of the file its currently reading
            header = line.lower().rstrip(':').strip()
            if header in ("nodes", "edges", "origin", "destinations"):
                current_section = header.upper()
                continue

            if current_section == "NODES":
                # Example: 1: (4,1)
                try:
                    parts = line.split(':')
                    node_id = int(parts[0].strip())
                    coords_str = parts[1].strip().strip('()')
                    x, y = map(float, coords_str.split(','))
                    self.graph.add_node(Node(node_id, x, y))
                except (IndexError, ValueError) as e:
                    print(f"Error parsing node line '{line}': {e}")

            elif current_section == "EDGES":
                # Example: (2,1): 4
                try:
                    parts = line.split(':')
                    cost = float(parts[1].strip())
                    if cost.is_integer():
                        cost = int(cost)
                    nodes_str = parts[0].strip().strip('()')
                    from_id, to_id = map(int, nodes_str.split(','))
                    self.graph.add_edge(from_id, to_id, cost)
                except (IndexError, ValueError) as e:
                    print(f"Error parsing edge line '{line}': {e}")

            elif current_section == "ORIGIN":
                # Example: 2
                try:
                    self.graph.origin = int(line)
                except ValueError as e:
                    print(f"Error parsing origin line '{line}': {e}")

            elif current_section == "DESTINATIONS":
                # Example: 5; 4
                try:
                    dest_ids = [int(d.strip()) for d in line.split(';') if d.strip()]
                    self.graph.destinations.update(dest_ids)
                except ValueError as e:
                    print(f"Error parsing destinations line '{line}': {e}")

        return self.graph


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
