import pandas as pd

from util import Graph, Node


def split_csv_allow_commas(line, min_fields):
    """Split on commas that are not inside parentheses."""
    parts = []
    buf = []
    depth = 0
    for ch in line:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth = max(depth - 1, 0)
            buf.append(ch)
        elif ch == ',':
            if depth == 0:
                parts.append("".join(buf).strip())
                buf = []
            else:
                buf.append(ch)
        else:
            buf.append(ch)
    if buf:
        parts.append("".join(buf).strip())
    if len(parts) < min_fields:
        raise ValueError(f"Line '{line}' parsed into too few fields: {parts}")
    return parts


def parse_config_file(path):
    """Parses a map config file into DataFrames

    Args:
        path (string): Filepath to the configuration txt file

    Returns:
        nodes_df: Pandas DataFrame of nodes (index: node id, columns: lat, lon, label)
        ways_df: Pandas DataFrame of ways (columns: id, from, to, name, type, time)
        start: start node id or None
        goals: list of goal node ids
    """
    section = None
    nodes = {}
    ways = []
    start = None
    goals = []

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            if section == "[NODES]":
                try:
                    p = split_csv_allow_commas(line, 4)
                    nid = int(p[0])
                    nodes[nid] = {"lat": float(p[1]), "lon": float(p[2]), "label": p[3]}
                except ValueError as e:
                    print(f"Error parsing node line '{line}': {e}")

            elif section == "[WAYS]":
                try:
                    p = split_csv_allow_commas(line, 6)
                    travel_time = float(p[5])
                    if travel_time < 0:
                        raise ValueError(f"negative travel time {travel_time}")
                    ways.append({
                        "id": int(p[0]),
                        "from": int(p[1]),
                        "to": int(p[2]),
                        "name": p[3],
                        "type": p[4],
                        "time": travel_time,
                    })
                except ValueError as e:
                    print(f"Error parsing way line '{line}': {e}")

            elif section == "[META]":
                try:
                    p = [x.strip() for x in line.split(",")]
                    key = p[0].upper()
                    if key == "START":
                        start = int(p[1])
                    elif key == "GOAL":
                        goals = [int(g) for g in p[1:] if g]
                except (IndexError, ValueError) as e:
                    print(f"Error parsing meta line '{line}': {e}")

    nodes_df = pd.DataFrame.from_dict(nodes, orient="index", columns=["lat", "lon", "label"])
    nodes_df.index.name = "id"
    ways_df = pd.DataFrame(ways, columns=["id", "from", "to", "name", "type", "time"])
    return nodes_df, ways_df, start, goals


def build_graph(nodes_df, ways_df, start=None, goals=()):
    """Turn the node/way DataFrames into a Graph (lon as x, lat as y, way time as edge cost)."""
    graph = Graph()
    for node_id, row in nodes_df.iterrows():
        graph.add_node(Node(node_id, row['lon'], row['lat']))
    for _, row in ways_df.iterrows():
        graph.add_edge(int(row['from']), int(row['to']), float(row['time']))
    graph.origin = start
    graph.destinations = set(goals)
    return graph


def load_graph(path):
    """Parse a map config file straight into a Graph."""
    nodes_df, ways_df, start, goals = parse_config_file(path)
    return build_graph(nodes_df, ways_df, start, goals)
