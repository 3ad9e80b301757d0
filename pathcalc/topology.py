"""
Topology helpers for pathcalc
- Builds the 11-node demo graph (nodes A-J and an isolated Z)
- Saves/loads graphs as human-readable YAML
- Converts to and from networkx graphs
Usage:
    from pathcalc.topology import build_demo_graph, save_graph_yaml, load_graph_yaml
    graph = build_demo_graph()
    save_graph_yaml(graph, "config/demo_graph.yaml")
    graph = load_graph_yaml("config/demo_graph.yaml")
"""

import yaml
import networkx as nx

from pathcalc.errors import InvalidArgumentError
from pathcalc.graph import Graph

# --- Demo graph ---
DEMO_NODES = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "Z"]

# (from, to, weight, bidirectional)
DEMO_CONNECTIONS = [
    ("A", "B", 14, True),
    ("A", "C", 10, True),
    ("A", "D", 14, True),
    ("A", "E", 21, True),
    ("B", "C", 9, True),
    ("B", "E", 10, True),
    ("B", "F", 14, True),
    ("C", "D", 9, False),
    ("D", "G", 10, False),
    ("E", "H", 11, True),
    ("F", "C", 10, False),
    ("F", "H", 10, True),
    ("F", "I", 9, True),
    ("G", "F", 8, False),
    ("G", "I", 9, True),
    ("H", "J", 9, True),
    ("I", "J", 10, True),
]


def build_graph(nodes, connections):
    """
    Build a Graph from a node list and (from, to, weight, bidirectional) tuples.
    Any validation error from the graph propagates unchanged.
    """
    graph = Graph()
    for name in nodes:
        graph.add_node(name)
    for from_name, to_name, weight, bidirectional in connections:
        graph.add_connection(from_name, to_name, weight, bidirectional)
    return graph


def build_demo_graph():
    """The fixed demonstration graph. Z has no connections at all."""
    return build_graph(DEMO_NODES, DEMO_CONNECTIONS)


# ----------------------
# YAML I/O
# ----------------------

def save_graph_yaml(graph, path="config/topology.yaml"):
    """
    Save nodes and every stored edge as YAML.
    Bidirectional connections are written as their two directed edges.
    """
    out = {
        'nodes': graph.node_names(),
        'edges': [
            {'from': u, 'to': v, 'weight': float(w), 'bidirectional': False}
            for u, v, w in graph.edges()
        ],
    }
    with open(path, 'w') as f:
        yaml.safe_dump(out, f, sort_keys=False)
    return path


def load_graph_yaml(path="config/topology.yaml"):
    """
    Load a YAML topology into a Graph.
    Edges go through Graph.add_connection, so file input gets the same
    validation as code (duplicate nodes, unknown endpoints, bad weights).
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if 'nodes' not in data:
        raise InvalidArgumentError(f"Topology file '{path}' has no 'nodes' section.")

    connections = []
    for e in data.get('edges') or []:
        bidirectional = e.get('bidirectional', False)
        # a quoted "false" would otherwise be truthy
        if not isinstance(bidirectional, bool):
            raise InvalidArgumentError(
                f"Edge {e['from']!r} -> {e['to']!r}: bidirectional must be true or false, "
                f"got {bidirectional!r}."
            )
        connections.append((e['from'], e['to'], e['weight'], bidirectional))
    return build_graph(data['nodes'] or [], connections)


# ----------------------
# networkx bridge
# ----------------------

def to_networkx(graph):
    """
    Convert to a networkx DiGraph with a 'weight' edge attribute.
    Parallel edges collapse to the lightest one.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.node_names())
    for u, v, w in graph.edges():
        if G.has_edge(u, v) and G[u][v]['weight'] <= w:
            continue
        G.add_edge(u, v, weight=w)
    return G


def from_networkx(G, weight='weight'):
    """
    Build a Graph from a networkx graph. Undirected graphs produce
    bidirectional connections; a missing weight attribute counts as 1.0.
    """
    graph = Graph()
    for n in G.nodes():
        graph.add_node(n)
    bidirectional = not G.is_directed()
    for u, v, d in G.edges(data=True):
        graph.add_connection(u, v, d.get(weight, 1.0), bidirectional)
    return graph


# ----------------------
# Small summary helper
# ----------------------
def topology_summary(graph):
    n = len(graph)
    m = graph.number_of_edges()
    weights = [w for _, _, w in graph.edges()]
    return {
        'nodes': n,
        'edges': m,
        'avg_out_degree': m / n if n else 0.0,
        'avg_weight': sum(weights) / len(weights) if weights else 0.0,
    }


# If this module is run directly, build the demo graph and print a summary
if __name__ == "__main__":
    graph = build_demo_graph()
    print("Demo topology created. Summary:")
    print(topology_summary(graph))
    save_path = save_graph_yaml(graph, "config/demo_graph_sample.yaml")
    print("Saved topology to:", save_path)
