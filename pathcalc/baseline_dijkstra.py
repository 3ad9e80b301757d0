import math

import networkx as nx

from pathcalc.errors import InvalidArgumentError
from pathcalc.topology import to_networkx


def run_dijkstra(G, source):
    """
    Runs networkx's Dijkstra from `source` over a networkx graph.
    Returns {node: distance} for reachable nodes only.
    """
    return nx.single_source_dijkstra_path_length(G, source, weight='weight')


def networkx_distances(graph, start_name):
    """
    Reference distances for a pathcalc Graph, computed by networkx.
    Unreachable nodes are filled with math.inf so the result has the same
    shape as DistanceCalculator.calculate_distances.
    """
    if start_name not in graph:
        raise InvalidArgumentError("Starting node must be in graph.")
    G = to_networkx(graph)
    reached = run_dijkstra(G, start_name)
    return {name: float(reached.get(name, math.inf)) for name in graph.node_names()}


class NetworkxDistanceCalculator:
    """Adapter giving networkx_distances the calculator interface."""

    def calculate_distances(self, graph, start_name):
        return networkx_distances(graph, start_name)


if __name__ == "__main__":
    from pathcalc.topology import build_demo_graph

    print("Running networkx Dijkstra baseline...")
    graph = build_demo_graph()
    for name, distance in networkx_distances(graph, "A").items():
        print(f"{name}, {distance}")
