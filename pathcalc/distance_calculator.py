"""
Single-source distance calculators over a pathcalc Graph.

DistanceCalculator is the naive Dijkstra: the closest unsettled node is
found with a linear scan each round, O(V^2) overall. HeapDistanceCalculator
returns the same distances using a binary heap.

Working distances are kept in a dict owned by each call, never on the
nodes, so the graph is read-only while solving and calculations over the
same graph may run concurrently.
"""

import heapq
import logging
import math

from pathcalc.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

INF = math.inf


class DistanceCalculator:
    """Naive (non-heap) Dijkstra returning a name -> distance mapping."""

    def calculate_distances(self, graph, start_name):
        """
        Compute the shortest distance from `start_name` to every node.

        Args:
            graph: pathcalc.graph.Graph
            start_name: Name of the source node

        Returns:
            dict: node name -> distance, in graph insertion order.
                  Unreachable nodes map to math.inf.

        Raises:
            InvalidArgumentError: start_name is not a node of the graph
        """
        if start_name not in graph:
            raise InvalidArgumentError("Starting node must be in graph.")

        distances = self._initialise(graph, start_name)
        self._process_graph(graph, distances)
        return self._extract_distances(graph, distances)

    def _initialise(self, graph, start_name):
        # keyed by node identity; names stay the public interface
        distances = {node: INF for node in graph}
        distances[graph.get_node(start_name)] = 0.0
        return distances

    def _process_graph(self, graph, distances):
        # list keeps graph order for the scan; set gives O(1) membership
        queue = list(graph)
        unsettled = set(queue)
        settled_count = 0

        while True:
            next_node = self._closest(queue, distances)
            if next_node is None:
                break
            self._process_node(next_node, distances, unsettled)
            queue.remove(next_node)
            unsettled.discard(next_node)
            settled_count += 1

        logger.debug("settled %d of %d nodes", settled_count, len(distances))

    @staticmethod
    def _closest(queue, distances):
        """Unsettled node with the smallest finite distance, first one on ties."""
        best = None
        best_distance = INF
        for node in queue:
            d = distances[node]
            if d < best_distance:
                best, best_distance = node, d
        return best

    @staticmethod
    def _process_node(node, distances, unsettled):
        base = distances[node]
        for edge in node.outgoing_edges:
            if edge.target not in unsettled:
                continue
            candidate = base + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate

    @staticmethod
    def _extract_distances(graph, distances):
        return {node.name: distances[node] for node in graph}


class HeapDistanceCalculator(DistanceCalculator):
    """
    Same contract and results as DistanceCalculator, but selects the next
    node from a binary heap (lazy deletion of stale entries).
    """

    def _process_graph(self, graph, distances):
        order = {node: i for i, node in enumerate(graph)}
        unsettled = set(distances)
        heap = [(d, order[node], node) for node, d in distances.items() if d == 0.0]
        heapq.heapify(heap)

        while heap:
            d, _, node = heapq.heappop(heap)
            if node not in unsettled or d > distances[node]:
                continue
            for edge in node.outgoing_edges:
                target = edge.target
                if target not in unsettled:
                    continue
                candidate = d + edge.weight
                if candidate < distances[target]:
                    distances[target] = candidate
                    heapq.heappush(heap, (candidate, order[target], target))
            unsettled.discard(node)

        logger.debug("heap run left %d nodes unsettled", len(unsettled))


def get_calculator(name="naive"):
    """
    Return a calculator instance by name.

    Args:
        name: 'naive', 'heap' or 'networkx'
    """
    if name == "naive":
        return DistanceCalculator()
    if name == "heap":
        return HeapDistanceCalculator()
    if name == "networkx":
        # networkx is only imported on demand
        from pathcalc.baseline_dijkstra import NetworkxDistanceCalculator
        return NetworkxDistanceCalculator()
    raise InvalidArgumentError(f"Unknown calculator '{name}'.")
