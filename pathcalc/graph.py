"""
Weighted graph model used by the distance calculators.
- Edge: immutable directed arc (target node, positive weight)
- Node: named vertex owning its outgoing edges
- Graph: owns uniquely-named nodes and builds the connections between them
Nodes carry no working state: the calculators keep distances in their own
scratch maps, so a built graph can be shared by any number of calculations.
Usage:
    from pathcalc.graph import Graph
    g = Graph()
    g.add_node("A"); g.add_node("B")
    g.add_connection("A", "B", 4.0, bidirectional=True)
"""

import logging
import math
import numbers

from pathcalc.errors import (
    DuplicateNodeError,
    InvalidArgumentError,
    NodeNotFoundError,
)

logger = logging.getLogger(__name__)


class Edge:
    """Directed weighted arc. The target is a non-owning reference."""

    __slots__ = ("_target", "_weight")

    def __init__(self, target, weight):
        if target is None:
            raise InvalidArgumentError("Edge target must not be None.")
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise InvalidArgumentError(f"Weight must be a real number, got {weight!r}.")
        try:
            weight = float(weight)
        except OverflowError:
            raise InvalidArgumentError("Weight is too large to be a float.") from None
        # isfinite also rejects NaN
        if not (math.isfinite(weight) and weight > 0):
            raise InvalidArgumentError("Distance must be positive and finite.")
        self._target = target
        self._weight = weight

    @property
    def target(self):
        return self._target

    @property
    def weight(self):
        return self._weight

    def __repr__(self):
        return f"Edge(target={self._target.name!r}, weight={self._weight})"


class Node:
    def __init__(self, name):
        self.name = name
        self._edges = []

    @property
    def outgoing_edges(self):
        return tuple(self._edges)

    def _add_edge(self, target, weight):
        """
        Append an outgoing edge to `target`. Internal: use
        Graph.add_connection, which checks that `target` is in the same graph.
        Raises InvalidArgumentError for a self-loop or a non-positive weight.
        """
        if target is self:
            raise InvalidArgumentError("Node may not connect to itself.")
        edge = Edge(target, weight)
        self._edges.append(edge)
        return edge

    def __repr__(self):
        return f"Node({self.name!r}, edges={len(self._edges)})"


class Graph:
    def __init__(self):
        # insertion ordered; result mappings follow this order
        self.nodes = {}

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, name):
        if name in self.nodes:
            raise DuplicateNodeError(name)
        node = Node(name)
        self.nodes[name] = node
        return node

    def get_node(self, name):
        try:
            return self.nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def node_names(self):
        return list(self.nodes)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_connection(self, from_name, to_name, weight, bidirectional=False):
        """
        Connect two existing nodes.

        Args:
            from_name: Name of the source node
            to_name: Name of the target node
            weight: Positive edge weight
            bidirectional: Also add the mirror edge to -> from (same weight,
                independent Edge object)

        Raises:
            NodeNotFoundError: either name is not in the graph
            InvalidArgumentError: self-loop or weight <= 0

        All checks run before anything is appended, so a failing call
        leaves the graph untouched.
        """
        source = self.get_node(from_name)
        target = self.get_node(to_name)
        if source is target:
            raise InvalidArgumentError("Node may not connect to itself.")
        # validate once up front; Edge() repeats the same check
        Edge(target, weight)

        source._add_edge(target, weight)
        if bidirectional:
            target._add_edge(source, weight)
        logger.debug("connection %s %s %s (%s)", from_name,
                     "<->" if bidirectional else "->", to_name, weight)

    def edges(self):
        """Yield (source_name, target_name, weight) for every stored edge."""
        for node in self.nodes.values():
            for edge in node.outgoing_edges:
                yield node.name, edge.target.name, edge.weight

    def number_of_edges(self):
        return sum(len(node.outgoing_edges) for node in self.nodes.values())

    def __contains__(self, name):
        return name in self.nodes

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes.values())
