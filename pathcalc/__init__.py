"""Shortest-path distances over a weighted graph (Graph, DistanceCalculator)."""

from .errors import GraphError, DuplicateNodeError, NodeNotFoundError, InvalidArgumentError
from .graph import Edge, Node, Graph
from .distance_calculator import DistanceCalculator, HeapDistanceCalculator, get_calculator

__all__ = [
    "Edge",
    "Node",
    "Graph",
    "DistanceCalculator",
    "HeapDistanceCalculator",
    "get_calculator",
    "GraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "InvalidArgumentError",
]
