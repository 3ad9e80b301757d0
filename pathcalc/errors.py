"""
Error types raised by the graph model and the distance calculators.

Each error also derives from the builtin exception a caller would
naturally expect (KeyError for lookups, ValueError for bad input),
so existing `except KeyError` / `except ValueError` handlers keep working.
"""


class GraphError(Exception):
    """Base class for every error raised by pathcalc."""


class DuplicateNodeError(GraphError, KeyError):
    """A node with the same name is already registered in the graph."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Node '{name}' already exists.")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class NodeNotFoundError(GraphError, KeyError):
    """A connection endpoint names a node absent from the graph."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Node '{name}' does not exist.")

    def __str__(self):
        return self.args[0]


class InvalidArgumentError(GraphError, ValueError):
    """Non-positive weight, self-loop, unknown start node or bad option."""
