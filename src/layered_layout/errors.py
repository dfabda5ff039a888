"""Input validation errors raised before any layout work starts."""

from __future__ import annotations

from typing import Any


class GraphValidationError(ValueError):
    """Base class for every malformed-input failure."""


class DuplicateNodeError(GraphValidationError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"duplicate node id '{node_id}'")
        self.node_id = node_id


class UnknownNodeError(GraphValidationError):
    """An edge (or a query) references a node id that is not in the graph.

    ``edge`` is the offending edge, or None when raised from a lookup.
    """

    def __init__(self, edge: Any, missing_id: str) -> None:
        if edge is None:
            message = f"unknown node id '{missing_id}'"
        else:
            message = f"edge '{edge.id}' references unknown node id '{missing_id}'"
        super().__init__(message)
        self.edge = edge
        self.missing_id = missing_id


class InvalidInputError(GraphValidationError):
    """Raw input does not have the expected graph shape."""
