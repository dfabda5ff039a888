"""layered-layout: layered (Sugiyama-style) layout for directed graphs."""

from layered_layout.config import LayoutConfig
from layered_layout.errors import DuplicateNodeError, GraphValidationError, InvalidInputError, UnknownNodeError
from layered_layout.ir.graph import Edge, Graph, NodeData
from layered_layout.layout.engine import layout
from layered_layout.layout.types import LayoutNode, LayoutResult, Position
from layered_layout.parsers import parse
from layered_layout.types import LayoutDirection


def layout_json(src: str, direction: str | None = None, config: LayoutConfig | None = None) -> LayoutResult:
    """Parse a JSON graph description and lay it out.

    Args:
        src: JSON text with ``nodes`` and ``edges`` arrays.
        direction: Short direction code ('TB', 'TD', 'BT', 'LR', 'RL'); None means top to bottom.
        config: Layout configuration; defaults when None.

    Returns:
        The layout result.

    Raises:
        GraphValidationError: If the input is malformed, has duplicate ids or dangling edges.
        ValueError: If the direction is unknown.
    """
    layout_direction = LayoutDirection.default() if direction is None else LayoutDirection.from_string(direction)
    graph = parse(src)
    return layout(graph, layout_direction, config)


__all__ = [
    "DuplicateNodeError",
    "Edge",
    "Graph",
    "GraphValidationError",
    "InvalidInputError",
    "LayoutConfig",
    "LayoutDirection",
    "LayoutNode",
    "LayoutResult",
    "NodeData",
    "Position",
    "UnknownNodeError",
    "layout",
    "layout_json",
    "parse",
]
