"""Graph model handed to the layout engine."""

from layered_layout.ir.graph import DEFAULT_NODE_HEIGHT, DEFAULT_NODE_WIDTH, Edge, Graph, NodeData

__all__ = [
    "DEFAULT_NODE_HEIGHT",
    "DEFAULT_NODE_WIDTH",
    "Edge",
    "Graph",
    "NodeData",
]
