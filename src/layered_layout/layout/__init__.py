"""Layout engine public API."""

from __future__ import annotations

from layered_layout.layout.engine import layout
from layered_layout.layout.sugiyama import (
    AugmentedGraph,
    DummyEdge,
    SugiyamaLayout,
    assign_coordinates,
    assign_layers,
    break_cycles,
    count_crossings,
    find_back_edges,
    initial_ordering,
    insert_dummy_nodes,
    minimise_crossings,
)
from layered_layout.layout.types import DUMMY_PREFIX, LayoutNode, LayoutResult, Position

__all__ = [
    "DUMMY_PREFIX",
    "AugmentedGraph",
    "DummyEdge",
    "LayoutNode",
    "LayoutResult",
    "Position",
    "SugiyamaLayout",
    "assign_coordinates",
    "assign_layers",
    "break_cycles",
    "count_crossings",
    "find_back_edges",
    "initial_ordering",
    "insert_dummy_nodes",
    "layout",
    "minimise_crossings",
]
