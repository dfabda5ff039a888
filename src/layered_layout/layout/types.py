"""Layout types returned to callers."""

from __future__ import annotations

from dataclasses import dataclass, field

from layered_layout.ir.graph import Edge
from layered_layout.types import LayoutDirection


@dataclass(frozen=True)
class Position:
    """Top-left corner of a node's bounding box."""

    x: float
    y: float


@dataclass
class LayoutNode:
    """A positioned node in the layout."""

    id: str
    layer: int
    order: int
    x: float
    y: float
    width: float
    height: float
    label: str = ""


@dataclass
class LayoutResult:
    """Self-contained layout output for renderers."""

    positions: dict[str, Position] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    nodes: list[LayoutNode] = field(default_factory=list)
    direction: LayoutDirection = LayoutDirection.TopToBottom
    width: float = 0
    height: float = 0

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.value,
            "width": self.width,
            "height": self.height,
            "positions": {node_id: {"x": pos.x, "y": pos.y} for node_id, pos in self.positions.items()},
            "edges": [{"id": e.id, "source": e.source, "target": e.target} for e in self.edges],
        }


DUMMY_PREFIX = "__dummy_"
