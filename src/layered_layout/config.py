"""Centralized configuration for layered-layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

HEURISTICS = ("median", "barycenter")


@dataclass
class LayoutConfig:
    """Configuration for the layout pipeline.

    Node sizes are not configured here: every node carries its own width and
    height (see ``Graph.add_node``).
    """

    node_gap: float = 50
    edge_gap: float = 10
    rank_gap: float = 50
    max_iterations: int = 8
    heuristic: str = "median"
    center_layers: bool = True

    def validate(self) -> None:
        for name in ("node_gap", "edge_gap", "rank_gap"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must not be negative")
        if self.max_iterations < 0:
            raise ValueError("max_iterations must not be negative")
        if self.heuristic not in HEURISTICS:
            raise ValueError(f"Unknown heuristic '{self.heuristic}'; use median or barycenter")
