"""Layout engine convenience functions."""

from __future__ import annotations

from layered_layout.config import LayoutConfig
from layered_layout.ir.graph import Graph
from layered_layout.layout.sugiyama import SugiyamaLayout
from layered_layout.layout.types import LayoutResult
from layered_layout.types import LayoutDirection


def layout(
    graph: Graph,
    direction: LayoutDirection = LayoutDirection.TopToBottom,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Run the default (Sugiyama) layout pipeline.

    Args:
        graph: A validated graph; construction already rejected duplicate ids
            and dangling edge references.
        direction: Which way edges flow.
        config: Gaps, sweep bound and ordering heuristic; defaults when None.

    Returns:
        Top-left position per node plus the original edge list.

    Raises:
        ValueError: If ``config`` holds invalid values.
    """
    return SugiyamaLayout(config).layout(graph, direction)
