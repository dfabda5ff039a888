"""Input parsers: raw text to a validated Graph."""

from __future__ import annotations

from layered_layout.ir.graph import Graph
from layered_layout.parsers.base import Parser
from layered_layout.parsers.json_graph import JsonGraphParser, graph_from_data

_PARSERS: dict[str, type[Parser]] = {
    "json": JsonGraphParser,
}


def parse(src: str, fmt: str = "json") -> Graph:
    """Parse ``src`` with the parser registered for ``fmt``."""
    parser_cls = _PARSERS.get(fmt)
    if parser_cls is None:
        raise ValueError(f"Unsupported input format: {fmt}")
    return parser_cls().parse(src)


__all__ = ["JsonGraphParser", "Parser", "graph_from_data", "parse"]
