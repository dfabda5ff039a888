"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from layered_layout.ir.graph import Graph


class Parser(Protocol):
    """Protocol that all graph input parsers must implement."""

    def parse(self, src: str) -> Graph:
        """Parse source text into a validated Graph."""
        ...
