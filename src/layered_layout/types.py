"""Shared type definitions for layered-layout.

Enums and small types used across the graph model, layout and CLI.
"""

from __future__ import annotations

from enum import Enum


class LayoutDirection(Enum):
    TopToBottom = "TB"
    BottomToTop = "BT"
    LeftToRight = "LR"
    RightToLeft = "RL"

    @classmethod
    def default(cls) -> LayoutDirection:
        return cls.TopToBottom

    @classmethod
    def from_string(cls, value: str) -> LayoutDirection:
        """Parse a short direction code (TB, TD, BT, LR, RL), case-insensitive."""
        key = value.strip().upper()
        if key == "TD":
            key = "TB"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown direction '{value}'; use TB, TD, BT, LR, or RL")

    @property
    def is_horizontal(self) -> bool:
        return self in (LayoutDirection.LeftToRight, LayoutDirection.RightToLeft)

    @property
    def is_mirrored(self) -> bool:
        return self in (LayoutDirection.BottomToTop, LayoutDirection.RightToLeft)
