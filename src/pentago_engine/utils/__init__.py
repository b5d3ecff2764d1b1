"""Utility modules for the board engine."""

from .rich_display import BoardDisplay, render_board, setup_rich_logging

__all__ = [
    "BoardDisplay",
    "render_board",
    "setup_rich_logging",
]
