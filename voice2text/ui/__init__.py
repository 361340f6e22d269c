"""Terminal user interface."""

from .screens import render_screen, render_alert
from .terminal_app import TerminalApp

__all__ = [
    "render_screen",
    "render_alert",
    "TerminalApp",
]
