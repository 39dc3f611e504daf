"""Textual widgets for xi-tui."""

from xi_tui.widgets.command_input import CommandInput
from xi_tui.widgets.status_bar import StatusBar

__all__ = [
    "CommandInput",
    "StatusBar",
]
