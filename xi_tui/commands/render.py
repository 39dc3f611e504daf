"""Short status-line labels for commands."""

from typing import Dict, Type

from xi_tui.commands.moves import absolute_move_label, relative_move_label
from xi_tui.commands.types import (
    AbsoluteMove,
    Back,
    Cancel,
    CloseCurrentView,
    Command,
    CopySelection,
    CutSelection,
    Delete,
    ExpandLinesDirection,
    FindConfig,
    FindNext,
    FindPrev,
    FindUnderExpand,
    Insert,
    NextBuffer,
    Open,
    OpenPrompt,
    Paste,
    PrevBuffer,
    Quit,
    Redo,
    RelativeMove,
    Save,
    SelectAll,
    SetTheme,
    ToggleLineNumbers,
    Undo,
)

# Payloads are not shown
COMMAND_LABELS: Dict[Type, str] = {
    Cancel: "cancel",
    Quit: "quit",
    Save: "save",
    Back: "back",
    Delete: "delete",
    Open: "open",
    NextBuffer: "buffernext",
    PrevBuffer: "bufferprev",
    SetTheme: "settheme",
    ToggleLineNumbers: "togglelinenumbers",
    OpenPrompt: "open-prompt",
    Insert: "insert",
    Undo: "undo",
    Redo: "redo",
    FindConfig: "find",
    FindNext: "findnext",
    FindPrev: "findprev",
    FindUnderExpand: "find_under_expand",
    ExpandLinesDirection: "cursor_expand_lines",
    CopySelection: "copy",
    Paste: "paste",
    CutSelection: "cut",
    CloseCurrentView: "close",
    SelectAll: "select_all",
}


def to_prompt(command: Command) -> str:
    """Render a command as a short label for the status line.

    Args:
        command: Any command

    Returns:
        Lowercase label, e.g. "quit" or "move page-up (e)xtend"
    """
    if isinstance(command, RelativeMove):
        return relative_move_label(command)
    if isinstance(command, AbsoluteMove):
        return absolute_move_label(command)
    return COMMAND_LABELS[type(command)]
