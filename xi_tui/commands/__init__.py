"""Command parsing and rendering for xi-tui."""

from xi_tui.commands.errors import (
    ExpectedArgument,
    ParseCommandError,
    TooManyArguments,
    UnexpectedArgument,
    UnknownCommand,
)
from xi_tui.commands.find import parse_find
from xi_tui.commands.keymap import Keymap, KeymapEntry, from_keymap_entry
from xi_tui.commands.moves import parse_absolute_move, parse_relative_move
from xi_tui.commands.parser import get_command_names, parse_command, parse_prompt
from xi_tui.commands.render import to_prompt
from xi_tui.commands.types import COMMAND_TYPES, Command, CommandPromptMode

__all__ = [
    "COMMAND_TYPES",
    "Command",
    "CommandPromptMode",
    "ParseCommandError",
    "UnexpectedArgument",
    "ExpectedArgument",
    "TooManyArguments",
    "UnknownCommand",
    "Keymap",
    "KeymapEntry",
    "from_keymap_entry",
    "parse_command",
    "parse_prompt",
    "parse_find",
    "parse_relative_move",
    "parse_absolute_move",
    "get_command_names",
    "to_prompt",
]
