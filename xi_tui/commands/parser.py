"""Command parser for vim-style prompt commands."""

import os
import re
from typing import List

from xi_tui.commands.errors import ExpectedArgument, UnknownCommand
from xi_tui.commands.find import parse_find
from xi_tui.commands.keymap import KEYMAP_COMMANDS, KeymapEntry, from_keymap_entry
from xi_tui.commands.moves import parse_absolute_move, parse_relative_move
from xi_tui.commands.types import Command, CommandPromptMode, Open, SetTheme

# $NAME or ${NAME}
ENV_VAR_PATTERN = re.compile(r"\$(?:\{(?P<braced>[^}]*)\}|(?P<name>[A-Za-z_][A-Za-z0-9_]*))")


def expand_path(path: str) -> str:
    """Expand a leading ``~`` and environment variables in a path.

    Only the current user's home is expanded; ``~name`` is left as is.

    Raises:
        UnknownCommand: A referenced variable is not set
    """
    def replace(match: "re.Match[str]") -> str:
        name = match.group("braced")
        if name is None:
            name = match.group("name")
        value = os.environ.get(name)
        if not name or value is None:
            raise UnknownCommand(path)
        return value

    expanded = ENV_VAR_PATTERN.sub(replace, path)
    if expanded == "~" or expanded.startswith("~/"):
        expanded = os.path.expanduser("~") + expanded[1:]
    return expanded


def parse_command(command_str: str) -> Command:
    """Parse a prompt line into a command.

    Supports:
    - Moves: move d, move pu e, move_to eof, move_to 42
    - Themes: theme base16-eighties.dark
    - Files: open ~/notes.txt (the path is not split on spaces)
    - Search: find cr needle
    - Any keymap command name without arguments: quit, undo, bn

    Arguments given to plain keymap commands are dropped.

    Args:
        command_str: Raw prompt line (without leading :)

    Returns:
        The parsed command

    Raises:
        ParseCommandError: The line is not a valid command
    """
    parts = command_str.split(" ", 1)
    name = parts[0]
    args = parts[1] if len(parts) == 2 else None

    if name == "move":
        if args is None:
            raise ExpectedArgument("move")
        return parse_relative_move(args)

    if name == "move_to":
        # Reported as "move", like the move command above
        if args is None:
            raise ExpectedArgument("move")
        return parse_absolute_move(args)

    if name in ("t", "theme"):
        if args is None:
            raise ExpectedArgument("theme")
        return SetTheme(args)

    if name in ("o", "open"):
        if args is None:
            return Open(None)
        return Open(expand_path(args))

    if name in ("f", "find"):
        if args is None:
            raise ExpectedArgument("find")
        return parse_find(args)

    return from_keymap_entry(KeymapEntry(keys=[], command=name))


def parse_prompt(line: str, mode: CommandPromptMode) -> Command:
    """Parse a line entered in the given prompt mode.

    In find mode the whole line is the find argument.
    """
    if mode is CommandPromptMode.FIND:
        return parse_find(line)
    return parse_command(line)


def get_command_names() -> List[str]:
    """Get list of available command names.

    Returns:
        List of command names for completion
    """
    names = ["move", "move_to", "theme", "open", "find"]
    names.extend(KEYMAP_COMMANDS)
    return names
