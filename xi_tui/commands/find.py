"""Parsing for the find prompt command."""

from typing import Dict

from xi_tui.commands.errors import ExpectedArgument
from xi_tui.commands.types import FindConfig

# Flag character -> FindConfig field
FIND_FLAGS: Dict[str, str] = {
    "c": "case_sensitive",
    "r": "regex",
    "w": "whole_words",
}

MAX_FLAG_CLUSTER = 3


def parse_find(args: str) -> FindConfig:
    """Parse the arguments of a ``find`` prompt command.

    A short leading word made only of ``c``, ``r`` and ``w`` is read as
    search flags and dropped from the term:

    - "cr needle text" -> "needle text", case sensitive, regex
    - "hello world"    -> "hello world", no flags (first word too long)
    - "xy z"           -> "xy z", no flags (not all flag characters)

    A real search word of up to three flag characters followed by more text
    is always taken as flags.

    Args:
        args: Everything after ``find``

    Returns:
        FindConfig command
    """
    if not args:
        raise ExpectedArgument("find")

    parts = args.split(" ", 1)
    if len(parts) == 2 and len(parts[0]) <= MAX_FLAG_CLUSTER:
        cluster, rest = parts
        if all(char in FIND_FLAGS for char in cluster):
            flags = {FIND_FLAGS[char]: True for char in cluster}
            return FindConfig(search_term=rest, **flags)

    return FindConfig(search_term=args)
