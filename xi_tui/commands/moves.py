"""Parsing and labels for the move and move_to prompt commands."""

import re
from typing import Dict, List, Tuple

from xi_tui.commands.errors import ExpectedArgument, TooManyArguments, UnknownCommand
from xi_tui.commands.types import (
    AbsoluteMove,
    AbsoluteMovePoint,
    LineNumber,
    RelativeMove,
    RelativeMoveDistance,
)

# Prompt token -> (distance, forward)
RELATIVE_MOVES: Dict[str, Tuple[RelativeMoveDistance, bool]] = {
    "d": (RelativeMoveDistance.LINES, True),
    "down": (RelativeMoveDistance.LINES, True),
    "u": (RelativeMoveDistance.LINES, False),
    "up": (RelativeMoveDistance.LINES, False),
    "r": (RelativeMoveDistance.CHARACTERS, True),
    "right": (RelativeMoveDistance.CHARACTERS, True),
    "l": (RelativeMoveDistance.CHARACTERS, False),
    "left": (RelativeMoveDistance.CHARACTERS, False),
    "pd": (RelativeMoveDistance.PAGES, True),
    "page-down": (RelativeMoveDistance.PAGES, True),
    "pu": (RelativeMoveDistance.PAGES, False),
    "page-up": (RelativeMoveDistance.PAGES, False),
}

ABSOLUTE_MOVES: Dict[str, AbsoluteMovePoint] = {
    "bof": AbsoluteMovePoint.BOF,
    "beginning-of-file": AbsoluteMovePoint.BOF,
    "eof": AbsoluteMovePoint.EOF,
    "end-of-file": AbsoluteMovePoint.EOF,
    "bol": AbsoluteMovePoint.BOL,
    "beginning-of-line": AbsoluteMovePoint.BOL,
    "eol": AbsoluteMovePoint.EOL,
    "end-of-line": AbsoluteMovePoint.EOL,
}

# distance -> (forward label, backward label)
RELATIVE_LABELS: Dict[RelativeMoveDistance, Tuple[str, str]] = {
    RelativeMoveDistance.CHARACTERS: ("left", "right"),
    RelativeMoveDistance.LINES: ("down", "up"),
    RelativeMoveDistance.WORDS: ("wordleft", "wordright"),
    RelativeMoveDistance.WORD_ENDS: ("wendleft", "wendright"),
    RelativeMoveDistance.SUBWORDS: ("subwordleft", "subwordright"),
    RelativeMoveDistance.SUBWORD_ENDS: ("subwendleft", "subwendright"),
    RelativeMoveDistance.PAGES: ("page-down", "page-up"),
}

LINE_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")
MAX_LINE_NUMBER = 2**64 - 1

EXTEND_SUFFIX = " (e)xtend"
LINE_LABEL = "<line>"


def _split_move_args(args: str, cmd: str) -> Tuple[str, bool]:
    """Split move arguments into the target token and the extend flag.

    Any second token turns on extend, whatever it says.
    """
    if not args:
        raise ExpectedArgument(cmd)

    tokens: List[str] = args.split(" ")
    if len(tokens) > 2:
        raise TooManyArguments(cmd, expected=2, found=len(tokens))

    return tokens[0], len(tokens) == 2


def parse_relative_move(args: str) -> RelativeMove:
    """Parse the arguments of a ``move`` prompt command.

    Args:
        args: Everything after ``move``, e.g. ``"d"`` or ``"pu e"``

    Returns:
        RelativeMove command
    """
    token, extend = _split_move_args(args, "move")

    try:
        by, forward = RELATIVE_MOVES[token]
    except KeyError:
        raise UnknownCommand(token) from None

    return RelativeMove(by=by, forward=forward, extend=extend)


def parse_absolute_move(args: str) -> AbsoluteMove:
    """Parse the arguments of a ``move_to`` prompt command.

    Accepts a named point (``bof``, ``eol``, ...) or a line number. A line
    number never extends the selection.

    Args:
        args: Everything after ``move_to``, e.g. ``"eof"`` or ``"42"``

    Returns:
        AbsoluteMove command
    """
    token, extend = _split_move_args(args, "move_to")

    point = ABSOLUTE_MOVES.get(token)
    if point is not None:
        return AbsoluteMove(to=point, extend=extend)

    if not LINE_NUMBER_PATTERN.fullmatch(token) or int(token) > MAX_LINE_NUMBER:
        raise UnknownCommand(token)

    return AbsoluteMove(to=LineNumber(int(token)), extend=False)


def relative_move_label(move: RelativeMove) -> str:
    """Short status-line label for a relative move."""
    forward_label, backward_label = RELATIVE_LABELS[move.by]
    label = "move " + (forward_label if move.forward else backward_label)
    if move.extend:
        label += EXTEND_SUFFIX
    return label


def absolute_move_label(move: AbsoluteMove) -> str:
    """Short status-line label for an absolute move.

    Line targets show a placeholder rather than the number.
    """
    if isinstance(move.to, LineNumber):
        label = "move " + LINE_LABEL
    else:
        label = "move " + move.to.value
    if move.extend:
        label += EXTEND_SUFFIX
    return label
