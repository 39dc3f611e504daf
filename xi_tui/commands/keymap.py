"""Keymap bindings and their translation to commands.

Bindings use the Sublime Text keymap record shape::

    {"keys": ["ctrl+f"], "command": "show_panel", "args": {"panel": "find"}}
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from xi_tui.commands.errors import (
    ExpectedArgument,
    ParseCommandError,
    UnexpectedArgument,
    UnknownCommand,
)
from xi_tui.commands.moves import MAX_LINE_NUMBER
from xi_tui.commands.types import (
    AbsoluteMove,
    AbsoluteMovePoint,
    Back,
    Cancel,
    CloseCurrentView,
    Command,
    CommandPromptMode,
    CopySelection,
    CutSelection,
    Delete,
    ExpandLinesDirection,
    FindNext,
    FindPrev,
    FindUnderExpand,
    LineNumber,
    NextBuffer,
    OpenPrompt,
    Paste,
    PrevBuffer,
    Quit,
    Redo,
    RelativeMove,
    RelativeMoveDistance,
    Save,
    SelectAll,
    ToggleLineNumbers,
    Undo,
)

logger = logging.getLogger(__name__)


@dataclass
class KeymapEntry:
    """A single key binding record."""

    keys: List[str] = field(default_factory=list)
    command: str = ""
    args: Optional[Any] = None
    context: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeymapEntry":
        """Create from a keymap JSON object."""
        command = data.get("command")
        keys = data.get("keys", [])
        if not isinstance(command, str) or not isinstance(keys, list):
            raise UnexpectedArgument()
        return cls(
            keys=[str(key) for key in keys],
            command=command,
            args=data.get("args"),
            context=data.get("context"),
        )


# Commands that take no arguments. Synonyms map to the same constructor.
KEYMAP_COMMANDS: Mapping[str, Callable[[], Command]] = MappingProxyType({
    "select_all": SelectAll,
    "close": CloseCurrentView,
    "copy": CopySelection,
    "cut": CutSelection,
    "paste": Paste,
    "fue": FindUnderExpand,
    "find_under_expand": FindUnderExpand,
    "fn": FindNext,
    "find_next": FindNext,
    "fp": FindPrev,
    "find_prev": FindPrev,
    "hide_overlay": Cancel,
    "s": Save,
    "save": Save,
    "q": Quit,
    "quit": Quit,
    "exit": Quit,
    "b": Back,
    "back": Back,
    "left_delete": Back,
    "d": Delete,
    "delete": Delete,
    "right_delete": Delete,
    "bn": NextBuffer,
    "next-buffer": NextBuffer,
    "next_view": NextBuffer,
    "bp": PrevBuffer,
    "prev-buffer": PrevBuffer,
    "prev_view": PrevBuffer,
    "undo": Undo,
    "redo": Redo,
    "ln": ToggleLineNumbers,
    "line-numbers": ToggleLineNumbers,
    "op": OpenPrompt,
    "open-prompt": OpenPrompt,
})


def _require_bool(args: Mapping[str, Any], key: str, default: Optional[bool] = None) -> bool:
    value = args.get(key, default)
    if not isinstance(value, bool):
        raise UnexpectedArgument()
    return value


def _decode_relative_move(args: Any) -> RelativeMove:
    if not isinstance(args, Mapping):
        raise UnexpectedArgument()
    try:
        by = RelativeMoveDistance(args.get("by"))
    except ValueError:
        raise UnexpectedArgument() from None
    return RelativeMove(
        by=by,
        forward=_require_bool(args, "forward"),
        extend=_require_bool(args, "extend", default=False),
    )


def _decode_absolute_move(args: Any) -> AbsoluteMove:
    if not isinstance(args, Mapping):
        raise UnexpectedArgument()

    to = args.get("to")
    if isinstance(to, Mapping) and set(to) == {"line"}:
        line = to["line"]
        if isinstance(line, bool) or not isinstance(line, int):
            raise UnexpectedArgument()
        if not 0 <= line <= MAX_LINE_NUMBER:
            raise UnexpectedArgument()
        target = LineNumber(line)
    else:
        try:
            target = AbsoluteMovePoint(to)
        except ValueError:
            raise UnexpectedArgument() from None

    return AbsoluteMove(to=target, extend=_require_bool(args, "extend", default=False))


def _decode_expand_lines(args: Any) -> ExpandLinesDirection:
    if not isinstance(args, Mapping):
        raise UnexpectedArgument()
    return ExpandLinesDirection(forward=_require_bool(args, "forward"))


def _string_field(args: Any, key: str) -> Optional[str]:
    if not isinstance(args, Mapping):
        return None
    value = args.get(key)
    return value if isinstance(value, str) else None


def _decode_overlay(args: Any) -> OpenPrompt:
    # Only the goto overlay has a prompt equivalent
    if _string_field(args, "overlay") != "goto":
        raise UnexpectedArgument()
    return OpenPrompt(CommandPromptMode.COMMAND)


def _decode_panel(args: Any) -> OpenPrompt:
    if _string_field(args, "panel") != "find":
        raise UnexpectedArgument()
    return OpenPrompt(CommandPromptMode.FIND)


# Commands whose args must be present and decoded
KEYMAP_ARG_COMMANDS: Mapping[str, Callable[[Any], Command]] = MappingProxyType({
    "show_overlay": _decode_overlay,
    "show_panel": _decode_panel,
    "move": _decode_relative_move,
    "move_to": _decode_absolute_move,
    "select_lines": _decode_expand_lines,
})


def from_keymap_entry(entry: KeymapEntry) -> Command:
    """Translate a keymap binding into a command.

    Args:
        entry: Binding record

    Returns:
        The bound command

    Raises:
        UnknownCommand: The command name is not known
        ExpectedArgument: The command needs ``args`` and has none
        UnexpectedArgument: ``args`` does not fit the command
    """
    name = entry.command

    simple = KEYMAP_COMMANDS.get(name)
    if simple is not None:
        return simple()

    decoder = KEYMAP_ARG_COMMANDS.get(name)
    if decoder is None:
        raise UnknownCommand(name)
    if entry.args is None:
        raise ExpectedArgument(name)
    return decoder(entry.args)


class Keymap:
    """Key sequence to command lookup built from binding records.

    Bindings that fail to translate are skipped and kept in ``errors``.
    Later bindings for the same keys win.
    """

    def __init__(self) -> None:
        self._bindings: Dict[Tuple[str, ...], Command] = {}
        self.errors: List[Tuple[KeymapEntry, ParseCommandError]] = []

    @classmethod
    def from_entries(cls, entries: Sequence[KeymapEntry]) -> "Keymap":
        """Build a keymap from binding records."""
        keymap = cls()
        for entry in entries:
            keymap.bind(entry)
        return keymap

    def bind(self, entry: KeymapEntry) -> Optional[Command]:
        """Add one binding.

        Returns:
            The bound command, or None if the binding was skipped
        """
        try:
            command = from_keymap_entry(entry)
        except ParseCommandError as e:
            logger.warning("Skipping binding %s -> %s: %s", entry.keys, entry.command, e)
            self.errors.append((entry, e))
            return None

        self._bindings[tuple(entry.keys)] = command
        return command

    def lookup(self, keys: Sequence[str]) -> Optional[Command]:
        """Get the command bound to a key sequence."""
        return self._bindings.get(tuple(keys))

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, keys: object) -> bool:
        return isinstance(keys, (list, tuple)) and tuple(keys) in self._bindings
