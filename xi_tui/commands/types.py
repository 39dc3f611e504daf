"""Command types for xi-tui.

A command is one discrete action the user wants the editor to perform.
Every variant is a frozen dataclass; ``Command`` is the closed union of all
of them. Payload structs (``RelativeMove``, ``AbsoluteMove``, ``FindConfig``,
``ExpandLinesDirection``) are variants in their own right.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union, get_args


class CommandPromptMode(Enum):
    """Sub-mode of the interactive prompt."""

    COMMAND = "command"
    FIND = "find"

    @property
    def prefix(self) -> str:
        """Character shown in front of the prompt."""
        return "/" if self is CommandPromptMode.FIND else ":"


class RelativeMoveDistance(Enum):
    """Granularity of a relative cursor movement."""

    CHARACTERS = "characters"
    LINES = "lines"
    WORDS = "words"
    WORD_ENDS = "word_ends"
    SUBWORDS = "subwords"
    SUBWORD_ENDS = "subword_ends"
    PAGES = "pages"


class AbsoluteMovePoint(Enum):
    """Fixed targets of an absolute cursor movement."""

    BOF = "bof"
    EOF = "eof"
    BOL = "bol"
    EOL = "eol"
    BRACKETS = "brackets"


@dataclass(frozen=True)
class LineNumber:
    """Absolute move target: a line number."""

    line: int


@dataclass(frozen=True)
class RelativeMove:
    """Move the cursor by a distance, optionally extending the selection."""

    by: RelativeMoveDistance
    forward: bool
    extend: bool = False


@dataclass(frozen=True)
class AbsoluteMove:
    """Move the cursor to a fixed point or line."""

    to: Union[AbsoluteMovePoint, LineNumber]
    extend: bool = False


@dataclass(frozen=True)
class FindConfig:
    """Search for a term with independently toggled matching modes."""

    search_term: str
    case_sensitive: bool = False
    regex: bool = False
    whole_words: bool = False


@dataclass(frozen=True)
class ExpandLinesDirection:
    """Add a cursor on the line below (forward) or above."""

    forward: bool


@dataclass(frozen=True)
class Cancel:
    """Close the prompt."""


@dataclass(frozen=True)
class Quit:
    """Quit the editor."""


@dataclass(frozen=True)
class Save:
    """Save a view's buffer; the current view when no id is given."""

    view_id: Optional[str] = None


@dataclass(frozen=True)
class Back:
    """Backspace."""


@dataclass(frozen=True)
class Delete:
    """Delete forward."""


@dataclass(frozen=True)
class Open:
    """Open a file, or an empty buffer when no path is given."""

    path: Optional[str] = None


@dataclass(frozen=True)
class NextBuffer:
    """Cycle to the next view."""


@dataclass(frozen=True)
class PrevBuffer:
    """Cycle to the previous view."""


@dataclass(frozen=True)
class SetTheme:
    """Change the color theme."""

    name: str


@dataclass(frozen=True)
class ToggleLineNumbers:
    """Toggle the line number gutter."""


@dataclass(frozen=True)
class OpenPrompt:
    """Open the prompt in the given mode."""

    mode: CommandPromptMode = CommandPromptMode.COMMAND


@dataclass(frozen=True)
class Insert:
    """Insert a single character."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Insert takes exactly one character, got {self.char!r}")


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class FindNext:
    """Jump to the next match of the active search."""


@dataclass(frozen=True)
class FindPrev:
    """Jump to the previous match of the active search."""


@dataclass(frozen=True)
class FindUnderExpand:
    """Find the word under the cursor and add a cursor there."""


@dataclass(frozen=True)
class CopySelection:
    pass


@dataclass(frozen=True)
class CutSelection:
    pass


@dataclass(frozen=True)
class Paste:
    pass


@dataclass(frozen=True)
class CloseCurrentView:
    pass


@dataclass(frozen=True)
class SelectAll:
    pass


Command = Union[
    Cancel,
    Quit,
    Save,
    Back,
    Delete,
    Open,
    NextBuffer,
    PrevBuffer,
    RelativeMove,
    AbsoluteMove,
    SetTheme,
    ToggleLineNumbers,
    OpenPrompt,
    Insert,
    Undo,
    Redo,
    FindConfig,
    FindNext,
    FindPrev,
    FindUnderExpand,
    ExpandLinesDirection,
    CopySelection,
    Paste,
    CutSelection,
    CloseCurrentView,
    SelectAll,
]

# All variants, in declaration order
COMMAND_TYPES = get_args(Command)
