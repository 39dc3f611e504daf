"""Vim-style command prompt widget."""

import logging
from typing import List, Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

from xi_tui.commands import Command, CommandPromptMode, ParseCommandError, parse_prompt

logger = logging.getLogger(__name__)

MAX_HISTORY = 100


class CommandInput(Widget):
    """Prompt that parses submitted lines into commands."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > .command-prefix {
        width: 1;
        height: 1;
        color: $text;
    }

    CommandInput > .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput > .command-text:focus {
        border: none;
    }
    """

    class CommandParsed(Message):
        """Message sent when a submitted line parses."""

        def __init__(self, command: Command, line: str) -> None:
            self.command = command
            self.line = line
            super().__init__()

    class CommandFailed(Message):
        """Message sent when a submitted line does not parse."""

        def __init__(self, error: ParseCommandError, line: str) -> None:
            self.error = error
            self.line = line
            super().__init__()

    class CommandCancelled(Message):
        """Message sent when command input is cancelled."""

        pass

    def __init__(
        self,
        commands: Optional[List[str]] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._history: List[str] = []
        self._history_index = -1
        self._mode = CommandPromptMode.COMMAND
        self._saved_input = ""

    def compose(self) -> ComposeResult:
        yield Static(self._mode.prefix, classes="command-prefix", id="cmd-prefix")
        yield Input(placeholder="", classes="command-text", id="cmd-input")

    @property
    def mode(self) -> CommandPromptMode:
        """Current prompt mode."""
        return self._mode

    @property
    def prefix_widget(self) -> Static:
        """Get the prefix widget."""
        return self.query_one("#cmd-prefix", Static)

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def reset(self, mode: CommandPromptMode = CommandPromptMode.COMMAND) -> None:
        """Clear the input and switch to the given mode."""
        self._mode = mode
        self.prefix_widget.update(mode.prefix)
        self.input_widget.value = ""
        self._history_index = -1
        self._saved_input = ""

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Parse the line on Enter."""
        event.stop()
        line = self.input_widget.value

        if line.strip():
            self._add_to_history(line.strip())

        try:
            command = parse_prompt(line, self._mode)
        except ParseCommandError as e:
            logger.debug("Prompt line %r failed: %s", line, e)
            self.post_message(self.CommandFailed(e, line))
            return

        self.post_message(self.CommandParsed(command, line))

    def on_key(self, event) -> None:
        """Handle special keys."""
        key = event.key

        if key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.CommandCancelled())
        elif key == "up":
            event.prevent_default()
            event.stop()
            self._history_previous()
        elif key == "down":
            event.prevent_default()
            event.stop()
            self._history_next()
        elif key == "tab":
            event.prevent_default()
            event.stop()
            if self._mode is not CommandPromptMode.COMMAND:
                return
            self.input_widget.value = complete_command(
                self.input_widget.value, self._commands
            )

    def _add_to_history(self, line: str) -> None:
        # Don't add duplicates of the last line
        if self._history and self._history[-1] == line:
            return
        self._history.append(line)
        if len(self._history) > MAX_HISTORY:
            self._history = self._history[-MAX_HISTORY:]

    def _history_previous(self) -> None:
        """Navigate to previous history entry."""
        if not self._history:
            return

        if self._history_index == -1:
            # Save current input before navigating
            self._saved_input = self.input_widget.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1

        self.input_widget.value = self._history[self._history_index]

    def _history_next(self) -> None:
        """Navigate to next history entry."""
        if self._history_index == -1:
            return

        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.input_widget.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.input_widget.value = self._saved_input


def complete_command(value: str, commands: List[str]) -> str:
    """Complete the command word of a prompt line.

    A unique match is completed with a trailing space; several matches are
    completed to their common prefix.

    Args:
        value: Current input
        commands: Known command names

    Returns:
        The completed input, or ``value`` unchanged
    """
    current = value.lstrip()
    if not current or not commands:
        return value

    parts = current.split(maxsplit=1)
    cmd_part = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    matches = [c for c in commands if c.startswith(cmd_part)]

    if len(matches) == 1:
        return matches[0] + " " + rest

    if len(matches) > 1:
        common = matches[0]
        for match in matches[1:]:
            while not match.startswith(common):
                common = common[:-1]
        if len(common) > len(cmd_part):
            return common + (" " + rest if rest else "")

    return value
