"""Main Textual application for xi-tui."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.message import Message
from textual.widgets import Static

from xi_tui.commands import (
    Command,
    CommandPromptMode,
    Keymap,
    get_command_names,
)
from xi_tui.commands.types import Cancel, OpenPrompt, Quit, SetTheme, ToggleLineNumbers
from xi_tui.config import Config, get_config
from xi_tui.widgets import CommandInput, StatusBar

logger = logging.getLogger(__name__)


class XiApp(App):
    """Terminal front-end shell: prompt, keymap and status line.

    Commands the shell does not handle itself are posted as
    ``CommandDispatched`` messages for the editor view and backend.
    """

    TITLE = "xi-tui"

    class CommandDispatched(Message):
        """Message sent for every command the shell passes on."""

        def __init__(self, command: Command) -> None:
            self.command = command
            super().__init__()

    def __init__(self, config: Optional[Config] = None) -> None:
        super().__init__()
        self._config = config or get_config()
        self._keymap = Keymap.from_entries(self._config.keymap_entries())
        self._in_command_mode = False

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Static(id="editor-view")
        yield CommandInput(commands=get_command_names(), id="command-input")
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Initialize the app after mounting."""
        self.query_one("#command-input").display = False
        self.query_one("#status-bar", StatusBar).set_view_settings(
            self._config.theme, self._config.line_numbers
        )
        if self._keymap.errors:
            logger.warning("%d keymap bindings skipped", len(self._keymap.errors))

    def on_key(self, event) -> None:
        """Handle key events centrally."""
        if self._in_command_mode:
            return

        command = self._keymap.lookup([event.key])
        if command is None:
            if event.character == ":":
                command = OpenPrompt(CommandPromptMode.COMMAND)
            elif event.character == "/":
                command = OpenPrompt(CommandPromptMode.FIND)
            else:
                return

        event.stop()
        self.handle_command(command)

    def handle_command(self, command: Command) -> None:
        """Handle prompt, quit and view setting commands; post the rest."""
        if isinstance(command, Quit):
            self.exit()
            return
        if isinstance(command, OpenPrompt):
            self._enter_command_mode(command.mode)
            return
        if isinstance(command, Cancel):
            self._close_command_mode()
            return

        status_bar = self.query_one("#status-bar", StatusBar)
        if isinstance(command, SetTheme):
            self._config.theme = command.name
        elif isinstance(command, ToggleLineNumbers):
            self._config.line_numbers = not self._config.line_numbers
        status_bar.set_view_settings(self._config.theme, self._config.line_numbers)
        status_bar.show_command(command)

        logger.debug("Dispatching %r", command)
        self.post_message(self.CommandDispatched(command))

    # ==================== Command Mode ====================

    def _enter_command_mode(self, mode: CommandPromptMode) -> None:
        """Show the prompt in the given mode."""
        self._in_command_mode = True
        self.query_one("#status-bar", StatusBar).set_mode(mode.value)
        cmd_input = self.query_one("#command-input", CommandInput)
        cmd_input.display = True
        cmd_input.reset(mode)
        cmd_input.focus()

    def _close_command_mode(self) -> None:
        """Hide the prompt."""
        self._in_command_mode = False
        self.query_one("#command-input", CommandInput).display = False
        self.query_one("#status-bar", StatusBar).set_mode("normal")
        self.set_focus(None)

    # ==================== Event Handlers ====================

    def on_command_input_command_parsed(self, event: CommandInput.CommandParsed) -> None:
        """Run a parsed prompt command."""
        self._close_command_mode()
        self.handle_command(event.command)

    def on_command_input_command_failed(self, event: CommandInput.CommandFailed) -> None:
        """Show why a prompt line was rejected."""
        self._close_command_mode()
        self.query_one("#status-bar", StatusBar).show_error(event.error)

    def on_command_input_command_cancelled(
        self, event: CommandInput.CommandCancelled
    ) -> None:
        """Handle cancelled command."""
        self._close_command_mode()
