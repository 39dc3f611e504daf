"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

from xi_tui.commands import Command, ParseCommandError, to_prompt


class StatusBar(Static):
    """Status line showing the mode, view settings and last command or error."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._mode = "normal"
        self._theme = ""
        self._line_numbers = True
        self._label: Optional[str] = None
        self._error: Optional[str] = None

    def on_mount(self) -> None:
        self.refresh_status()

    def set_mode(self, mode: str) -> None:
        """Set the current mode: normal, command, find."""
        self._mode = mode
        self.refresh_status()

    def set_view_settings(self, theme: str, line_numbers: bool) -> None:
        """Set the theme name and line number state shown on the right."""
        self._theme = theme
        self._line_numbers = line_numbers
        self.refresh_status()

    def show_command(self, command: Command) -> None:
        """Show the label of the last command."""
        self._label = to_prompt(command)
        self._error = None
        self.refresh_status()

    def show_error(self, error: ParseCommandError) -> None:
        """Show a parse failure."""
        self._error = str(error)
        self._label = None
        self.refresh_status()

    def clear_message(self) -> None:
        """Clear the command label or error."""
        self._label = None
        self._error = None
        self.refresh_status()

    def render_status(self) -> Text:
        """Build the status line text."""
        text = Text()
        text.append(self._mode.upper(), style="bold")

        if self._theme:
            text.append(" | ")
            text.append(f"[{self._theme}]", style="cyan")
            text.append(" ln:on" if self._line_numbers else " ln:off", style="dim")

        if self._error:
            text.append("  ")
            text.append(self._error, style="bold red")
        elif self._label:
            text.append("  ")
            text.append(self._label, style="yellow")
        else:
            hints = self._get_hints()
            if hints:
                text.append("  ")
                for i, (key, desc) in enumerate(hints):
                    if i > 0:
                        text.append(" ", style="dim")
                    text.append(key, style="bold yellow")
                    text.append(f" {desc}", style="dim")

        return text

    def refresh_status(self) -> None:
        """Update the status bar display."""
        # State set before mounting is shown on the first refresh after it
        if self.is_mounted:
            self.update(self.render_status())

    def _get_hints(self) -> list[tuple[str, str]]:
        """Get keybinding hints for the current mode."""
        if self._mode == "normal":
            return [
                (":", "command"),
                ("/", "find"),
            ]
        elif self._mode in ("command", "find"):
            return [
                ("Enter", "run"),
                ("Tab", "complete"),
                ("Esc", "cancel"),
            ]
        else:
            return []
