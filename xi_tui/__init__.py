"""xi-tui: terminal front-end command layer for the xi editor."""

__version__ = "0.1.0"
