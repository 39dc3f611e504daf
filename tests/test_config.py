"""Tests for configuration loading."""

import json
import logging

from xi_tui.commands.keymap import Keymap
from xi_tui.commands.types import OpenPrompt, CommandPromptMode, Undo
from xi_tui.config import DEFAULT_THEME, Config, configure_logging, log_level_number


class TestConfig:
    """Test Config load and save."""

    def test_missing_file(self, tmp_path):
        """A missing file gives defaults."""
        config = Config.load(tmp_path / "config.json")
        assert config.theme == DEFAULT_THEME
        assert config.line_numbers is True
        assert config.keymap == []
        assert config.log_file is None

    def test_corrupt_file(self, tmp_path):
        """Invalid JSON gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert Config.load(path) == Config()

    def test_non_object_file(self, tmp_path):
        """A JSON document that is not an object gives defaults."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        assert Config.load(path) == Config()

    def test_wrong_field_types(self, tmp_path, caplog):
        """Fields of the wrong type fall back to their defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "theme": 3,
            "line_numbers": "yes",
            "keymap": 5,
            "log_file": ["x"],
            "log_level": None,
        }))
        with caplog.at_level(logging.WARNING, logger="xi_tui.config"):
            config = Config.load(path)

        assert config == Config()
        assert config.keymap_entries() == []
        assert "keymap=5" in caplog.text
        assert "line_numbers='yes'" in caplog.text

    def test_good_fields_kept_next_to_bad_ones(self, tmp_path):
        """Only the mistyped field is replaced."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"theme": "InspiredGitHub", "keymap": {"q": "quit"}}))
        config = Config.load(path)
        assert config.theme == "InspiredGitHub"
        assert config.keymap == []

    def test_save_load_roundtrip(self, tmp_path):
        """save -> load should preserve all fields."""
        path = tmp_path / "nested" / "config.json"
        config = Config(
            theme="Solarized (light)",
            line_numbers=False,
            keymap=[{"keys": ["ctrl+z"], "command": "undo"}],
            log_file="/tmp/xi-tui.log",
            log_level="DEBUG",
        )
        config.save(path)
        assert json.loads(path.read_text())["theme"] == "Solarized (light)"
        assert Config.load(path) == config

    def test_keymap_entries(self, caplog):
        """Malformed keymap records are skipped."""
        config = Config(keymap=[
            {"keys": ["ctrl+z"], "command": "undo"},
            {"keys": ["ctrl+f"], "command": "show_panel", "args": {"panel": "find"}},
            {"keys": ["ctrl+x"]},
            "ctrl+y",
        ])
        with caplog.at_level(logging.WARNING, logger="xi_tui.config"):
            entries = config.keymap_entries()

        assert [e.command for e in entries] == ["undo", "show_panel"]
        assert "ctrl+y" in caplog.text

        keymap = Keymap.from_entries(entries)
        assert keymap.lookup(["ctrl+z"]) == Undo()
        assert keymap.lookup(["ctrl+f"]) == OpenPrompt(CommandPromptMode.FIND)


class TestConfigureLogging:
    """Test log file setup."""

    def test_no_log_file(self):
        """Without a log file no handler is added."""
        logger = logging.getLogger("xi_tui")
        before = list(logger.handlers)
        configure_logging(Config())
        assert logger.handlers == before

    def test_log_file(self, tmp_path):
        """Records from xi_tui modules go to the log file."""
        path = tmp_path / "xi.log"
        logger = logging.getLogger("xi_tui")
        before = list(logger.handlers)
        level = logger.level
        try:
            configure_logging(Config(log_file=str(path), log_level="debug"))
            assert logger.level == logging.DEBUG
            logging.getLogger("xi_tui.commands.keymap").warning("binding skipped")
            for handler in logger.handlers:
                handler.flush()
            assert "binding skipped" in path.read_text()
        finally:
            for handler in logger.handlers[len(before):]:
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(level)

    def test_unknown_log_level(self, tmp_path, caplog):
        """An unknown level name falls back to INFO instead of failing."""
        path = tmp_path / "xi.log"
        logger = logging.getLogger("xi_tui")
        before = list(logger.handlers)
        level = logger.level
        try:
            with caplog.at_level(logging.WARNING, logger="xi_tui.config"):
                configure_logging(Config(log_file=str(path), log_level="loud"))
            assert logger.level == logging.INFO
            assert "Unknown log level 'loud'" in caplog.text
        finally:
            for handler in logger.handlers[len(before):]:
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(level)

    def test_log_level_number(self):
        """Level names resolve case-insensitively."""
        assert log_level_number("debug") == logging.DEBUG
        assert log_level_number("WARNING") == logging.WARNING
        assert log_level_number("loud") == logging.INFO
