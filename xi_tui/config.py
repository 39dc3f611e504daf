"""Configuration management for xi-tui."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from xi_tui.commands.errors import ParseCommandError
from xi_tui.commands.keymap import KeymapEntry

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "xi-tui"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_THEME = "base16-eighties.dark"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _read_field(data: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """Get a config value, falling back to the default on a wrong type."""
    value = data.get(key, default)
    if value is None and default is None:
        return None
    if not isinstance(value, expected):
        logger.warning("Ignoring config %s=%r: expected %s", key, value, expected.__name__)
        return default
    return value


@dataclass
class Config:
    """Application configuration."""

    theme: str = DEFAULT_THEME
    line_numbers: bool = True
    keymap: List[Dict[str, Any]] = field(default_factory=list)
    log_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load config from file, or return defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: not a JSON object", path)
            return cls()

        return cls(
            theme=_read_field(data, "theme", str, DEFAULT_THEME),
            line_numbers=_read_field(data, "line_numbers", bool, True),
            keymap=_read_field(data, "keymap", list, []),
            log_file=_read_field(data, "log_file", str, None),
            log_level=_read_field(data, "log_level", str, DEFAULT_LOG_LEVEL),
        )

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "theme": self.theme,
            "line_numbers": self.line_numbers,
            "keymap": self.keymap,
            "log_file": self.log_file,
            "log_level": self.log_level,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def keymap_entries(self) -> List[KeymapEntry]:
        """Decode the keymap records, skipping malformed ones."""
        entries: List[KeymapEntry] = []
        for record in self.keymap:
            if not isinstance(record, dict):
                logger.warning("Skipping keymap record %r: not an object", record)
                continue
            try:
                entries.append(KeymapEntry.from_dict(record))
            except ParseCommandError as e:
                logger.warning("Skipping keymap record %r: %s", record, e)
        return entries


def get_config() -> Config:
    """Get the application config."""
    return Config.load()


def log_level_number(name: str) -> int:
    """Resolve a level name like "debug", or the default level if unknown."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using %s", name, DEFAULT_LOG_LEVEL)
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging(config: Config) -> None:
    """Send log records to the configured file.

    Nothing is attached when no log file is set, so the terminal stays clean.
    """
    if not config.log_file:
        return

    handler = logging.FileHandler(Path(config.log_file).expanduser(), encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("xi_tui")
    root.addHandler(handler)
    root.setLevel(log_level_number(config.log_level))
