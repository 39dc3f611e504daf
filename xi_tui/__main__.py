"""Entry point for xi-tui."""

from xi_tui.app import XiApp
from xi_tui.config import configure_logging, get_config


def main() -> None:
    """Run the xi-tui application."""
    config = get_config()
    configure_logging(config)
    app = XiApp(config)
    app.run()


if __name__ == "__main__":
    main()
