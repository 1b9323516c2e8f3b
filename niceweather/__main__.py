"""Entry point for running NiceWeather as a module."""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .models.config import Config, MissingApiKeyError

_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", log_dir: Path = Path("logs")) -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the rotating log file
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "niceweather.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="NiceWeather - current weather, forecast and air quality in the terminal"
    )
    parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="Location to search on startup (default: settings.default_location)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.version:
        from . import __version__

        print(f"NiceWeather v{__version__}")
        sys.exit(0)

    config = Config.load_or_default(args.config)
    setup_logging("DEBUG" if args.verbose else config.settings.log_level)

    try:
        api_key = config.resolve_api_key()
    except MissingApiKeyError as e:
        print(e, file=sys.stderr)
        sys.exit(2)

    from .app import WeatherApp

    _logger.info("Starting NiceWeather")
    WeatherApp(config=config, api_key=api_key, location=args.location).run()
    _logger.info("NiceWeather shutdown complete")


if __name__ == "__main__":
    main()
