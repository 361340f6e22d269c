"""Main application entry point for Voice2Text."""

import sys
import asyncio
import argparse
import logging
from pathlib import Path

from . import __version__
from .app import Voice2TextApp
from .config import Voice2TextConfig
from .ui.terminal_app import TerminalApp

logger = logging.getLogger(__name__)


def setup_logging(config, level: str = "INFO") -> None:
    """Set up logging configuration from YAML config."""
    # Get log file path from config
    log_file_path = config.get('logging.file_path', 'data/logs/voice2text.log')
    console_output = config.get('logging.console_output', True)

    # Create logs directory if it doesn't exist
    log_dir = Path(log_file_path).parent
    log_dir.mkdir(parents=True, exist_ok=True)

    # Set up handlers
    handlers = []

    # File handler - always write to file
    file_handler = logging.FileHandler(log_file_path)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    file_handler.setFormatter(file_formatter)
    handlers.append(file_handler)

    # Console handler - only if enabled in config
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)  # Only show warnings and above on console
        console_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        console_handler.setFormatter(console_formatter)
        handlers.append(console_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in handlers:
        root_logger.addHandler(handler)

    # Log startup
    logger.info("=" * 50)
    logger.info("Voice2Text application starting up")
    logger.info(f"Log file: {log_file_path}")
    logger.info(f"Log level set to: {level}")
    logger.info("=" * 50)


def main() -> None:
    """Main entry point for Voice2Text application."""
    parser = argparse.ArgumentParser(
        description="Voice2Text - transcribe audio and summarize the key points",
        epilog="Type `help` inside the app for the list of commands."
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: ./voice2text.yaml if present)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (overrides config)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Voice2Text v{__version__}"
    )

    args = parser.parse_args()

    app = None
    try:
        config = Voice2TextConfig(args.config)
        setup_logging(config, args.log_level or config.get('logging.level', 'INFO'))

        app = Voice2TextApp(config)
        asyncio.run(TerminalApp(app).run())
    except KeyboardInterrupt:
        print("\nGoodbye!")
    except Exception as e:
        print(f"Error: {e}")
        logging.error(f"Application error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        if app is not None:
            app.cleanup()


if __name__ == "__main__":
    main()
