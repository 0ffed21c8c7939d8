"""
Main entry point for termarcade.

Parses the command line, configures logging and runs the curses dashboard.
"""

import argparse
import curses
import logging
from pathlib import Path
from typing import List, Optional

from termarcade import __version__
from termarcade.config.settings import Settings, get_settings
from termarcade.terminal.app import TerminalApp

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging.

    curses owns the screen, so records only reach a file when one is given;
    the dashboard adds its own panel handler while it runs.
    """
    level = logging.DEBUG if debug else logging.INFO
    if log_file is None:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        filename=str(log_file),
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termarcade", description="Terminal arcade dashboard")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags take precedence over the environment."""
    update = {}
    if args.debug:
        update["debug"] = True
    if args.log_file is not None:
        update["log_file"] = args.log_file
    return settings.model_copy(update=update) if update else settings


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    settings = apply_args(get_settings(), parse_args(argv))
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info(f"termarcade {__version__} starting")

    app = TerminalApp(settings)
    try:
        curses.wrapper(app.run)
    except KeyboardInterrupt:
        logger.info("Interrupted")

    logger.info("Goodbye")


if __name__ == "__main__":
    main()
