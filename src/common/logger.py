"""Rich-backed logging for the extraction and translation commands.

Every module asks for its logger through ``get_logger`` so that console
output looks the same no matter which command is running:

    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Found [bold]12[/bold] highlights")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared console so log records and status lines interleave correctly
console = Console()


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger that writes through rich.

    Args:
        name: Logger name, usually ``__name__``
        level: Logging level name. Falls back to ``LOG_LEVEL`` or INFO.
        show_time: Prefix records with a timestamp
        show_path: Show the emitting file and line

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Keep propagation on so pytest's caplog sees the records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once, from a CLI entry point.

    Console output stays with the per-module handlers from ``get_logger``;
    the root logger only gets the optional file handler, so records are
    never printed twice.

    Args:
        level: Default level, overridden by ``LOG_LEVEL`` when set
        log_file: Optional path that also receives plain-text records
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

