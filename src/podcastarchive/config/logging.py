"""Logging setup for the Podcast Archive CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "WARNING",
) -> None:
    """Configure root logging once per process.

    Console output goes to stderr so feed documents printed to stdout stay clean.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file that also receives log records
        level: Level name used when not verbose
    """
    log_level = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    ]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
