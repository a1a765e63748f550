#!/usr/bin/env python3
"""Common logging utilities for the trello_report package."""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Set up logging with a sensible formatter for console output.

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Stream to log to (default: stderr)

    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))

    root_logger.addHandler(console_handler)

    # requests logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO)


def setup_cli_logging(verbose: bool = False) -> None:
    """Set up logging specifically for CLI tools with clean output.

    Log lines go to stderr so that stdout only carries the report itself.

    Args:
        verbose: If True, show DEBUG messages

    """
    level = logging.DEBUG if verbose else logging.INFO

    setup_logging(level=level, format_string="%(levelname)s: %(message)s")
