#!/usr/bin/env python3
"""Common file and path utilities."""

import logging
from pathlib import Path

log = logging.getLogger(__name__)

UNSAFE_FILENAME_CHARS = '<>:"/\\|?*'


def write_text_file(text: str, output_file: Path, description: str = "file") -> None:
    """Write text to a file, creating parent directories as needed.

    Args:
        text: Content to write
        output_file: Path to output file
        description: Human-readable description for logging

    """
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(text)

    log.debug("Saved %s to: %s", description, output_file)


def clean_filename(filename: str) -> str:
    """Clean filename to be filesystem-safe.

    Args:
        filename: Original filename

    Returns:
        Cleaned filename safe for filesystem use

    """
    cleaned = filename
    for char in UNSAFE_FILENAME_CHARS:
        cleaned = cleaned.replace(char, "_")

    cleaned = cleaned.strip(" .")

    if not cleaned:
        cleaned = "untitled"

    return cleaned
