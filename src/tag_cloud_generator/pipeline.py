from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from .config import TagCloudConfig
from .frequencies import count_words
from .models import CloudSelection
from .rendering import render_tag_cloud
from .selection import clamp_word_count, select_top_words

LOGGER = logging.getLogger(__name__)


class TagCloudError(RuntimeError):
    """Raised when a tag cloud run cannot complete."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class InputUnreadableError(TagCloudError):
    """Raised when the input document cannot be opened or decoded."""


class OutputUnwritableError(TagCloudError):
    """Raised when the output document cannot be created or written."""


def read_frequencies(input_path: Path, config: TagCloudConfig) -> dict[str, int]:
    """Read the whole input document and return its word counts."""
    try:
        handle = input_path.open("r", encoding=config.encoding)
    except OSError as exc:
        raise InputUnreadableError(
            input_path, f"Input file cannot be opened: {input_path}"
        ) from exc
    try:
        return count_words(handle, config.separator_set)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnreadableError(
            input_path, f"Input file cannot be read: {input_path}"
        ) from exc
    finally:
        _close_stream(handle, input_path)


def generate_tag_cloud(
    input_path: Path,
    output_path: Path,
    num_words: int,
    config: TagCloudConfig | None = None,
) -> CloudSelection:
    """
    Build the tag cloud for ``input_path`` and write it to ``output_path``.

    The input is consumed fully before the output file is created, and the
    document is rendered in memory, so a failed run never leaves a partial
    cloud behind.
    """
    config = config or TagCloudConfig()
    counts = read_frequencies(input_path, config)
    selection = select_top_words(counts, clamp_word_count(num_words, len(counts)))
    html = render_tag_cloud(selection, str(input_path), config)

    try:
        handle = output_path.open("w", encoding="utf-8")
    except OSError as exc:
        raise OutputUnwritableError(
            output_path, f"Output file cannot be created: {output_path}"
        ) from exc
    try:
        handle.write(html)
        handle.flush()
    except OSError as exc:
        _close_stream(handle, output_path)
        if output_path.is_file():
            output_path.unlink()
        raise OutputUnwritableError(
            output_path, f"Output file cannot be written: {output_path}"
        ) from exc
    _close_stream(handle, output_path)

    LOGGER.info("Wrote tag cloud of %d words to %s.", len(selection), output_path)
    return selection


def _close_stream(handle: IO[str], path: Path) -> None:
    try:
        handle.close()
    except OSError as exc:
        LOGGER.warning("Cannot close stream for %s: %s", path, exc)
