from __future__ import annotations

import logging
from collections import Counter
from typing import AbstractSet, Iterable

from .tokenization import SEPARATORS, iter_words

LOGGER = logging.getLogger(__name__)


def count_words(
    lines: Iterable[str], separators: AbstractSet[str] = SEPARATORS
) -> dict[str, int]:
    """Count case-insensitive word occurrences across every line."""
    counts: Counter[str] = Counter()
    counts.update(iter_words(lines, separators))
    LOGGER.info(
        "Counted %d words (%d distinct).", sum(counts.values()), len(counts)
    )
    return dict(counts)
