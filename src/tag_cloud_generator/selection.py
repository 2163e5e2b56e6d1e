from __future__ import annotations

import logging
from typing import Mapping

from .models import CloudSelection, FrequencyEntry

LOGGER = logging.getLogger(__name__)


def clamp_word_count(requested: int, distinct_words: int) -> int:
    """Bound the requested cloud size to ``[0, distinct_words]``."""
    if requested < 0:
        LOGGER.warning(
            "Must have positive number of words; using 0 instead of %d.", requested
        )
        return 0
    if requested > distinct_words:
        LOGGER.info(
            "Desired words in tag cloud (%d) exceed distinct words (%d); clamping.",
            requested,
            distinct_words,
        )
        return distinct_words
    return requested


def selection_sort_key(entry: FrequencyEntry) -> tuple[int, str]:
    """Order by descending count, then case-insensitive word."""
    return (-entry.count, entry.word.lower())


def select_top_words(counts: Mapping[str, int], num_words: int) -> CloudSelection:
    """
    Pick the ``num_words`` most frequent entries.

    The full entry list is sorted with :func:`selection_sort_key` before it is
    truncated, so the result does not depend on mapping iteration order.
    """
    ranked = sorted(
        (FrequencyEntry(word=word, count=count) for word, count in counts.items()),
        key=selection_sort_key,
    )
    chosen = ranked[: max(0, num_words)]
    if not chosen:
        return CloudSelection()
    return CloudSelection(
        entries=chosen, max_count=chosen[0].count, min_count=chosen[-1].count
    )
