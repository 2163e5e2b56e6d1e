from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Token:
    """A maximal run of either word or separator characters."""

    text: str
    is_word: bool


@dataclass(slots=True)
class FrequencyEntry:
    """A normalized word and the number of times it occurs."""

    word: str
    count: int


@dataclass(slots=True)
class CloudSelection:
    """The top-N entries plus the count range used for font scaling."""

    entries: list[FrequencyEntry] = field(default_factory=list)
    max_count: int = 0
    min_count: int = 0

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True)
class CloudWord:
    """A selected word ready for display."""

    word: str
    count: int
    font_size: int
    css_class: str
