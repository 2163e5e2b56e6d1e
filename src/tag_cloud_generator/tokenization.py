from __future__ import annotations

from typing import AbstractSet, Iterable, Iterator

from .models import Token

SEPARATORS: frozenset[str] = frozenset(" \t\n\r,-.!?[]';:/()*`1234567890\"{}~<>")


def is_separator(char: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
    """Return True when ``char`` delimits words."""
    return char in separators


def next_word_or_separator(
    text: str, position: int, separators: AbstractSet[str] = SEPARATORS
) -> str:
    """
    Return the maximal run starting at ``position`` whose characters all share
    the separator membership of ``text[position]``.

    Parameters
    ----------
    text:
        The line being scanned.
    position:
        Starting index, ``0 <= position < len(text)``.
    """
    if not 0 <= position < len(text):
        raise IndexError(f"position {position} outside text of length {len(text)}")

    kind = is_separator(text[position], separators)
    end = position + 1
    while end < len(text) and is_separator(text[end], separators) == kind:
        end += 1
    return text[position:end]


def split_line(line: str, separators: AbstractSet[str] = SEPARATORS) -> Iterator[Token]:
    """Partition a line into alternating word and separator tokens."""
    position = 0
    while position < len(line):
        run = next_word_or_separator(line, position, separators)
        yield Token(text=run, is_word=not is_separator(run[0], separators))
        position += len(run)


def iter_words(
    lines: Iterable[str], separators: AbstractSet[str] = SEPARATORS
) -> Iterator[str]:
    """Yield lowercased word tokens line by line; runs never span lines."""
    for line in lines:
        for token in split_line(line.lower(), separators):
            if token.is_word:
                yield token.text
