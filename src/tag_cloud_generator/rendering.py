from __future__ import annotations

from typing import List, Sequence

from .config import TagCloudConfig
from .fonts import font_class, font_size
from .models import CloudSelection, CloudWord, FrequencyEntry


def render_order_key(entry: FrequencyEntry) -> tuple[str, int]:
    """Alphabetical display order; ties fall back to the count."""
    return (entry.word.lower(), entry.count)


def build_cloud_words(
    selection: CloudSelection, config: TagCloudConfig | None = None
) -> List[CloudWord]:
    """Sort the selection for display and attach each word's font bucket."""
    config = config or TagCloudConfig()
    words: List[CloudWord] = []
    for entry in sorted(selection.entries, key=render_order_key):
        size = font_size(
            selection.max_count,
            selection.min_count,
            entry.count,
            min_font=config.min_font,
            max_font=config.max_font,
        )
        words.append(
            CloudWord(
                word=entry.word,
                count=entry.count,
                font_size=size,
                css_class=font_class(size, config.font_class_prefix),
            )
        )
    return words


def render_header(num_words: int, input_name: str, stylesheets: Sequence[str]) -> List[str]:
    title = f"Top {num_words} words in {input_name}"
    lines = [f"<html><head><title>{title}</title>"]
    lines.extend(
        f'<link href="{href}" rel="stylesheet" type="text/css">' for href in stylesheets
    )
    lines.append("</head><body>")
    lines.append(f"<h2>{title}</h2>")
    lines.append("<hr>")
    lines.append('<div class="cdiv">')
    lines.append('<p class="cbox">')
    return lines


def render_word(word: CloudWord) -> str:
    return (
        f'<span style="cursor:default" class="{word.css_class}" '
        f'title="count: {word.count}">{word.word}</span>'
    )


def render_footer() -> List[str]:
    return ["</p></div></body></html>"]


def render_tag_cloud(
    selection: CloudSelection, input_name: str, config: TagCloudConfig | None = None
) -> str:
    """Render the complete HTML document for a selection."""
    config = config or TagCloudConfig()
    lines = render_header(len(selection), input_name, config.stylesheets)
    lines.extend(render_word(word) for word in build_cloud_words(selection, config))
    lines.extend(render_footer())
    return "\n".join(lines) + "\n"
