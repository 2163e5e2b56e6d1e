"""
Tiny helper script to preview a cloud selection without writing HTML.
"""

from __future__ import annotations

from tag_cloud_generator.config import TagCloudConfig
from tag_cloud_generator.frequencies import count_words
from tag_cloud_generator.rendering import build_cloud_words
from tag_cloud_generator.selection import select_top_words


def main() -> None:
    config = TagCloudConfig(min_font=10, max_font=30)
    lines = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "The dog, meanwhile, was not happy at all.",
    ]

    counts = count_words(lines, config.separator_set)
    selection = select_top_words(counts, 5)
    for word in build_cloud_words(selection, config):
        print(f"{word.word:<10} count={word.count:<3} size={word.font_size}")


if __name__ == "__main__":
    main()
