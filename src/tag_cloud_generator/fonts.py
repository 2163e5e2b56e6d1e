from __future__ import annotations

MIN_FONT = 11
MAX_FONT = 48


def font_size(
    max_count: int,
    min_count: int,
    count: int,
    min_font: int = MIN_FONT,
    max_font: int = MAX_FONT,
) -> int:
    """Linearly map ``count`` within ``[min_count, max_count]`` onto the font range."""
    if max_count > min_count:
        return min_font + (max_font - min_font) * (count - min_count) // (
            max_count - min_count
        )
    return max_font


def font_class(size: int, prefix: str = "f") -> str:
    """CSS class name for a font bucket."""
    return f"{prefix}{size}"
