from __future__ import annotations

MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 48


def font_size(
    count: int,
    min_count: int,
    max_count: int,
    min_font: int = MIN_FONT_SIZE,
    max_font: int = MAX_FONT_SIZE,
) -> int:
    """
    Linearly map ``count`` from ``[min_count, max_count]`` onto a font size.

    Integer division keeps equal counts at equal sizes. When every selected
    word has the same count the midpoint size is used.
    """
    if not 0 < min_count <= count <= max_count:
        raise ValueError(
            f"count {count} must satisfy 0 < {min_count} <= count <= {max_count}"
        )
    if min_count == max_count:
        return (min_font + max_font) // 2
    return min_font + (count - min_count) * (max_font - min_font) // (
        max_count - min_count
    )
