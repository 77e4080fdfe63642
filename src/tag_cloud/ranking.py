"""
Top-N word selection.

Two comparators define the orderings used here. Both are total orders that
only report equality for entries with identical words and counts, which keeps
selection stable across runs when many words share a count.

``compare_by_count``
    count descending, then word descending (case-insensitive), then the exact
    word descending.
``compare_alphabetically``
    word ascending (case-insensitive), then count ascending, then the exact
    word ascending.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, List, MutableMapping, Tuple

from .config import TagCloudConfig
from .models import CountBounds, RankedEntry, WordCount
from .scaling import font_size


def _compare(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_words_ignore_case(left: str, right: str) -> int:
    """Compare two words case-insensitively, falling back to exact text."""
    result = _compare(left.lower(), right.lower())
    if result == 0:
        result = _compare(left, right)
    return result


def compare_by_count(left: WordCount, right: WordCount) -> int:
    result = _compare(right.count, left.count)
    if result == 0:
        result = compare_words_ignore_case(right.word, left.word)
    return result


def compare_alphabetically(left: WordCount, right: WordCount) -> int:
    result = compare_words_ignore_case(left.word, right.word)
    if result == 0:
        result = _compare(left.count, right.count)
    return result


def drain_table(table: MutableMapping[str, int]) -> List[WordCount]:
    """Move every entry of ``table`` into a list, leaving the table empty."""
    entries = [WordCount(word=word, count=count) for word, count in table.items()]
    table.clear()
    return entries


def select(
    words: MutableMapping[str, int] | Iterable[WordCount], n: int
) -> Tuple[List[WordCount], CountBounds | None]:
    """
    Pick the ``n`` most frequent words and order them alphabetically.

    A frequency table passed in is drained. Bounds are taken from the first
    and last entries of the count ranking and are ``None`` when nothing was
    selected.
    """
    if n < 0:
        raise ValueError(f"Number of words must be non-negative, got {n}.")
    if isinstance(words, MutableMapping):
        entries = drain_table(words)
    else:
        entries = list(words)

    entries.sort(key=cmp_to_key(compare_by_count))
    selected = entries[:n]
    if not selected:
        return [], None

    bounds = CountBounds(min_count=selected[-1].count, max_count=selected[0].count)
    selected.sort(key=cmp_to_key(compare_alphabetically))
    return selected, bounds


def rank_entries(
    words: List[WordCount], bounds: CountBounds | None, config: TagCloudConfig
) -> List[RankedEntry]:
    """Attach a font size to each selected word, keeping display order."""
    if not words or bounds is None:
        return []
    return [
        RankedEntry(
            word=entry.word,
            count=entry.count,
            font_size=font_size(
                entry.count,
                bounds.min_count,
                bounds.max_count,
                min_font=config.min_font_size,
                max_font=config.max_font_size,
            ),
        )
        for entry in words
    ]
