from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List

SeparatorSet = FrozenSet[str]
FrequencyTable = Dict[str, int]


@dataclass(slots=True)
class WordCount:
    """A normalized word and the number of times it occurred."""

    word: str
    count: int


@dataclass(frozen=True, slots=True)
class CountBounds:
    """Smallest and largest count among the selected words."""

    min_count: int
    max_count: int


@dataclass(slots=True)
class RankedEntry:
    """A selected word with its derived font size."""

    word: str
    count: int
    font_size: int


@dataclass(slots=True)
class CountResult:
    """Outcome of counting words from a text stream."""

    table: FrequencyTable
    lines_read: int
    error: str | None = None

    @property
    def complete(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class TagCloud:
    """Ranked entries ready to be rendered."""

    num_words: int
    entries: List[RankedEntry]
    bounds: CountBounds | None
