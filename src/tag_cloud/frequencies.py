from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, TextIO

from .errors import InputFileError
from .models import CountResult, SeparatorSet
from .tokenization import is_separator_token, iter_tokens

LOGGER = logging.getLogger(__name__)


def count_words(
    lines: Iterable[str],
    separators: SeparatorSet,
    table: Counter[str] | None = None,
) -> Counter[str]:
    """Count case-insensitive word occurrences across ``lines``."""
    words: Counter[str] = Counter() if table is None else table
    for line in lines:
        words.update(_line_words(line, separators))
    return words


def count_stream(
    handle: BinaryIO | TextIO, separators: SeparatorSet, encoding: str = "utf-8"
) -> CountResult:
    """
    Count words from an open stream, one line at a time.

    Binary streams are decoded line by line so a malformed byte only stops
    counting at the line that holds it. A read failure part way through the
    stream ends counting early: the result keeps every line read so far and
    records the error instead of raising it.
    """
    words: Counter[str] = Counter()
    lines_read = 0
    try:
        for raw_line in handle:
            if isinstance(raw_line, bytes):
                line = raw_line.decode(encoding)
            else:
                line = raw_line
            words.update(_line_words(_strip_terminator(line), separators))
            lines_read += 1
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning(
            "Error reading input after %d lines; using partial counts: %s",
            lines_read,
            exc,
        )
        return CountResult(table=words, lines_read=lines_read, error=str(exc))
    LOGGER.info("Counted %d distinct words over %d lines.", len(words), lines_read)
    return CountResult(table=words, lines_read=lines_read)


def count_file(path: Path, separators: SeparatorSet) -> CountResult:
    """Open a UTF-8 text file and count its words, releasing it afterwards."""
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise InputFileError(path, exc) from exc
    with handle:
        return count_stream(handle, separators)


def _line_words(line: str, separators: SeparatorSet) -> Iterator[str]:
    for token in iter_tokens(line.lower(), separators):
        if not is_separator_token(token, separators):
            yield token


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
