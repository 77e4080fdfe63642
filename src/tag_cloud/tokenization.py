from __future__ import annotations

from typing import Iterator

from .models import SeparatorSet


def next_token(text: str, position: int, separators: SeparatorSet) -> str:
    """
    Return the word or separator run of ``text`` starting at ``position``.

    The run extends while characters stay in the same class (separator or
    word character) as ``text[position]``, so the result is never empty and
    never mixes both classes.
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position {position} outside text of length {len(text)}"
        )
    in_separator_run = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator_run:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: SeparatorSet) -> Iterator[str]:
    """Yield successive tokens covering ``text`` from start to end."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_token(token: str, separators: SeparatorSet) -> bool:
    """Return True when ``token`` is a run of separator characters."""
    return token[0] in separators
