import pytest

from tag_cloud.config import DEFAULT_SEPARATORS
from tag_cloud.tokenization import is_separator_token, iter_tokens, next_token

SEPARATORS = frozenset(DEFAULT_SEPARATORS)


def test_next_token_returns_word_and_separator_runs():
    """next_token stops exactly where the character class changes."""
    text = "Hello, world!"

    assert next_token(text, 0, SEPARATORS) == "Hello"
    assert next_token(text, 5, SEPARATORS) == ", "
    assert next_token(text, 7, SEPARATORS) == "world"
    assert next_token(text, 12, SEPARATORS) == "!"


def test_next_token_single_character_line():
    """A one-character line yields that character as its only token."""
    assert next_token("a", 0, SEPARATORS) == "a"
    assert next_token("?", 0, SEPARATORS) == "?"


def test_next_token_rejects_out_of_range_position():
    with pytest.raises(ValueError):
        next_token("abc", 3, SEPARATORS)
    with pytest.raises(ValueError):
        next_token("abc", -1, SEPARATORS)


@pytest.mark.parametrize(
    "text",
    [
        "the cat sat on the mat",
        "  leading and trailing  ",
        "don't-stop (believing)...",
        "tabs\tand\r\nnewlines",
        "x",
    ],
)
def test_iter_tokens_reconstructs_text_without_mixing_classes(text: str):
    """Joined tokens rebuild the text and each token holds one class only."""
    tokens = list(iter_tokens(text, SEPARATORS))

    assert "".join(tokens) == text
    for token in tokens:
        assert token
        classes = {char in SEPARATORS for char in token}
        assert len(classes) == 1


def test_iter_tokens_from_position_reconstructs_suffix():
    """Scanning from a mid-text position rebuilds the remaining suffix."""
    text = "one, two; three"
    position = 3
    pieces = []
    while position < len(text):
        token = next_token(text, position, SEPARATORS)
        pieces.append(token)
        position += len(token)
    assert "".join(pieces) == text[3:]


def test_is_separator_token():
    assert is_separator_token(" ,", SEPARATORS)
    assert not is_separator_token("word", SEPARATORS)
