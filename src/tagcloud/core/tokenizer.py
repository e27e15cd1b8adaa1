"""Split lines of text into alternating word and separator runs."""

from collections.abc import Iterator
from typing import NamedTuple

from .errors import InvalidOffsetError
from .separators import DEFAULT_SEPARATOR_SET, SeparatorSet


class Token(NamedTuple):
    """A maximal run of word characters or of separator characters."""

    text: str
    is_separator: bool


def next_word_or_separator(
    text: str,
    position: int,
    separators: SeparatorSet = DEFAULT_SEPARATOR_SET,
) -> tuple[str, int]:
    """Return the word or separator run starting at ``position`` and its end.

    If the character at ``position`` is a separator, the result is the longest
    run of separators starting there; otherwise it is the longest run of
    non-separator characters.

    Args:
        text: Text to read from.
        position: Start index, must satisfy ``0 <= position < len(text)``.
        separators: Characters that break words.

    Returns:
        Tuple of the run ``text[position:end]`` (never empty) and ``end``,
        the offset just past it.

    Raises:
        InvalidOffsetError: If ``position`` is outside the text.
    """
    if not 0 <= position < len(text):
        raise InvalidOffsetError(position, len(text))

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end], end


def iter_tokens(
    text: str, separators: SeparatorSet = DEFAULT_SEPARATOR_SET
) -> Iterator[Token]:
    """Yield successive tokens covering ``text`` from offset 0.

    Concatenating the yielded token texts gives back ``text`` exactly.
    """
    position = 0
    while position < len(text):
        run, position = next_word_or_separator(text, position, separators)
        yield Token(run, run[0] in separators)


def iter_words(
    text: str, separators: SeparatorSet = DEFAULT_SEPARATOR_SET
) -> Iterator[str]:
    """Yield only the word tokens of ``text``, unmodified."""
    for token in iter_tokens(text, separators):
        if not token.is_separator:
            yield token.text
