"""Word frequency counting."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import TagCloudIOError
from .separators import DEFAULT_SEPARATOR_SET, SeparatorSet
from .tokenizer import iter_words

log = logging.getLogger(__name__)


def count_words(
    lines: Iterable[str], separators: SeparatorSet = DEFAULT_SEPARATOR_SET
) -> dict[str, int]:
    """Count lowercased word occurrences across lines.

    Each line is tokenized on its own, so a word never spans a line break.

    Args:
        lines: Lines of text, with or without trailing line endings.
        separators: Characters that break words.

    Returns:
        Mapping of lowercased word to its occurrence count.
    """
    counts: dict[str, int] = {}
    for line in lines:
        for word in iter_words(line.rstrip("\r\n"), separators):
            key = word.lower()
            counts[key] = counts.get(key, 0) + 1
    return counts


def count_file(
    path: Path | str,
    separators: SeparatorSet = DEFAULT_SEPARATOR_SET,
    encoding: str = "utf-8",
) -> dict[str, int]:
    """Count words in a text file.

    Args:
        path: Text file to read.
        separators: Characters that break words.
        encoding: Text encoding of the file.

    Returns:
        Mapping of lowercased word to its occurrence count.

    Raises:
        TagCloudIOError: If the file cannot be opened or decoded, or the
            encoding is unknown.
    """
    try:
        with open(path, encoding=encoding) as f:
            counts = count_words(f, separators)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise TagCloudIOError(path, f"Error reading from file: {e}") from e

    log.debug(f"Counted {len(counts)} distinct words in {path}")
    return counts
