"""Selection of the most frequent words."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from .errors import InvalidWordCountError


@dataclass
class Selection:
    """Selected words with the count bounds used for scaling.

    Attributes:
        entries: (word, count) pairs in display or frequency order.
        min_count: Smallest count among the entries (0 when empty).
        max_count: Largest count among the entries (0 when empty).
    """

    entries: list[tuple[str, int]] = field(default_factory=list)
    min_count: int = 0
    max_count: int = 0

    @property
    def words(self) -> list[str]:
        """Selected words in entry order."""
        return [word for word, _ in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self.entries)


def _frequency_key(item: tuple[str, int]) -> tuple[int, str]:
    word, count = item
    return (-count, word)


def select_top(counts: Mapping[str, int], n: int) -> Selection:
    """Pick the ``n`` most frequent words.

    Higher counts come first; equal counts are ordered alphabetically, so the
    result does not depend on mapping iteration order.

    Args:
        counts: Mapping of word to occurrence count.
        n: Number of words to select, ``0 <= n <= len(counts)``.

    Returns:
        Selection ordered by descending count. Bounds are taken from the
        selected entries only; an empty selection has both bounds at 0.

    Raises:
        InvalidWordCountError: If ``n`` is outside the valid range.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Word count must be an int, got {type(n).__name__}")
    if not 0 <= n <= len(counts):
        raise InvalidWordCountError(n, len(counts))

    entries = sorted(counts.items(), key=_frequency_key)[:n]
    if not entries:
        return Selection()

    return Selection(
        entries=entries,
        min_count=entries[-1][1],
        max_count=entries[0][1],
    )
