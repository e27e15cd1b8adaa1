"""Alphabetical ordering of selected words."""

from .selector import Selection


def _alphabetical_key(item: tuple[str, int]) -> tuple[str, str]:
    word, _ = item
    # Fall back to the raw word so case-folded duplicates keep a total order
    return (word.casefold(), word)


def sort_alphabetically(selection: Selection) -> Selection:
    """Return a copy of ``selection`` ordered case-insensitively by word."""
    return Selection(
        entries=sorted(selection.entries, key=_alphabetical_key),
        min_count=selection.min_count,
        max_count=selection.max_count,
    )
