"""Mapping of word counts onto font sizes."""

MIN_FONT_SIZE = 11
MAX_FONT_SIZE = 48


def font_size(
    count: int,
    min_count: int,
    max_count: int,
    low: int = MIN_FONT_SIZE,
    high: int = MAX_FONT_SIZE,
) -> int:
    """Linearly interpolate ``count`` between ``low`` and ``high``.

    When every selected word has the same count, all words get ``low``.
    Uses floor division, so only the maximum count reaches ``high``.
    """
    if low > high:
        raise ValueError(f"Font range is inverted: {low} > {high}")
    if min_count == max_count:
        return low
    return ((high - low) * (count - min_count)) // (max_count - min_count) + low
