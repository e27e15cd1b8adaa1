"""Separator characters that split text into words."""

from dataclasses import dataclass

# Characters that break words apart
DEFAULT_SEPARATORS = "!,?. \"'\t\n\r&*()-_{}[];:"


@dataclass(frozen=True)
class SeparatorSet:
    """Immutable set of word-breaking characters."""

    chars: frozenset[str]

    @classmethod
    def from_string(cls, chars: str = DEFAULT_SEPARATORS) -> "SeparatorSet":
        """Build a separator set from every character in a string."""
        if not chars:
            raise ValueError("Separator set must contain at least one character")
        return cls(frozenset(chars))

    def is_separator(self, ch: str) -> bool:
        """Check if a single character breaks words."""
        return ch in self.chars

    def __contains__(self, ch: object) -> bool:
        return ch in self.chars

    def __len__(self) -> int:
        return len(self.chars)


DEFAULT_SEPARATOR_SET = SeparatorSet.from_string(DEFAULT_SEPARATORS)
