"""Exceptions raised by the tag cloud core."""

from pathlib import Path


class TagCloudError(Exception):
    """Base class for all tag cloud errors."""


class TagCloudIOError(TagCloudError):
    """Input could not be read or output could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidWordCountError(TagCloudError, ValueError):
    """Requested number of words is outside [0, distinct words]."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Word count {requested} is outside the valid range [0, {available}]"
        )


class MalformedNumberError(TagCloudError, ValueError):
    """A word count was supplied that is not an integer."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Input is not an integer: {raw!r}")


class InvalidOffsetError(TagCloudError, IndexError):
    """Tokenizer was asked to start outside the text."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(f"Offset {position} is outside text of length {length}")
