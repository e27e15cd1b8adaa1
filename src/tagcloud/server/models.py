"""Pydantic models for the preview server."""

from pydantic import BaseModel


class WordEntry(BaseModel):
    """A word in the cloud with its rendering size."""

    word: str
    count: int
    font_size: int


class CloudResponse(BaseModel):
    """Tag cloud for the configured input."""

    source: str
    n: int
    total_unique: int
    min_count: int
    max_count: int
    words: list[WordEntry] = []


class ServerState(BaseModel):
    """Current server configuration."""

    source: str | None = None
    stylesheet: str
