"""Generate HTML tag clouds from the most frequent words in a text."""

from .config import CloudConfig
from .core import (
    InvalidOffsetError,
    InvalidWordCountError,
    MalformedNumberError,
    Selection,
    SeparatorSet,
    TagCloudError,
    TagCloudIOError,
    count_file,
    count_words,
    font_size,
    select_top,
    sort_alphabetically,
)
from .pipeline import CloudResult, build_cloud, generate_tag_cloud
from .render import render_html

__all__ = [
    "CloudConfig",
    "CloudResult",
    "build_cloud",
    "generate_tag_cloud",
    "render_html",
    "count_file",
    "count_words",
    "select_top",
    "sort_alphabetically",
    "font_size",
    "Selection",
    "SeparatorSet",
    "TagCloudError",
    "TagCloudIOError",
    "InvalidWordCountError",
    "MalformedNumberError",
    "InvalidOffsetError",
]
