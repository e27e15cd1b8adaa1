"""Tokenizing, counting, selecting and scaling words for a tag cloud."""

from .counter import count_file, count_words
from .errors import (
    InvalidOffsetError,
    InvalidWordCountError,
    MalformedNumberError,
    TagCloudError,
    TagCloudIOError,
)
from .ordering import sort_alphabetically
from .scale import MAX_FONT_SIZE, MIN_FONT_SIZE, font_size
from .selector import Selection, select_top
from .separators import DEFAULT_SEPARATOR_SET, DEFAULT_SEPARATORS, SeparatorSet
from .tokenizer import Token, iter_tokens, iter_words, next_word_or_separator

__all__ = [
    "count_file",
    "count_words",
    "TagCloudError",
    "TagCloudIOError",
    "InvalidWordCountError",
    "MalformedNumberError",
    "InvalidOffsetError",
    "sort_alphabetically",
    "font_size",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
    "Selection",
    "select_top",
    "SeparatorSet",
    "DEFAULT_SEPARATORS",
    "DEFAULT_SEPARATOR_SET",
    "Token",
    "iter_tokens",
    "iter_words",
    "next_word_or_separator",
]
