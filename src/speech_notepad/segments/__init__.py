"""Word and sentence boundary engine."""

from .delimiters import (
    LINE_DELIMITERS,
    SENTENCE_DELIMITERS,
    is_line_delimiter,
    is_sentence_delimiter,
    is_terminal_punctuation,
)
from .finder import (
    BOUNDARY_KEYS,
    find_preceding_word,
    find_sentence,
    is_boundary_key,
    on_boundary_key,
)
from .span import EMPTY_SPAN, Span, clamp

__all__ = [
    "BOUNDARY_KEYS",
    "EMPTY_SPAN",
    "LINE_DELIMITERS",
    "SENTENCE_DELIMITERS",
    "Span",
    "clamp",
    "find_preceding_word",
    "find_sentence",
    "is_boundary_key",
    "is_line_delimiter",
    "is_sentence_delimiter",
    "is_terminal_punctuation",
    "on_boundary_key",
]
