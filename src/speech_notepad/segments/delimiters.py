"""Character classes that bound words and sentences."""

from __future__ import annotations

from typing import FrozenSet

LINE_DELIMITERS: FrozenSet[str] = frozenset(
    {
        "\n",
        "\r",
        "\x85",  # NEXT LINE
        "\u2028",  # LINE SEPARATOR
        "\u2029",  # PARAGRAPH SEPARATOR
    }
)

SENTENCE_PUNCTUATION: FrozenSet[str] = frozenset(
    {
        ".",
        "!",
        "?",
        ":",
        ";",
        "。",  # IDEOGRAPHIC FULL STOP
        "．",  # FULLWIDTH FULL STOP
        "：",  # FULLWIDTH COLON
        "；",  # FULLWIDTH SEMICOLON
    }
)

SENTENCE_DELIMITERS: FrozenSet[str] = SENTENCE_PUNCTUATION | LINE_DELIMITERS


def is_sentence_delimiter(char: str) -> bool:
    return char in SENTENCE_DELIMITERS


def is_line_delimiter(char: str) -> bool:
    return char in LINE_DELIMITERS


def is_terminal_punctuation(char: str) -> bool:
    """True for a sentence delimiter that is not a bare line break."""

    return char in SENTENCE_DELIMITERS and char not in LINE_DELIMITERS


def is_whitespace(char: str) -> bool:
    return char.isspace()


__all__ = [
    "LINE_DELIMITERS",
    "SENTENCE_DELIMITERS",
    "SENTENCE_PUNCTUATION",
    "is_line_delimiter",
    "is_sentence_delimiter",
    "is_terminal_punctuation",
    "is_whitespace",
]
