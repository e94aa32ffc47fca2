"""Word and sentence boundary scans over a text buffer.

Every function here is pure: it reads ``text`` and returns a :class:`Span`.
Offsets are clamped into the buffer instead of being rejected, so any
integer input degrades to a (possibly empty) span and never reads outside
``[0, len(text))``.
"""

from __future__ import annotations

from typing import FrozenSet

from .delimiters import is_sentence_delimiter, is_terminal_punctuation, is_whitespace
from .span import EMPTY_SPAN, Span, clamp

BOUNDARY_KEYS: FrozenSet[str] = frozenset({"SPACE", "ENTER", "RETURN", "TAB"})


def find_preceding_word(text: str, offset: int) -> Span:
    """Return the run of non-whitespace ending at ``offset`` (inclusive).

    Callers reacting to a just-typed character pass ``selection_start - 1``.
    The span is empty when the character at ``offset`` is whitespace.
    """

    if not text:
        return EMPTY_SPAN

    last = clamp(offset, 0, len(text) - 1)
    start = last + 1
    i = last
    while i >= 0 and not is_whitespace(text[i]):
        start = i
        i -= 1

    if start > last:
        return Span(last, 0)
    return Span(start, last - start + 1)


def find_sentence(text: str, selection_start: int, selection_length: int = 0) -> Span:
    """Return the sentence containing the caret or covering a selection.

    Delimiters are included at the end of the span. Trailing punctuation and
    whitespace right before the caret belong to the sentence being sought,
    so the backward scan only treats a delimiter as a boundary once it has
    passed at least one content character.
    """

    if not text:
        return EMPTY_SPAN

    length = max(selection_length, 0)
    start = _scan_sentence_start(text, selection_start, length)
    end = _scan_sentence_end(text, selection_start, length)
    return _trim_whitespace(text, start, end)


def on_boundary_key(text: str, cursor_offset: int) -> Span:
    """Decide what to speak after a space/enter/tab keystroke.

    ``text`` is the buffer as it was before the boundary key's own character
    landed; ``cursor_offset`` is the caret right after the last typed
    character. Terminal punctuation before the caret speaks the whole
    sentence, anything else (including a bare line break) speaks the word.
    """

    if not text:
        return EMPTY_SPAN

    previous = clamp(cursor_offset - 1, -1, len(text) - 1)
    if previous < 0:
        return EMPTY_SPAN

    if is_terminal_punctuation(text[previous]):
        return find_sentence(text, previous + 1, 0)
    return find_preceding_word(text, previous)


def is_boundary_key(key: str) -> bool:
    return key.upper() in BOUNDARY_KEYS


def _scan_sentence_start(text: str, selection_start: int, selection_length: int) -> int:
    # A selection's first character already sits inside the sentence; a bare
    # caret looks at the character just before it.
    anchor = selection_start if selection_length > 0 else selection_start - 1
    i = clamp(anchor, -1, len(text) - 1)
    start = i
    found_content = False
    while i >= 0:
        char = text[i]
        if is_sentence_delimiter(char):
            if found_content:
                break
        elif not is_whitespace(char):
            start = i
            found_content = True
        i -= 1
    return max(start, 0)


def _scan_sentence_end(text: str, selection_start: int, selection_length: int) -> int:
    end = clamp(selection_start - 1 + selection_length, 0, len(text) - 1)
    for i in range(end, len(text)):
        end = i
        if is_sentence_delimiter(text[i]):
            break
    return end


def _trim_whitespace(text: str, start: int, end: int) -> Span:
    first, last = start, end
    while first < last and is_whitespace(text[first]):
        first += 1
    while last > first and is_whitespace(text[last]):
        last -= 1
    if is_whitespace(text[first]):
        # Nothing but whitespace and line breaks: nothing to speak.
        return Span(start, 0)
    return Span(first, last - first + 1)


__all__ = [
    "BOUNDARY_KEYS",
    "find_preceding_word",
    "find_sentence",
    "is_boundary_key",
    "on_boundary_key",
]
