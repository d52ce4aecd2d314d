"""Splitting command input into lines and words."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """One line of input with its words and their offsets within ``text``."""

    text: str
    words: tuple[str, ...]
    offsets: tuple[int, ...]


def _scan_words(text: str) -> list[tuple[int, str]]:
    spans: list[tuple[int, str]] = []
    if not text:
        return spans

    end = len(text)
    start = 0
    escaped = False
    quoted = False

    for index, ch in enumerate(text + "\0"):
        if ch == "\\" and not escaped:
            escaped = True
        elif ch == '"' and not escaped:
            quoted = not quoted
        elif index == end or (ch == " " and not quoted and not escaped):
            if index > start:
                spans.append((start, text[start:index]))
            start = index + 1
        elif escaped:
            escaped = False

    return spans


def _make_line(text: str) -> Line:
    spans = _scan_words(text)
    return Line(
        text=text,
        words=tuple(word for _, word in spans),
        offsets=tuple(offset for offset, _ in spans),
    )


def parse_words(text: str) -> list[str]:
    """Split ``text`` into words on unquoted, unescaped spaces.

    Quotes and backslashes are kept in the words as they were typed.
    """
    return [word for _, word in _scan_words(text)]


def parse_lines(text: str) -> list[Line]:
    """Split ``text`` into lines on line breaks and ``;;`` outside quotes."""
    lines: list[Line] = []
    end = len(text)
    if end == 0:
        return lines

    def at(index: int) -> str:
        return text[index] if 0 <= index < end else "\0"

    start = 0
    quoted = False
    index = 0

    while index <= end:
        ch = at(index)
        unescaped = index == 0 or text[index - 1] != "\\"

        if ch == '"' and unescaped:
            quoted = not quoted

        delimiter = ch == ";" and at(index + 1) == ";" and not quoted and unescaped
        linebreak = ch in ("\r", "\n") and not quoted

        if linebreak or delimiter or index == end:
            if index > start:
                lines.append(_make_line(text[start:index]))
            if delimiter:
                index += 1
            start = index + 1

        index += 1

    return lines