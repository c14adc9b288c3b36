"""
Cursor context classification for Ghostty config lines.

A Ghostty config line is either a comment (`# ...`) or a `key = value`
assignment. Only the line under the cursor is inspected; the file as a
whole is never parsed.
"""

from typing import Optional, Union

import attrs


@attrs.frozen
class CommentContext:
    """The cursor is on a comment line."""


@attrs.frozen
class KeyContext:
    """The cursor is in the key region; `partial` is the key typed so far."""

    partial: str


@attrs.frozen
class ValueContext:
    """The cursor is in the value region of `key`; `partial` is the value typed so far."""

    key: str
    partial: str


LineContext = Union[CommentContext, KeyContext, ValueContext]


def classify_line(line: str, offset: int) -> LineContext:
    """
    Classify the cursor position within a single config line.

    Only the first `=` separates key from value, later ones belong to the
    value. The offset is clamped to the line, so any input yields a context.

    Args:
        line: Text of the line containing the cursor
        offset: Zero-based cursor offset within the line

    Returns:
        CommentContext, KeyContext or ValueContext

    Example:
        >>> classify_line("font-size = 12", 4)
        KeyContext(partial='font')
        >>> classify_line("font-size = 12", 14)
        ValueContext(key='font-size', partial='12')
    """
    if line.lstrip().startswith("#"):
        return CommentContext()

    offset = max(0, min(offset, len(line)))
    eq_pos = line.find("=")

    if eq_pos == -1 or offset <= eq_pos:
        return KeyContext(line[:offset].strip())

    return ValueContext(
        key=line[:eq_pos].strip(),
        partial=line[eq_pos + 1:offset].lstrip(),
    )


def line_at(text: str, line_number: int) -> Optional[str]:
    """
    Return one zero-indexed line of a document.

    Args:
        text: Full document text
        line_number: Zero-based line index

    Returns:
        The line without its line terminator, or None when out of range
    """
    if line_number < 0:
        return None

    lines = text.split("\n")
    if line_number >= len(lines):
        return None

    return lines[line_number].rstrip("\r")
