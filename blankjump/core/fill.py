from __future__ import annotations

from typing import Optional

from .buffer import TextBuffer
from .types import CursorShape

BLANK_CHARS = frozenset(" \t")


def is_blank_char(char: Optional[str]) -> bool:
    return char is not None and char in BLANK_CHARS


def is_fill_position(buffer: TextBuffer, pos: int, line_start: int, line_end: int, default: bool) -> bool:
    """True when ``pos`` holds a non-blank character; ``default`` outside the line."""
    if line_start <= pos < line_end:
        return not is_blank_char(buffer.char_at(pos))
    return default


def is_empty_neighborhood(
    buffer: TextBuffer,
    pos: int,
    line_start: int,
    line_end: int,
    shape: CursorShape,
) -> bool:
    """Classify the neighborhood of ``pos`` as empty (boundary-worthy) or filled.

    Block: a blank cell flanked by filled cells on both sides is treated as
    filled, so single spaces between words never form a boundary.
    Bar: the caret sits between ``pos - 1`` and ``pos``; empty only when both
    sides are blank.
    """
    is_fill_curr = is_fill_position(buffer, pos, line_start, line_end, False)
    is_fill_prev = is_fill_position(buffer, pos - 1, line_start, line_end, is_fill_curr)
    if shape is CursorShape.BLOCK:
        is_fill_next = is_fill_position(buffer, pos + 1, line_start, line_end, is_fill_curr)
        return not (is_fill_curr or (is_fill_prev and is_fill_next))
    return not (is_fill_curr or is_fill_prev)
