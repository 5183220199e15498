from __future__ import annotations

from typing import Optional

from .buffer import TextBuffer
from .fill import is_empty_neighborhood
from .types import FORWARD, CursorShape, check_direction


def scan_horizontal(buffer: TextBuffer, start: int, direction: int, shape: CursorShape) -> int:
    """Scan characters of the line holding ``start`` for an empty/filled change.

    Never crosses into another line; running into the line edge returns the
    edge itself.
    """
    check_direction(direction)
    line_start = buffer.line_start(start)
    line_end = buffer.line_end(start)

    pos = start
    # Step once so the start cell itself is never the boundary.
    if (pos < line_end) if direction == FORWARD else (pos > line_start):
        pos += direction
    pos_prev = pos

    is_empty_state: Optional[bool] = None
    while True:
        is_empty = is_empty_neighborhood(buffer, pos, line_start, line_end, shape)
        if is_empty_state is None:
            is_empty_state = is_empty
        elif is_empty != is_empty_state:
            if shape is CursorShape.BLOCK:
                return pos if is_empty else pos_prev
            return pos if direction == FORWARD else pos_prev

        pos_next = pos + direction
        if not line_start <= pos_next <= line_end:
            return pos
        pos_prev = pos
        pos = pos_next
