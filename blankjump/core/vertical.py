from __future__ import annotations

import logging

from .buffer import TextBuffer
from .fill import is_empty_neighborhood
from .types import CursorShape, VerticalScan, check_direction

logger = logging.getLogger(__name__)


def is_empty_line_at(
    buffer: TextBuffer,
    pos: int,
    target_col: int,
    achieved_col: int,
    shape: CursorShape,
) -> bool:
    """Emptiness of a line at the goal column.

    For block cursors (and any cursor in column 0) a line that ends at or
    before the goal column is empty, whatever the neighboring characters are.
    """
    line_start = buffer.line_start(pos)
    line_end = buffer.line_end(pos)
    if shape is CursorShape.BLOCK or target_col == 0:
        if pos >= line_end or achieved_col < target_col:
            return True
    return is_empty_neighborhood(buffer, pos, line_start, line_end, shape)


def scan_vertical(buffer: TextBuffer, start: int, direction: int, shape: CursorShape) -> VerticalScan:
    """Scan lines at the start column until the empty/filled state changes.

    Leaving an empty region lands on the first line of the new state, leaving
    a filled region lands on its last line. When the document edge comes first
    the last line where the goal column was reached exactly is returned, or
    ``start`` with zero lines when there is none.
    """
    check_direction(direction)
    target_col = buffer.column_of(start)
    is_empty_state = is_empty_line_at(buffer, start, target_col, target_col, shape)

    lines = 0
    lines_prev = 0
    pos_prev = start
    fallback = VerticalScan(0, start)

    while True:
        moved, line_pos = buffer.advance_lines(pos_prev, direction)
        if moved == 0:
            logger.debug("Vertical scan hit document edge; fallback %s", fallback)
            return fallback
        lines += direction
        achieved_col, pos = buffer.move_to_column(line_pos, target_col)
        is_empty = is_empty_line_at(buffer, pos, target_col, achieved_col, shape)

        if is_empty != is_empty_state:
            if is_empty_state:
                return VerticalScan(lines, pos)
            if lines_prev != 0:
                return VerticalScan(lines_prev, pos_prev)
            # The start line alone formed the filled run; carry on across the gap.
            is_empty_state = is_empty

        if achieved_col == target_col:
            fallback = VerticalScan(lines, pos)
        lines_prev = lines
        pos_prev = pos
