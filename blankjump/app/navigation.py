"""Directional blank-boundary jumps applied to a live caret.

The scanners in ``blankjump.core`` only probe positions. This module owns the
caret: it reads the current position, runs the repeat driver, applies each
moved repetition, and adds the optional wrap onto neighboring lines for
horizontal jumps that get stuck at a line edge.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from blankjump.app import config
from blankjump.core.buffer import TextBuffer
from blankjump.core.fill import is_blank_char
from blankjump.core.repeat import ScanStep, horizontal_step, repeat_scan, vertical_step
from blankjump.core.types import BACKWARD, FORWARD, CursorShape, RepeatOutcome

logger = logging.getLogger(__name__)


class CursorHost(Protocol):
    def position(self) -> int: ...

    def set_position(self, pos: int) -> None: ...


class Caret:
    """Plain cursor host with an optional selection anchor."""

    def __init__(self, position: int = 0, anchor: Optional[int] = None) -> None:
        self._position = position
        self.anchor = position if anchor is None else anchor
        self.select = False

    def position(self) -> int:
        return self._position

    def set_position(self, pos: int) -> None:
        self._position = pos
        if not self.select:
            self.anchor = pos

    def has_selection(self) -> bool:
        return self.anchor != self._position


def _fill_span(buffer: TextBuffer, pos: int) -> Optional[tuple[int, int]]:
    """Return (first, last) non-blank offsets of the line at ``pos``, or None if blank."""
    line_start = buffer.line_start(pos)
    line_end = buffer.line_end(pos)
    first = last = None
    for offset in range(line_start, line_end):
        if not is_blank_char(buffer.char_at(offset)):
            if first is None:
                first = offset
            last = offset
    if first is None or last is None:
        return None
    return first, last


def wrap_to_adjacent_line(buffer: TextBuffer, pos: int, direction: int, shape: CursorShape) -> int:
    """Skip whole blank lines in ``direction``; land on the next non-blank line's edge."""
    moved, line_pos = buffer.advance_lines(pos, direction)
    while moved != 0:
        span = _fill_span(buffer, line_pos)
        if span is not None:
            first, last = span
            if direction == FORWARD:
                return first
            return last if shape is CursorShape.BLOCK else last + 1
        moved, line_pos = buffer.advance_lines(line_pos, direction)
    return pos


def _wrapping_horizontal_step(buffer: TextBuffer, pos: int, direction: int, shape: CursorShape) -> int:
    pos_next = horizontal_step(buffer, pos, direction, shape)
    if pos_next != pos:
        return pos_next
    return wrap_to_adjacent_line(buffer, pos, direction, shape)


class BlankNavigator:
    """The four directional entry points over one buffer and one caret."""

    def __init__(
        self,
        buffer: TextBuffer,
        caret: CursorHost,
        *,
        wrap_horizontal_motion: Optional[bool] = None,
    ) -> None:
        self.buffer = buffer
        self.caret = caret
        if wrap_horizontal_motion is None:
            wrap_horizontal_motion = config.load_wrap_horizontal_motion()
        self.wrap_horizontal_motion = wrap_horizontal_motion

    def forward_vertical(self, count: int = 1, shape: CursorShape = CursorShape.BLOCK) -> RepeatOutcome:
        if count < 0:
            return self.backward_vertical(-count, shape)
        return self._run(vertical_step, FORWARD * count, shape)

    def backward_vertical(self, count: int = 1, shape: CursorShape = CursorShape.BLOCK) -> RepeatOutcome:
        if count < 0:
            return self.forward_vertical(-count, shape)
        return self._run(vertical_step, BACKWARD * count, shape)

    def forward_horizontal(self, count: int = 1, shape: CursorShape = CursorShape.BLOCK) -> RepeatOutcome:
        if count < 0:
            return self.backward_horizontal(-count, shape)
        return self._run(self._horizontal_step(), FORWARD * count, shape)

    def backward_horizontal(self, count: int = 1, shape: CursorShape = CursorShape.BLOCK) -> RepeatOutcome:
        if count < 0:
            return self.forward_horizontal(-count, shape)
        return self._run(self._horizontal_step(), BACKWARD * count, shape)

    def _horizontal_step(self) -> ScanStep:
        return _wrapping_horizontal_step if self.wrap_horizontal_motion else horizontal_step

    def _run(self, step: ScanStep, count: int, shape: CursorShape) -> RepeatOutcome:
        start = self.caret.position()
        result = repeat_scan(step, self.buffer, start, count, shape, apply=self.caret.set_position)
        logger.debug(
            "Blank jump count=%d shape=%s: %d -> %d (%s)",
            count,
            shape.name,
            start,
            result.position,
            result.outcome,
        )
        return result.outcome
