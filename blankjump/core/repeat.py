from __future__ import annotations

import logging
from typing import Callable, Optional

from .buffer import TextBuffer
from .horizontal import scan_horizontal
from .types import NO_MOTION, CursorShape, RepeatOutcome, RepeatResult, split_count
from .vertical import scan_vertical

logger = logging.getLogger(__name__)

# (buffer, position, direction, shape) -> new position; same position means no motion.
ScanStep = Callable[[TextBuffer, int, int, CursorShape], int]


def vertical_step(buffer: TextBuffer, pos: int, direction: int, shape: CursorShape) -> int:
    scan = scan_vertical(buffer, pos, direction, shape)
    return scan.position if scan.lines != 0 else pos


def horizontal_step(buffer: TextBuffer, pos: int, direction: int, shape: CursorShape) -> int:
    return scan_horizontal(buffer, pos, direction, shape)


def repeat_scan(
    step: ScanStep,
    buffer: TextBuffer,
    start: int,
    count: int,
    shape: CursorShape,
    apply: Optional[Callable[[int], None]] = None,
) -> RepeatResult:
    """Run ``step`` up to ``abs(count)`` times in the direction of ``count``.

    Every repetition scans from the position the previous one produced and the
    loop stops at the first repetition that does not move. ``apply`` receives
    each new position once, after its scan has finished.
    """
    direction, times = split_count(count)
    if times == 0:
        return RepeatResult(NO_MOTION, start, 0)

    pos = start
    steps = 0
    while steps < times:
        pos_next = step(buffer, pos, direction, shape)
        if pos_next == pos:
            break
        pos = pos_next
        steps += 1
        if apply is not None:
            apply(pos)

    if steps == 0:
        logger.debug("No motion from %d (count=%d, shape=%s)", start, count, shape.name)
        return RepeatResult(NO_MOTION, start, 0)
    remaining = (times - steps) * direction
    logger.debug("Moved %d -> %d in %d step(s), remaining=%d", start, pos, steps, remaining)
    return RepeatResult(RepeatOutcome(remaining=remaining), pos, steps)
