from __future__ import annotations

from blankjump.core.buffer import LineBuffer
from blankjump.core.repeat import horizontal_step, repeat_scan, vertical_step
from blankjump.core.types import NO_MOTION, CursorShape, RepeatOutcome

BLOCK = CursorShape.BLOCK

# line starts: 0, 4, 5, 9, 10
PARAGRAPHS = LineBuffer(["abc", "", "def", "", "ghi"])


def test_partial_repeat_reports_remaining_steps() -> None:
    result = repeat_scan(vertical_step, PARAGRAPHS, 0, 3, BLOCK)
    assert result.outcome == RepeatOutcome(remaining=1)
    assert result.position == 10
    assert result.steps == 2
    assert not result.outcome.satisfied


def test_partial_repeat_backward_keeps_sign() -> None:
    result = repeat_scan(vertical_step, PARAGRAPHS, 10, -3, BLOCK)
    assert result.outcome == RepeatOutcome(remaining=-1)
    assert result.position == 0


def test_full_repeat_is_satisfied() -> None:
    buf = LineBuffer(["foo   bar"])
    result = repeat_scan(horizontal_step, buf, 0, 2, BLOCK)
    assert result.outcome.satisfied
    assert result.position == 5


def test_no_motion_when_first_step_is_stuck() -> None:
    buf = LineBuffer(["abc", "", "def"])
    result = repeat_scan(horizontal_step, buf, 4, 5, BLOCK)
    assert result.outcome == NO_MOTION
    assert result.position == 4
    assert result.steps == 0


def test_zero_count_never_scans() -> None:
    calls = []

    def step(buffer, pos, direction, shape):
        calls.append(pos)
        return pos + direction

    result = repeat_scan(step, PARAGRAPHS, 0, 0, BLOCK)
    assert result.outcome == NO_MOTION
    assert calls == []


def test_each_moved_repetition_is_applied_once() -> None:
    applied: list[int] = []
    repeat_scan(vertical_step, PARAGRAPHS, 0, 5, BLOCK, apply=applied.append)
    assert applied == [5, 10]


def test_each_repetition_starts_from_previous_result() -> None:
    seen: list[int] = []

    def step(buffer, pos, direction, shape):
        seen.append(pos)
        return min(pos + 2 * direction, 6)

    result = repeat_scan(step, PARAGRAPHS, 0, 5, BLOCK)
    assert seen == [0, 2, 4, 6]
    assert result.position == 6
    assert result.outcome == RepeatOutcome(remaining=2)
