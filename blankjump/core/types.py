from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

FORWARD = 1
BACKWARD = -1


class CursorShape(Enum):
    """How the caret is interpreted while scanning."""

    BLOCK = auto()  # occupies a cell, 3-neighbor smoothing
    BAR = auto()  # zero-width caret, looks at current + previous only

    @classmethod
    def from_block_flag(cls, block: bool) -> "CursorShape":
        return cls.BLOCK if block else cls.BAR


def check_direction(direction: int) -> int:
    if direction not in (FORWARD, BACKWARD):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")
    return direction


def split_count(count: int) -> tuple[int, int]:
    """Return (direction, times) for a signed repeat count."""
    if count < 0:
        return BACKWARD, -count
    return FORWARD, count


@dataclass(frozen=True)
class VerticalScan:
    lines: int
    position: int


@dataclass(frozen=True)
class RepeatOutcome:
    """Steps left undone (signed), or no motion at all when ``moved`` is False."""

    remaining: int = 0
    moved: bool = True

    @property
    def satisfied(self) -> bool:
        return self.moved and self.remaining == 0


NO_MOTION = RepeatOutcome(remaining=0, moved=False)


@dataclass(frozen=True)
class RepeatResult:
    outcome: RepeatOutcome
    position: int
    steps: int = 0
