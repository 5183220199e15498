from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Optional, Protocol


class TextBuffer(Protocol):
    """Read-only view the scanners probe. Positions are absolute offsets."""

    def line_start(self, pos: int) -> int: ...

    def line_end(self, pos: int) -> int: ...

    def char_at(self, pos: int) -> Optional[str]: ...

    def column_of(self, pos: int) -> int: ...

    def advance_lines(self, pos: int, count: int) -> tuple[int, int]: ...

    def move_to_column(self, pos: int, target: int) -> tuple[int, int]: ...


class LineBuffer:
    """In-memory buffer of lines joined by single newlines."""

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self.lines = list(lines) if lines is not None else [""]
        if not self.lines:
            self.lines = [""]
        self._starts: list[int] = []
        offset = 0
        for line in self.lines:
            self._starts.append(offset)
            offset += len(line) + 1
        self._length = offset - 1

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(text.split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return self._length

    def get_line_count(self) -> int:
        return len(self.lines)

    def line_number(self, pos: int) -> int:
        pos = max(0, min(pos, self._length))
        return bisect_right(self._starts, pos) - 1

    def position_of(self, line: int, col: int = 0) -> int:
        if not 0 <= line < len(self.lines):
            raise IndexError(f"line {line} out of range (0..{len(self.lines) - 1})")
        return self._starts[line] + max(0, min(col, len(self.lines[line])))

    def line_start(self, pos: int) -> int:
        return self._starts[self.line_number(pos)]

    def line_end(self, pos: int) -> int:
        line = self.line_number(pos)
        return self._starts[line] + len(self.lines[line])

    def char_at(self, pos: int) -> Optional[str]:
        if not 0 <= pos < self._length:
            return None
        line = self.line_number(pos)
        col = pos - self._starts[line]
        text = self.lines[line]
        return text[col] if col < len(text) else "\n"

    def column_of(self, pos: int) -> int:
        return pos - self.line_start(pos)

    def advance_lines(self, pos: int, count: int) -> tuple[int, int]:
        """Move ``count`` lines from ``pos``; return (lines moved, start of landing line)."""
        line = self.line_number(pos)
        target = max(0, min(line + count, len(self.lines) - 1))
        return target - line, self._starts[target]

    def move_to_column(self, pos: int, target: int) -> tuple[int, int]:
        """Return (achieved column, position); short lines clamp to their end."""
        line = self.line_number(pos)
        achieved = max(0, min(target, len(self.lines[line])))
        return achieved, self._starts[line] + achieved
