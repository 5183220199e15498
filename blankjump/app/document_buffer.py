from __future__ import annotations

from typing import Optional

from PySide6.QtGui import QTextBlock, QTextDocument

# QTextDocument stores line breaks as paragraph separators.
_PARAGRAPH_SEPARATOR = "\u2029"


class DocumentBuffer:
    """TextBuffer over a QTextDocument; each block is one line."""

    def __init__(self, document: QTextDocument) -> None:
        self._document = document

    @property
    def document(self) -> QTextDocument:
        return self._document

    def _end(self) -> int:
        # characterCount() includes the trailing paragraph separator.
        return max(0, self._document.characterCount() - 1)

    def _block(self, pos: int) -> QTextBlock:
        pos = max(0, min(pos, self._end()))
        block = self._document.findBlock(pos)
        if not block.isValid():
            block = self._document.lastBlock()
        return block

    def line_start(self, pos: int) -> int:
        return self._block(pos).position()

    def line_end(self, pos: int) -> int:
        block = self._block(pos)
        return block.position() + max(0, block.length() - 1)

    def char_at(self, pos: int) -> Optional[str]:
        if not 0 <= pos < self._end():
            return None
        char = self._document.characterAt(pos)
        if char == _PARAGRAPH_SEPARATOR:
            return "\n"
        return char

    def column_of(self, pos: int) -> int:
        return pos - self.line_start(pos)

    def advance_lines(self, pos: int, count: int) -> tuple[int, int]:
        block = self._block(pos)
        moved = 0
        step = 1 if count > 0 else -1
        while moved != count:
            candidate = block.next() if step > 0 else block.previous()
            if not candidate.isValid():
                break
            block = candidate
            moved += step
        return moved, block.position()

    def move_to_column(self, pos: int, target: int) -> tuple[int, int]:
        block = self._block(pos)
        achieved = max(0, min(target, block.length() - 1))
        return achieved, block.position() + achieved
