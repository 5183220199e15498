from __future__ import annotations

import pytest
from PySide6.QtGui import QTextDocument
from PySide6.QtWidgets import QApplication

from blankjump.app.document_buffer import DocumentBuffer
from blankjump.core.buffer import LineBuffer
from blankjump.core.horizontal import scan_horizontal
from blankjump.core.types import BACKWARD, FORWARD, CursorShape
from blankjump.core.vertical import scan_vertical

TEXT = "foo   bar\n\n  baz\tqux\nend"


def _ensure_qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture(scope="module")
def app() -> QApplication:
    return _ensure_qapp()


@pytest.fixture
def buffers(app: QApplication):
    doc = QTextDocument()
    doc.setPlainText(TEXT)
    yield DocumentBuffer(doc), LineBuffer.from_text(TEXT)


def test_line_bounds_match_line_buffer(buffers) -> None:
    qt_buf, plain = buffers
    for pos in range(len(TEXT) + 1):
        assert qt_buf.line_start(pos) == plain.line_start(pos), pos
        assert qt_buf.line_end(pos) == plain.line_end(pos), pos
        assert qt_buf.column_of(pos) == plain.column_of(pos), pos


def test_characters_match_line_buffer(buffers) -> None:
    qt_buf, plain = buffers
    for pos in range(-1, len(TEXT) + 2):
        assert qt_buf.char_at(pos) == plain.char_at(pos), pos
    assert qt_buf.char_at(9) == "\n"


def test_line_stepping_clamps_at_document_edges(buffers) -> None:
    qt_buf, plain = buffers
    assert qt_buf.advance_lines(0, 1) == plain.advance_lines(0, 1) == (1, 10)
    assert qt_buf.advance_lines(0, 10) == plain.advance_lines(0, 10)
    assert qt_buf.advance_lines(0, -1) == (0, 0)
    assert qt_buf.move_to_column(10, 4) == plain.move_to_column(10, 4) == (0, 10)
    assert qt_buf.move_to_column(11, 3) == (3, 14)


@pytest.mark.parametrize("shape", [CursorShape.BLOCK, CursorShape.BAR])
@pytest.mark.parametrize("direction", [FORWARD, BACKWARD])
def test_scanners_agree_across_buffers(buffers, shape: CursorShape, direction: int) -> None:
    qt_buf, plain = buffers
    for pos in range(len(TEXT) + 1):
        assert scan_horizontal(qt_buf, pos, direction, shape) == scan_horizontal(plain, pos, direction, shape)
        assert scan_vertical(qt_buf, pos, direction, shape) == scan_vertical(plain, pos, direction, shape)
