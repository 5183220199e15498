from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QKeyEvent, QTextCursor, QTextFormat
from PySide6.QtWidgets import QPlainTextEdit, QTextEdit

from blankjump.app import config
from blankjump.app.document_buffer import DocumentBuffer
from blankjump.app.navigation import BlankNavigator
from blankjump.core.types import CursorShape, RepeatOutcome

logger = logging.getLogger(__name__)

NO_MOTION_MESSAGE = "No blank boundary in that direction."

VERTICAL = "vertical"
HORIZONTAL = "horizontal"


class _EditorCaret:
    """Cursor host over the editor's QTextCursor; keeps the anchor when selecting."""

    def __init__(self, editor: "BlankJumpEditor", select: bool = False) -> None:
        self._editor = editor
        self._select = select

    def position(self) -> int:
        return self._editor.textCursor().position()

    def set_position(self, pos: int) -> None:
        cursor = self._editor.textCursor()
        mode = QTextCursor.KeepAnchor if self._select else QTextCursor.MoveAnchor
        cursor.setPosition(pos, mode)
        self._editor.setTextCursor(cursor)


class BlankJumpEditor(QPlainTextEdit):
    """Plain text editor with blank-boundary jumps in a modal navigation layer."""

    statusMessage = Signal(str)
    navigationModeChanged = Signal(bool)

    _BLOCK_EXTRA_KEY = QTextFormat.UserProperty + 1

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._block_cursor_enabled: bool = config.load_block_cursor_enabled()
        self._wrap_horizontal_motion: bool = config.load_wrap_horizontal_motion()
        self._max_count: int = config.load_max_count()
        self._nav_feature_enabled: bool = False
        self._nav_mode_active: bool = False
        self._pending_count: str = ""
        self._pending_negative: bool = False
        self._last_outcome: Optional[RepeatOutcome] = None
        self.cursorPositionChanged.connect(self._update_block_cursor)

    # --- Preferences ----------------------------------------------------
    def set_block_cursor_enabled(self, enabled: bool) -> None:
        """Switch between block and bar cursor; affects drawing and jump boundaries."""
        self._block_cursor_enabled = enabled
        self._update_block_cursor()

    def set_wrap_horizontal_motion(self, enabled: bool) -> None:
        self._wrap_horizontal_motion = enabled

    def cursor_shape(self) -> CursorShape:
        return CursorShape.from_block_flag(self._block_cursor_enabled)

    def last_outcome(self) -> Optional[RepeatOutcome]:
        return self._last_outcome

    # --- Navigation mode ------------------------------------------------
    def set_navigation_mode_enabled(self, enabled: bool) -> None:
        """Globally enable or disable the modal navigation keys."""
        if self._nav_feature_enabled == enabled:
            return
        self._nav_feature_enabled = enabled
        self._set_nav_mode(enabled)

    def is_navigation_mode_active(self) -> bool:
        return self._nav_mode_active

    def _set_nav_mode(self, active: bool) -> None:
        if active and not self._nav_feature_enabled:
            active = False
        self._reset_count()
        if self._nav_mode_active == active:
            return
        self._nav_mode_active = active
        self._update_block_cursor()
        self.navigationModeChanged.emit(active)

    def _reset_count(self) -> None:
        self._pending_count = ""
        self._pending_negative = False

    def _take_count(self) -> int:
        count = int(self._pending_count) if self._pending_count else 1
        count = min(count, self._max_count)
        if self._pending_negative:
            count = -count
        self._reset_count()
        return count

    # --- Jumps ----------------------------------------------------------
    def blank_jump(self, axis: str, count: int = 1, select: bool = False) -> RepeatOutcome:
        """Jump ``count`` blank boundaries along ``axis``; negative counts go backward."""
        navigator = BlankNavigator(
            DocumentBuffer(self.document()),
            _EditorCaret(self, select=select),
            wrap_horizontal_motion=self._wrap_horizontal_motion,
        )
        shape = self.cursor_shape()
        if axis == VERTICAL:
            outcome = navigator.forward_vertical(count, shape)
        elif axis == HORIZONTAL:
            outcome = navigator.forward_horizontal(count, shape)
        else:
            raise ValueError(f"unknown axis {axis!r}")
        self._last_outcome = outcome
        if not outcome.moved:
            self._status_message(NO_MOTION_MESSAGE)
        else:
            self.ensureCursorVisible()
        return outcome

    def _status_message(self, msg: str) -> None:
        logger.debug("Status: %s", msg)
        self.statusMessage.emit(msg)

    # --- Key handling ---------------------------------------------------
    def keyPressEvent(self, event):  # type: ignore[override]
        if self._handle_nav_keypress(event):
            event.accept()
            return
        super().keyPressEvent(event)

    def _handle_nav_keypress(self, event: QKeyEvent) -> bool:
        mods = event.modifiers() & ~Qt.KeypadModifier
        key = event.key()
        # Alt+arrows jump in every mode
        if mods & Qt.AltModifier:
            select = bool(mods & Qt.ShiftModifier)
            if key == Qt.Key_Down:
                self.blank_jump(VERTICAL, 1, select)
                return True
            if key == Qt.Key_Up:
                self.blank_jump(VERTICAL, -1, select)
                return True
            if key == Qt.Key_Right:
                self.blank_jump(HORIZONTAL, 1, select)
                return True
            if key == Qt.Key_Left:
                self.blank_jump(HORIZONTAL, -1, select)
                return True
            return False
        if not self._nav_feature_enabled:
            return False
        if mods & Qt.ControlModifier:
            return False

        if not self._nav_mode_active:
            if key == Qt.Key_Escape:
                self._set_nav_mode(True)
                return True
            return False

        shift = bool(mods & Qt.ShiftModifier)
        text = event.text() or ""
        if key == Qt.Key_Escape:
            self._reset_count()
            return True
        if len(text) == 1 and text in "0123456789" and not shift:
            if text == "0" and not self._pending_count:
                return True
            self._pending_count += text
            return True
        if key == Qt.Key_Minus:
            self._pending_negative = not self._pending_negative
            return True
        if key == Qt.Key_I and not shift:
            self._set_nav_mode(False)
            return True

        motions = {
            Qt.Key_J: (VERTICAL, 1),
            Qt.Key_K: (VERTICAL, -1),
            Qt.Key_L: (HORIZONTAL, 1),
            Qt.Key_H: (HORIZONTAL, -1),
        }
        if key in motions:
            axis, sign = motions[key]
            self.blank_jump(axis, sign * self._take_count(), select=shift)
            return True

        if key in (Qt.Key_Tab, Qt.Key_Backtab):
            return False
        # Swallow other printable keys so navigation mode never edits text
        if text:
            self._reset_count()
            return True
        return False

    # --- Block cursor overlay -------------------------------------------
    def _update_block_cursor(self) -> None:
        remaining = [s for s in self.extraSelections() if s.format.property(self._BLOCK_EXTRA_KEY) is None]
        cursor = self.textCursor()
        if not self._nav_mode_active or not self._block_cursor_enabled or cursor.hasSelection():
            self.setExtraSelections(remaining)
            return
        block_cursor = QTextCursor(cursor)
        if not block_cursor.atEnd():
            block_cursor.movePosition(QTextCursor.Right, QTextCursor.KeepAnchor)
        extra = QTextEdit.ExtraSelection()
        extra.cursor = block_cursor
        fmt = extra.format
        fmt.setBackground(QColor("#b259ff"))
        fmt.setForeground(QColor("#111"))
        fmt.setProperty(QTextFormat.FullWidthSelection, False)
        fmt.setProperty(self._BLOCK_EXTRA_KEY, True)
        extra.format = fmt
        remaining.append(extra)
        self.setExtraSelections(remaining)
