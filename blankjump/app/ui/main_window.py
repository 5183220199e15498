from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QLabel, QMainWindow

from blankjump.app import config
from blankjump.app.ui.blank_jump_editor import BlankJumpEditor

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-document window around a BlankJumpEditor."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.current_path: Optional[Path] = None
        self.editor = BlankJumpEditor(self)
        self.setCentralWidget(self.editor)
        self.editor.statusMessage.connect(lambda msg: self.statusBar().showMessage(msg, 2000))

        self._mode_status_label = QLabel("INS")
        self._mode_status_label.setObjectName("modeStatusLabel")
        self._mode_status_label.setToolTip("Shows whether navigation or insert mode is active")
        self.statusBar().addPermanentWidget(self._mode_status_label, 0)
        self.editor.navigationModeChanged.connect(self._on_navigation_mode_changed)
        self.editor.set_navigation_mode_enabled(config.load_navigation_mode_enabled())
        self._on_navigation_mode_changed(self.editor.is_navigation_mode_active())

    def _on_navigation_mode_changed(self, active: bool) -> None:
        self._mode_status_label.setText("NAV" if active else "INS")

    def open_file(self, path: str) -> bool:
        target = Path(path)
        try:
            text = target.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("File %s not found; starting empty buffer", target)
            text = ""
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not open %s: %s", target, exc)
            self.statusBar().showMessage(f"Could not open {target}: {exc}")
            return False
        self.editor.setPlainText(text)
        self.current_path = target
        self.setWindowTitle(f"{target.name} - blankjump")
        return True
