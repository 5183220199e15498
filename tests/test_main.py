from __future__ import annotations

from PySide6.QtWidgets import QApplication

from blankjump.app import main as main_module
from blankjump.app.ui.main_window import MainWindow


def _ensure_qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def test_parse_args_shape_flags() -> None:
    args = main_module._parse_args(["notes.txt", "--bar", "--wrap"])
    assert args.file == "notes.txt"
    assert args.block is False
    assert args.wrap is True
    defaults = main_module._parse_args([])
    assert defaults.block is None
    assert defaults.wrap is None
    assert main_module._parse_args(["--block"]).block is True


def test_debug_flag_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("BLANKJUMP_DEBUG", "1")
    assert main_module._debug_enabled("BLANKJUMP_DEBUG")
    monkeypatch.setenv("BLANKJUMP_DEBUG", "false")
    assert not main_module._debug_enabled("BLANKJUMP_DEBUG")


def test_main_window_opens_file(tmp_path) -> None:
    _ensure_qapp()
    path = tmp_path / "notes.txt"
    path.write_text("foo   bar\n", encoding="utf-8")
    window = MainWindow()
    assert window.open_file(str(path))
    assert window.editor.toPlainText() == "foo   bar\n"
    assert window.current_path == path
    assert window._mode_status_label.text() == "NAV"
    window.close()


def test_main_window_missing_file_starts_empty(tmp_path) -> None:
    _ensure_qapp()
    window = MainWindow()
    assert window.open_file(str(tmp_path / "new.txt"))
    assert window.editor.toPlainText() == ""
    window.close()
