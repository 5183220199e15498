from __future__ import annotations

import argparse
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from blankjump.app import config
from blankjump.app.ui.main_window import MainWindow

# ============================================================================
# DEBUG CONFIGURATION - Environment Variables
# ============================================================================
# BLANKJUMP_DEBUG - log every scan and jump outcome at DEBUG level
#
# Example:
#   BLANKJUMP_DEBUG=1 blankjump notes.txt
# ============================================================================


def _debug_enabled(var_name: str) -> bool:
    """Check if a debug flag is enabled."""
    return os.getenv(var_name, "0") not in ("0", "false", "False", "", None)


def _configure_logging() -> None:
    level = logging.DEBUG if _debug_enabled("BLANKJUMP_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plain text editor with blank-boundary jumps.")
    parser.add_argument("file", nargs="?", help="File to open at startup.")
    shape = parser.add_mutually_exclusive_group()
    shape.add_argument("--block", dest="block", action="store_true", default=None, help="Use the block cursor.")
    shape.add_argument("--bar", dest="block", action="store_false", help="Use the bar cursor.")
    parser.add_argument("--wrap", action="store_true", default=None, help="Let horizontal jumps wrap onto other lines.")
    parser.add_argument("--save", action="store_true", help="Persist --block/--bar/--wrap as preferences.")
    return parser.parse_args(argv)


def main() -> None:
    args = _parse_args(sys.argv[1:])
    _configure_logging()
    config.init_settings()
    if args.save:
        if args.block is not None:
            config.save_block_cursor_enabled(args.block)
        if args.wrap is not None:
            config.save_wrap_horizontal_motion(args.wrap)
    qt_app = QApplication(sys.argv)
    window = MainWindow()
    if args.block is not None:
        window.editor.set_block_cursor_enabled(args.block)
    if args.wrap is not None:
        window.editor.set_wrap_horizontal_motion(args.wrap)
    if args.file:
        window.open_file(args.file)
    window.resize(900, 640)
    window.show()
    sys.exit(qt_app.exec())


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
