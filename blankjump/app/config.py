from __future__ import annotations

import json
import platform
from pathlib import Path

GLOBAL_CONFIG = Path.home() / ".blankjump_config.json"

DEFAULT_MAX_COUNT = 9999


def init_settings() -> None:
    GLOBAL_CONFIG.parent.mkdir(parents=True, exist_ok=True)


def _read_global_config() -> dict:
    """Return the parsed global config, or an empty dict on error/missing."""
    if not GLOBAL_CONFIG.exists():
        return {}
    try:
        payload = json.loads(GLOBAL_CONFIG.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return payload if isinstance(payload, dict) else {}


def _update_global_config(updates: dict) -> None:
    payload = _read_global_config()
    payload.update(updates)
    try:
        GLOBAL_CONFIG.parent.mkdir(parents=True, exist_ok=True)
        GLOBAL_CONFIG.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    except OSError:
        return


def load_wrap_horizontal_motion() -> bool:
    """Whether horizontal jumps continue onto the next non-blank line when stuck (default: False)."""
    payload = _read_global_config()
    return bool(payload.get("wrap_horizontal_motion", False))


def save_wrap_horizontal_motion(enabled: bool) -> None:
    _update_global_config({"wrap_horizontal_motion": bool(enabled)})


def load_block_cursor_enabled() -> bool:
    """Load the block cursor preference. Defaults to True on Windows, False elsewhere."""
    payload = _read_global_config()
    if "block_cursor" in payload:
        return bool(payload["block_cursor"])
    return platform.system() == "Windows"


def save_block_cursor_enabled(enabled: bool) -> None:
    """Save the block cursor preference (drawing and jump boundaries both follow it)."""
    _update_global_config({"block_cursor": bool(enabled)})


def load_navigation_mode_enabled() -> bool:
    payload = _read_global_config()
    return bool(payload.get("navigation_mode", True))


def save_navigation_mode_enabled(enabled: bool) -> None:
    _update_global_config({"navigation_mode": bool(enabled)})


def load_max_count(default: int = DEFAULT_MAX_COUNT) -> int:
    """Upper bound for typed count prefixes."""
    payload = _read_global_config()
    value = payload.get("max_count", default)
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    return max(1, value)
