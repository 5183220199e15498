from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from blankjump.app import config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config at a throwaway file for every test."""
    path = tmp_path / "blankjump_config.json"
    monkeypatch.setattr(config, "GLOBAL_CONFIG", path)
    return path
