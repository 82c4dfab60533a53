"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodoro.timer.engine import TimerEngine


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real user directories."""
    monkeypatch.setattr("pomodoro.settings.APP_SUPPORT_DIR", tmp_path / "config")
    monkeypatch.setattr(
        "pomodoro.settings.SETTINGS_PATH", tmp_path / "config" / "settings.json",
    )
    monkeypatch.setattr("pomodoro.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine on the Work preset."""
    return TimerEngine(parent=None)
