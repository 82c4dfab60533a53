"""Pomodoro: a single-screen countdown timer with work and break presets."""

__version__ = "0.1.0"
