"""Timer package."""

from .engine import (
    TimerEngine,
    TimerPreset,
    TimerSnapshot,
    TickHandle,
    WORK,
    SHORT_BREAK,
    LONG_BREAK,
    PRESETS,
    DEFAULT_PRESET,
    TICK_INTERVAL_MS,
    preset_by_key,
)

__all__ = [
    "TimerEngine",
    "TimerPreset",
    "TimerSnapshot",
    "TickHandle",
    "WORK",
    "SHORT_BREAK",
    "LONG_BREAK",
    "PRESETS",
    "DEFAULT_PRESET",
    "TICK_INTERVAL_MS",
    "preset_by_key",
]
