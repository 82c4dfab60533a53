"""Countdown state machine for Pomodoro.

States
------
STOPPED   Not counting down.  ``remaining`` is either the preset total
          (fresh / reset) or a preserved value (paused), or 0 (finished).
RUNNING   A tick handle is live; one tick per second.

Transitions
-----------
STOPPED → RUNNING       (start, only when remaining > 0)
RUNNING → STOPPED       (pause, remaining preserved)
RUNNING → STOPPED       (remaining reaches 0, completion raised once)
Any → STOPPED           (reset / select_preset, remaining = total)

Completion never advances to another preset.  The engine raises the
``completion_pending`` flag and the presentation layer clears it with
``acknowledge_completion()`` once the user has seen it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── presets ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerPreset:
    key: str
    label: str
    total_seconds: int


WORK = TimerPreset("work", "Work", 25 * 60)
SHORT_BREAK = TimerPreset("short_break", "Short Break", 5 * 60)
LONG_BREAK = TimerPreset("long_break", "Long Break", 15 * 60)

PRESETS: tuple[TimerPreset, ...] = (WORK, SHORT_BREAK, LONG_BREAK)
DEFAULT_PRESET = WORK

TICK_INTERVAL_MS = 1000


def preset_by_key(key: str) -> TimerPreset:
    """Look up one of the fixed presets by its key."""
    for preset in PRESETS:
        if preset.key == key:
            return preset
    raise ValueError(f"unknown preset: {key!r}")


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the engine for rendering."""

    label: str
    remaining_seconds: int
    running: bool
    progress_fraction: float
    completion_pending: bool


# ── tick handle ───────────────────────────────────────────────────────────


class TickHandle(QObject):
    """Cancellable once-per-second task returned by ``TimerEngine.start()``.

    After ``cancel()`` returns, ``fired`` is never emitted again, even if
    a timeout had already been queued on the event loop.
    """

    fired = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._cancelled = False
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not self._cancelled and self._qt_timer.isActive()

    def start(self) -> None:
        if self._cancelled:
            return
        self._qt_timer.start()

    def cancel(self) -> None:
        self._cancelled = True
        self._qt_timer.stop()

    def _on_timeout(self) -> None:
        if self._cancelled:
            return
        self.fired.emit()


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """One-second-resolution countdown with start/pause/reset controls.

    The engine owns its state and must be driven from the thread it
    lives on; ticks and commands are serialised by the Qt event loop.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement, and after reset / preset
        selection so displays pick up the restored value.
    running_changed(running: bool)
        Emitted whenever ``running`` flips.
    preset_changed(preset: TimerPreset)
        Emitted by ``select_preset``.
    completed(preset: TimerPreset)
        Emitted exactly once when a countdown reaches zero.
    completion_pending_changed(pending: bool)
        Emitted when the completion flag is raised or acknowledged.
    """

    tick = pyqtSignal(int)
    running_changed = pyqtSignal(bool)
    preset_changed = pyqtSignal(object)
    completed = pyqtSignal(object)
    completion_pending_changed = pyqtSignal(bool)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        preset: TimerPreset = DEFAULT_PRESET,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms

        self._preset: TimerPreset = self._resolve(preset)
        self._remaining: int = self._preset.total_seconds
        self._running: bool = False
        self._completion_pending: bool = False

        self._handle: TickHandle | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def active_preset(self) -> TimerPreset:
        return self._preset

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def completion_pending(self) -> bool:
        return self._completion_pending

    @property
    def progress_fraction(self) -> float:
        """0.0 → 1.0 progress through the active preset."""
        total = self._preset.total_seconds
        return max(0.0, min(1.0, 1.0 - self._remaining / total))

    @property
    def handle(self) -> TickHandle | None:
        """The live tick handle, or ``None`` while stopped."""
        return self._handle

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            label=self._preset.label,
            remaining_seconds=self._remaining,
            running=self._running,
            progress_fraction=self.progress_fraction,
            completion_pending=self._completion_pending,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_preset(self, preset: TimerPreset | str) -> None:
        """Switch to *preset*, stopping and refilling the clock."""
        preset = self._resolve(preset)
        self._cancel_handle()
        self._preset = preset
        self._remaining = preset.total_seconds
        logger.debug("preset selected: %s (%ds)", preset.key, preset.total_seconds)
        self._set_running(False)
        self.preset_changed.emit(preset)
        self.tick.emit(self._remaining)

    def start(self) -> TickHandle | None:
        """Begin or resume counting down.

        Returns the live tick handle.  A no-op while already running
        (the existing handle is returned) and at zero (returns ``None``;
        reset first).
        """
        if self._running:
            return self._handle
        if self._remaining <= 0:
            logger.debug("start ignored: countdown already finished")
            return None

        handle = TickHandle(self, interval_ms=self._interval_ms)
        handle.fired.connect(partial(self._deliver_tick, handle))
        self._handle = handle
        self._set_running(True)
        handle.start()
        return handle

    def pause(self) -> None:
        """Freeze the clock at its current value."""
        if not self._running:
            return
        self._cancel_handle()
        self._set_running(False)

    def toggle(self) -> None:
        """Play/pause button behaviour."""
        if self._running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and refill the clock for the active preset."""
        self._cancel_handle()
        self._remaining = self._preset.total_seconds
        self._set_running(False)
        self.tick.emit(self._remaining)

    def acknowledge_completion(self) -> None:
        """Clear the completion flag once the user has seen it."""
        if not self._completion_pending:
            return
        self._completion_pending = False
        self.completion_pending_changed.emit(False)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _deliver_tick(self, handle: TickHandle) -> None:
        if handle is not self._handle or handle.cancelled:
            logger.debug("discarded tick from stale handle")
            return
        self._on_tick()

    def _on_tick(self) -> None:
        if not self._running or self._remaining <= 0:
            return
        self._remaining -= 1
        finished = self._remaining == 0
        if finished:
            # Settle state before any slot can issue a new command
            self._cancel_handle()
            self._running = False
            self._completion_pending = True
            logger.info("countdown finished: %s", self._preset.key)
        self.tick.emit(self._remaining)
        if finished:
            self.running_changed.emit(False)
            self.completion_pending_changed.emit(True)
            self.completed.emit(self._preset)

    def _cancel_handle(self) -> None:
        handle = self._handle
        if handle is None:
            return
        self._handle = None
        handle.cancel()
        handle.deleteLater()

    def _set_running(self, running: bool) -> None:
        if self._running == running:
            return
        self._running = running
        self.running_changed.emit(running)

    @staticmethod
    def _resolve(preset: TimerPreset | str) -> TimerPreset:
        if isinstance(preset, str):
            return preset_by_key(preset)
        if preset not in PRESETS:
            raise ValueError(f"not a fixed preset: {preset!r}")
        return preset_by_key(preset.key)
