"""Main application window for Pomodoro."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from .timer.engine import TimerEngine, TimerPreset, PRESETS
from .ui.timer_widget import TimerWidget
from .ui.completion_popup import CompletionPopup
from .ui.progress_ring import format_clock
from .ui.styles import build_stylesheet
from .settings import Settings, load_settings, save_settings
from .audio.sounds import SoundManager


logger = logging.getLogger(__name__)

APP_TITLE = "Pomodoro"

_PRESET_KEYS: dict[int, TimerPreset] = {
    Qt.Key.Key_1.value: PRESETS[0],
    Qt.Key.Key_2.value: PRESETS[1],
    Qt.Key.Key_3.value: PRESETS[2],
}


class PomodoroApp(QMainWindow):
    """Main application window.

    The window owns nothing about the countdown itself; it renders the
    injected engine and forwards user commands to it.
    """

    def __init__(
        self,
        engine: TimerEngine | None = None,
        *,
        settings: Settings | None = None,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.setMinimumSize(380, 560)

        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine + sound ────────────────────────────────────────────
        self._engine = engine if engine is not None else TimerEngine(self)
        self._sound_manager = sound_manager or SoundManager(parent=self)
        self._sound_manager.set_enabled(self._settings.sound_enabled)
        self._sound_manager.set_volume(self._settings.sound_volume)

        # ── central widgets ───────────────────────────────────────────
        self._backdrop = QWidget(self)
        self._backdrop.setObjectName("backdrop")
        self._backdrop.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QVBoxLayout(self._backdrop)
        layout.setContentsMargins(0, 0, 0, 0)

        self._timer_widget = TimerWidget(self._engine, self._backdrop)
        layout.addWidget(self._timer_widget)
        self.setCentralWidget(self._backdrop)

        self._popup = CompletionPopup(self._backdrop)
        self._popup.acknowledged.connect(self._engine.acknowledge_completion)

        self._build_menu_bar()
        self._connect_engine()

        self._apply_preset_style(self._engine.active_preset)
        self._restore_geometry()
        self._apply_always_on_top(self._settings.always_on_top)

    # ══════════════════════════════════════════════════════════════════
    #  BUILD
    # ══════════════════════════════════════════════════════════════════

    def _build_menu_bar(self) -> None:
        menu_bar = self.menuBar()

        timer_menu = menu_bar.addMenu("Timer")
        for preset in PRESETS:
            action = QAction(preset.label, self)
            action.triggered.connect(
                lambda _checked=False, p=preset: self._engine.select_preset(p)
            )
            timer_menu.addAction(action)
        timer_menu.addSeparator()

        reset_action = QAction("Reset", self)
        reset_action.triggered.connect(self._engine.reset)
        timer_menu.addAction(reset_action)

        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        timer_menu.addAction(quit_action)

        view_menu = menu_bar.addMenu("View")
        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        view_menu.addAction(self._aot_action)

        self._sound_action = QAction("Sound", self)
        self._sound_action.setCheckable(True)
        self._sound_action.setChecked(self._settings.sound_enabled)
        self._sound_action.triggered.connect(self._toggle_sound)
        view_menu.addAction(self._sound_action)

    def _connect_engine(self) -> None:
        self._engine.tick.connect(self._on_tick)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.preset_changed.connect(self._on_preset_changed)
        self._engine.completion_pending_changed.connect(self._on_completion_pending)

    # ══════════════════════════════════════════════════════════════════
    #  TIMER SIGNALS
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self, remaining: int) -> None:
        if self._engine.running:
            self.setWindowTitle(f"{format_clock(remaining)} - {APP_TITLE}")
        else:
            self.setWindowTitle(APP_TITLE)

    def _on_running_changed(self, running: bool) -> None:
        if running:
            self._sound_manager.play("start")
            self._on_tick(self._engine.remaining)
        else:
            self.setWindowTitle(APP_TITLE)

    def _on_preset_changed(self, preset: TimerPreset) -> None:
        self._sound_manager.play("click")
        self._apply_preset_style(preset)

    def _on_completion_pending(self, pending: bool) -> None:
        if pending:
            self._sound_manager.play("complete")
            self._popup.show_completion(self._engine.active_preset)
            self.raise_()
        else:
            self._popup.dismiss()

    def _apply_preset_style(self, preset: TimerPreset) -> None:
        self.setStyleSheet(build_stylesheet(preset))

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE (geometry, always-on-top, sound)
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        self._persist_settings()

    def _schedule_geometry_save(self) -> None:
        """Restart the 500 ms save timer on each move or resize."""
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        self._persist_settings()
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        was_visible = self.isVisible()
        self.setWindowFlags(flags)
        if was_visible:
            self.show()  # setWindowFlags hides the window

    def _toggle_sound(self) -> None:
        enabled = not self._settings.sound_enabled
        self._settings.sound_enabled = enabled
        self._sound_manager.set_enabled(enabled)
        self._sound_action.setChecked(enabled)
        self._persist_settings()

    def _persist_settings(self) -> None:
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start or pause the timer."""
        self._engine.toggle()

    def _on_escape(self) -> None:
        """Dismiss a pending completion, otherwise reset."""
        if self._popup.showing:
            self._popup.dismiss()
            return
        self._engine.reset()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._engine.pause()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if hasattr(self, "_popup") and self._popup.showing:
            self._popup.reposition()
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Space (start/pause), Escape (reset), 1-3 (select preset)."""
        key = event.key()
        # Number-pad digits carry KeypadModifier
        modifiers = event.modifiers() & ~Qt.KeyboardModifier.KeypadModifier
        if modifiers != Qt.KeyboardModifier.NoModifier:
            super().keyPressEvent(event)
            return
        if key == Qt.Key.Key_Space:
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        preset = _PRESET_KEYS.get(key)
        if preset is not None:
            self._engine.select_preset(preset)
            event.accept()
            return
        super().keyPressEvent(event)

    # ── accessors ─────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def popup(self) -> CompletionPopup:
        return self._popup
