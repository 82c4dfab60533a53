"""Main timer display widget.

Layout (top → bottom):
    - Mode selector (one button per preset, right-aligned)
    - ProgressRing (large, centred)
    - Control row: play/pause toggle and reset
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QButtonGroup, QSizePolicy,
)

from ..timer.engine import TimerEngine, TimerPreset, PRESETS
from .progress_ring import ProgressRing


PLAY_ICON = "\u25B6"
PAUSE_ICON = "\u23F8"
RESET_ICON = "\u21BB"


class TimerWidget(QWidget):
    """Mode selector, progress ring and controls bound to one engine."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._preset_buttons: dict[str, QPushButton] = {}
        self._build_ui()
        self._connect_signals()
        self._on_preset_changed(engine.active_preset)
        self._on_running_changed(engine.running)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 24)
        layout.setSpacing(0)

        # ── mode selector ────────────────────────────────────────────
        mode_row = QHBoxLayout()
        mode_row.setSpacing(8)
        mode_row.setAlignment(Qt.AlignmentFlag.AlignRight)

        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        for preset in PRESETS:
            btn = QPushButton(preset.label, self)
            btn.setObjectName("presetButton")
            btn.setCheckable(True)
            btn.setProperty("presetKey", preset.key)
            self._mode_group.addButton(btn)
            self._preset_buttons[preset.key] = btn
            mode_row.addWidget(btn)
        layout.addLayout(mode_row)

        layout.addStretch(1)

        # ── progress ring ────────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(ProgressRing.RING_DIAMETER, ProgressRing.RING_DIAMETER)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        layout.addSpacing(24)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(48)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton(PLAY_ICON, self)
        self._start_pause_btn.setObjectName("controlButton")
        self._start_pause_btn.setToolTip("Start (Space)")

        self._reset_btn = QPushButton(RESET_ICON, self)
        self._reset_btn.setObjectName("controlButton")
        self._reset_btn.setToolTip("Reset (Esc)")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        layout.addStretch(1)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._mode_group.buttonClicked.connect(self._on_preset_clicked)
        self._start_pause_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.tick.connect(self._refresh_display)
        self._engine.running_changed.connect(self._on_running_changed)
        self._engine.preset_changed.connect(self._on_preset_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_preset_clicked(self, button: QPushButton) -> None:
        self._engine.select_preset(button.property("presetKey"))

    def _on_preset_changed(self, preset: TimerPreset) -> None:
        btn = self._preset_buttons.get(preset.key)
        if btn is not None:
            btn.setChecked(True)
        self._ring.set_label(preset.label)
        self._ring.set_percent(0.0, animate=False)
        self._refresh_display(self._engine.remaining)

    def _on_running_changed(self, running: bool) -> None:
        if running:
            self._start_pause_btn.setText(PAUSE_ICON)
            self._start_pause_btn.setToolTip("Pause (Space)")
        else:
            self._start_pause_btn.setText(PLAY_ICON)
            self._start_pause_btn.setToolTip("Start (Space)")

    def _refresh_display(self, remaining: int) -> None:
        self._ring.set_remaining(remaining)
        self._ring.set_percent(self._engine.progress_fraction)

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    @property
    def start_pause_button(self) -> QPushButton:
        return self._start_pause_btn

    @property
    def reset_button(self) -> QPushButton:
        return self._reset_btn

    def preset_button(self, key: str) -> QPushButton:
        return self._preset_buttons[key]
