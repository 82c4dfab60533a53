"""End-of-session overlay shown when a countdown reaches zero.

Stays up until the user presses OK or clicks the card; dismissing it
emits ``acknowledged`` so the window can clear the engine's
completion flag.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QFrame, QVBoxLayout, QLabel, QPushButton, QGraphicsOpacityEffect,
)

from ..timer.engine import TimerPreset


class CompletionPopup(QWidget):
    """Centred card announcing a finished countdown."""

    FADE_IN_MS = 300
    FADE_OUT_MS = 250

    acknowledged = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedWidth(280)
        self.hide()
        self._showing = False

        self._build_ui()

        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)
        self._opacity.setOpacity(0.0)

        self._fade_anim = QPropertyAnimation(self._opacity, b"opacity", self)
        self._fade_anim.finished.connect(self._on_fade_done)

    # ── build ──────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("popupCard")
        outer.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(10)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._title = QLabel("Time's up!", card)
        self._title.setObjectName("popupTitle")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)

        self._message = QLabel("", card)
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message.setWordWrap(True)
        layout.addWidget(self._message)

        self._ok_btn = QPushButton("OK", card)
        self._ok_btn.setObjectName("popupButton")
        self._ok_btn.clicked.connect(self.dismiss)
        layout.addWidget(self._ok_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    # ── public API ─────────────────────────────────────────────────────

    @property
    def showing(self) -> bool:
        return self._showing

    @property
    def message(self) -> str:
        return self._message.text()

    @property
    def ok_button(self) -> QPushButton:
        return self._ok_btn

    def show_completion(self, preset: TimerPreset) -> None:
        """Announce that *preset* has finished."""
        self._message.setText(f"Your {preset.label.lower()} session is complete.")
        self._showing = True

        self.adjustSize()
        self.reposition()
        self.show()
        self.raise_()

        self._fade_anim.stop()
        self._fade_anim.setDuration(self.FADE_IN_MS)
        self._fade_anim.setStartValue(self._opacity.opacity())
        self._fade_anim.setEndValue(1.0)
        self._fade_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._fade_anim.start()

    def dismiss(self) -> None:
        """Hide the card and report the acknowledgement."""
        if not self._showing:
            return
        self._showing = False
        self.acknowledged.emit()

        self._fade_anim.stop()
        self._fade_anim.setDuration(self.FADE_OUT_MS)
        self._fade_anim.setStartValue(self._opacity.opacity())
        self._fade_anim.setEndValue(0.0)
        self._fade_anim.setEasingCurve(QEasingCurve.Type.InCubic)
        self._fade_anim.start()

    def reposition(self) -> None:
        """Centre the card over its parent widget."""
        parent = self.parentWidget()
        if parent is not None:
            x = (parent.width() - self.width()) // 2
            y = (parent.height() - self.height()) // 2
            self.move(max(0, x), max(0, y))

    # ── events ─────────────────────────────────────────────────────────

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        self.dismiss()

    def _on_fade_done(self) -> None:
        if not self._showing:
            self.hide()
