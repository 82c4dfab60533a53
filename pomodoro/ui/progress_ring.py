"""Circular progress ring widget rendered with QPainter.

- Fills clockwise from 12 o'clock as the countdown progresses.
- Translucent white track, solid white arc with round caps.
- MM:SS in bold at the centre with the preset label underneath.
- Arc changes are eased over 500 ms.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from .styles import TEXT_COLOR, TRACK_ALPHA


def format_clock(seconds: int) -> str:
    """Format seconds as zero-padded MM:SS."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 250
    RING_THICKNESS = 20
    ANIMATION_MS = 500

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER, self.RING_DIAMETER)

        self._percent: float = 0.0           # 0..1 target fill
        self._display_percent: float = 0.0   # animated fill
        self._time_text: str = format_clock(0)
        self._label: str = ""
        self._color = QColor(TEXT_COLOR)

        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(self.ANIMATION_MS)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def label(self) -> str:
        return self._label

    def set_percent(self, pct: float, *, animate: bool = True) -> None:
        """Update the arc fill (0..1)."""
        pct = max(0.0, min(1.0, pct))
        self._percent = pct
        self._arc_anim.stop()
        if not animate:
            self._display_percent = pct
            self.update()
            return
        self._arc_anim.setStartValue(self._display_percent)
        self._arc_anim.setEndValue(pct)
        self._arc_anim.start()

    def set_remaining(self, seconds: int) -> None:
        self._time_text = format_clock(seconds)
        self.update()

    def set_label(self, text: str) -> None:
        self._label = text
        self.update()

    # ── animation slot ────────────────────────────────────────────────

    def _on_arc_anim(self, value: object) -> None:
        self._display_percent = float(value)  # type: ignore[arg-type]
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        thickness = self.RING_THICKNESS
        diameter = max(100, min(w, h) - thickness)
        radius = diameter / 2

        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── background track ─────────────────────────────────────────
        track_color = QColor(self._color)
        track_color.setAlpha(TRACK_ALPHA)
        painter.setPen(QPen(track_color, thickness, Qt.PenStyle.SolidLine))
        painter.drawEllipse(ring_rect)

        # ── progress arc ─────────────────────────────────────────────
        pct = self._display_percent
        if pct > 0.001:
            arc_pen = QPen(self._color, thickness, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            painter.drawArc(ring_rect, 90 * 16, -int(pct * 360 * 16))

        # ── centre text: time ────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(42)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._color)

        time_rect = QRectF(ring_rect)
        time_rect.moveTop(time_rect.top() - 10)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # ── centre text: preset label ────────────────────────────────
        if self._label:
            label_font = QFont()
            label_font.setPixelSize(13)
            label_font.setWeight(QFont.Weight.DemiBold)
            label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 2)
            painter.setFont(label_font)
            label_color = QColor(self._color)
            label_color.setAlpha(200)
            painter.setPen(label_color)

            label_rect = QRectF(ring_rect)
            label_rect.moveTop(label_rect.top() + 32)
            painter.drawText(
                label_rect, Qt.AlignmentFlag.AlignCenter, self._label.upper(),
            )

        painter.end()
