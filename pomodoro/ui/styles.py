"""QSS stylesheet and per-preset colours for Pomodoro."""

from __future__ import annotations

from ..timer.engine import TimerPreset, WORK, SHORT_BREAK, LONG_BREAK

# ── preset gradients ──────────────────────────────────────────────────────
#    Each preset maps to (start, end) for the diagonal window background.

PRESET_GRADIENTS: dict[str, tuple[str, str]] = {
    WORK.key:        ("#FF0000", "#FFFF00"),   # red → yellow
    SHORT_BREAK.key: ("#00FF00", "#0000FF"),   # green → blue
    LONG_BREAK.key:  ("#00FFFF", "#FF00FF"),   # cyan → magenta
}

_FALLBACK_GRADIENT = ("#4A4A5E", "#3A3A4E")

# White text and ring over any gradient
TEXT_COLOR = "#FFFFFF"
TRACK_ALPHA = 77           # ~0.3 opacity for the ring track
BUTTON_BG = "rgba(64, 64, 64, 77)"
BUTTON_BG_CHECKED = "rgba(64, 64, 64, 160)"


def gradient_for(preset: TimerPreset) -> tuple[str, str]:
    return PRESET_GRADIENTS.get(preset.key, _FALLBACK_GRADIENT)


# ── QSS builder ───────────────────────────────────────────────────────────


def build_stylesheet(preset: TimerPreset) -> str:
    start, end = gradient_for(preset)
    return f"""
    /* ── backdrop ─────────────────────────────────── */
    QWidget#backdrop {{
        background: qlineargradient(
            x1: 0, y1: 0, x2: 1, y2: 1,
            stop: 0 {start}, stop: 1 {end}
        );
    }}

    QWidget {{
        color: {TEXT_COLOR};
        font-size: 14px;
    }}

    /* ── mode selector ────────────────────────────── */
    QPushButton#presetButton {{
        background-color: {BUTTON_BG};
        color: {TEXT_COLOR};
        border: none;
        border-radius: 18px;
        padding: 8px 16px;
        font-weight: 600;
    }}

    QPushButton#presetButton:checked {{
        background-color: {BUTTON_BG_CHECKED};
    }}

    /* ── controls ─────────────────────────────────── */
    QPushButton#controlButton {{
        background-color: transparent;
        color: {TEXT_COLOR};
        border: none;
        font-size: 30px;
        padding: 8px 24px;
    }}

    QPushButton#controlButton:hover {{
        background-color: {BUTTON_BG};
        border-radius: 12px;
    }}

    /* ── completion popup ─────────────────────────── */
    QFrame#popupCard {{
        background-color: rgba(30, 30, 46, 230);
        border-radius: 16px;
    }}

    QLabel#popupTitle {{
        font-size: 20px;
        font-weight: 700;
    }}

    QPushButton#popupButton {{
        background-color: {TEXT_COLOR};
        color: #1E1E2E;
        border: none;
        border-radius: 10px;
        padding: 8px 28px;
        font-weight: 700;
    }}
    """
