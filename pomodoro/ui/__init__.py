"""UI package."""

from .timer_widget import TimerWidget
from .progress_ring import ProgressRing, format_clock
from .completion_popup import CompletionPopup

__all__ = [
    "TimerWidget",
    "ProgressRing",
    "format_clock",
    "CompletionPopup",
]
