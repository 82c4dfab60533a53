"""Shared test helpers for Pomodoro."""

from pomodoro.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def advance(engine: TimerEngine, seconds: int) -> None:
    """Simulate *seconds* elapsed seconds of the engine's tick source."""
    for _ in range(seconds):
        engine._on_tick()


def run_to_completion(engine: TimerEngine) -> None:
    """Start the engine and tick until the countdown finishes."""
    engine.start()
    advance(engine, engine.remaining)
