"""
Manual clock for simulated (non-realtime) games and tests.
"""


class ManualClock:
    """A callable clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("Cannot move a clock backwards.")
        self.now += seconds
        return self.now
