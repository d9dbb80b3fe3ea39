import time

from domain.interfaces import IClock


class SystemClock(IClock):
    def now(self) -> float:
        return time.time()


class FrozenClock(IClock):
    """Manually advanced clock, handy when exercising cache expiry."""

    def __init__(self, start: float = 0.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float):
        self.current += seconds
