"""
Deterministic test doubles shared by unit and integration tests.
"""

from datetime import datetime
from zoneinfo import ZoneInfo

# Friday 2023-04-28 15:00 UTC: inside the week and month of the seed appointments
FROZEN_NOW = datetime(2023, 4, 28, 15, 0, tzinfo=ZoneInfo("UTC"))


class FrozenClock:
    """Callable clock returning a fixed instant that tests can move."""

    def __init__(self, now: datetime = FROZEN_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class SequentialIds:
    """Deterministic id factory: ``id-1``, ``id-2``, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.counter = 0

    def __call__(self) -> str:
        self.counter += 1
        return f"{self.prefix}-{self.counter}"
