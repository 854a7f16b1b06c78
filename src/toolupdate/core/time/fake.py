"""Fake Time implementation for testing."""

from datetime import datetime

from toolupdate.core.time.abc import Time


class FakeTime(Time):
    """Returns a fixed instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, current: datetime | None = None) -> None:
        self._current = current or datetime(2025, 1, 4, 12, 30, 45)

    def now(self) -> datetime:
        return self._current
