"""Clock abstraction so backup timestamps are deterministic in tests."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...
