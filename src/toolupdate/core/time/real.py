"""Real time implementation using datetime.now()."""

from datetime import datetime

from toolupdate.core.time.abc import Time


class RealTime(Time):
    """Production implementation using the system clock."""

    def now(self) -> datetime:
        return datetime.now()
