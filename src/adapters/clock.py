"""Adaptateur horloge systeme."""

from datetime import datetime

from src.core.ports.clock import IClock
from src.utils.dates import utc_now


class SystemClock(IClock):
    """Horloge reelle, en UTC."""

    def now(self) -> datetime:
        return utc_now()
