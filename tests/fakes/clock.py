"""Horloge figee pour les tests."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from src.core.ports.clock import IClock
from src.utils.dates import add_months


class FakeClock(IClock):
    """Horloge qui ne bouge que quand le test l'avance."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self._now = start or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now += delta

    def advance_months(self, months: int) -> None:
        self._now = add_months(self._now, months)
