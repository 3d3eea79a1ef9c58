"""Uhr-Abstraktion für die Statusberechnung.

Der effektive Raumstatus hängt von der Wanduhr ab. Damit Tests
deterministisch bleiben, wird die Uhr injiziert statt global gelesen.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta


class Clock(ABC):
    """Liefert den aktuellen Zeitpunkt."""

    @abstractmethod
    def now(self) -> datetime:
        ...


class SystemClock(Clock):
    """Lokale Systemzeit (Stundenpläne sind in lokaler Uhrzeit definiert)."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock(Clock):
    """Feste, manuell verstellbare Uhr für Tests und Demos."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def set(self, moment: datetime) -> None:
        self._moment = moment

    def advance(self, delta: timedelta) -> datetime:
        self._moment = self._moment + delta
        return self._moment

    def __repr__(self) -> str:
        return f"FixedClock({self._moment.isoformat()})"
