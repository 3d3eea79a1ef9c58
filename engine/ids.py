"""Vergabe von IDs und Zeitstempeln durch die Stores."""

import itertools
from datetime import datetime
from typing import Optional

from engine.clock import Clock


class IdSequence:
    """Fortlaufende, opake IDs mit Präfix ("log-000001")."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def next(self) -> str:
        return f"{self.prefix}-{next(self._counter):06d}"


class MonotonicStamp:
    """Zeitstempel, die pro Store nie rückwärts laufen."""

    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self._last: Optional[datetime] = None

    def observe(self, moment: datetime) -> None:
        """Berücksichtigt einen bereits vorhandenen Zeitstempel (z.B. Seed-Daten)."""
        if self._last is None or moment > self._last:
            self._last = moment

    def next(self) -> datetime:
        now = self.clock.now()
        if self._last is not None and now < self._last:
            now = self._last
        self._last = now
        return now
