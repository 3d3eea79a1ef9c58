"""Stundenplan-Speicher: wiederkehrende Lehrveranstaltungen pro Raum."""

import logging
import threading
from typing import Optional

from pydantic import ValidationError

from models.schedule import ClassSchedule
from engine.errors import InvalidArgumentError
from engine.repository import InMemoryRepository, Repository

logger = logging.getLogger(__name__)


def make_schedule(**fields) -> ClassSchedule:
    """Erzeugt eine Lehrveranstaltung; ungültige Felder → InvalidArgumentError."""
    try:
        return ClassSchedule(**fields)
    except ValidationError as e:
        raise InvalidArgumentError(f"Ungültige Lehrveranstaltung: {e}") from e


class ScheduleStore:
    """Hält den Wochenstundenplan. Wird einmalig beim Start befüllt."""

    def __init__(self, repository: Optional[Repository[ClassSchedule]] = None) -> None:
        self._repo: Repository[ClassSchedule] = repository or InMemoryRepository()
        self._lock = threading.RLock()

    def add(self, schedule: ClassSchedule) -> None:
        with self._lock:
            self._repo.put(schedule)

    def seed(self, schedules: list[ClassSchedule]) -> None:
        with self._lock:
            for s in schedules:
                self._repo.put(s)
        logger.info(f"Stundenplan geladen: {len(schedules)} Veranstaltungen")

    def list_by_room(self, room_id: str) -> list[ClassSchedule]:
        """Alle Veranstaltungen eines Raums (sortiert nach Tag, Beginn, ID)."""
        with self._lock:
            found = [s for s in self._repo.list() if s.room_id == room_id]
        return sorted(found, key=lambda s: (s.day_of_week, s.start_minutes, s.id))

    def group_by_room(self) -> dict[str, list[ClassSchedule]]:
        """Ein Lesezugriff für alle Räume (für die Stockwerksübersicht)."""
        with self._lock:
            everything = self._repo.list()
        grouped: dict[str, list[ClassSchedule]] = {}
        for s in everything:
            grouped.setdefault(s.room_id, []).append(s)
        return grouped

    def __len__(self) -> int:
        return len(self._repo.list())
