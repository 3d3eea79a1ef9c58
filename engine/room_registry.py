"""Raumregister + Audit-Log.

Beide teilen sich EIN Lock: Ein Leser sieht nie einen geänderten Override
ohne den zugehörigen Audit-Eintrag (oder umgekehrt).

Hinweis: Das Audit-Log wächst unbegrenzt (keine Aufbewahrungsregel).
"""

import logging
import threading
from typing import Optional, Union

from models.room import Floor, Room, RoomStatus
from models.audit_log import AuditLogEntry
from engine.clock import Clock, SystemClock
from engine.errors import NotFoundError, parse_choice
from engine.ids import IdSequence, MonotonicStamp
from engine.repository import InMemoryRepository, Repository

logger = logging.getLogger(__name__)


def override_action(status: Optional[RoomStatus]) -> str:
    """Aktionstext für das Audit-Log."""
    if status is None:
        return "Manual override cleared"
    return f"Manual override set to {status.value}"


class RoomRegistry:
    """Verwaltet Räume (feste Menge pro Stockwerk) und deren Overrides."""

    def __init__(
        self,
        rooms: Optional[Repository[Room]] = None,
        audit_log: Optional[Repository[AuditLogEntry]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._rooms: Repository[Room] = rooms or InMemoryRepository()
        self._audit: Repository[AuditLogEntry] = audit_log or InMemoryRepository()
        self._lock = threading.RLock()
        self._ids = IdSequence("log")
        self._stamps = MonotonicStamp(clock or SystemClock())

    # ─── Befüllen ───

    def seed(self, floors: list[Floor]) -> None:
        with self._lock:
            for floor in floors:
                for room in floor.rooms:
                    self._rooms.put(room)
        logger.info(
            f"Raumregister geladen: {sum(len(f.rooms) for f in floors)} Räume "
            f"auf {len(floors)} Stockwerken"
        )

    # ─── Lesen ───

    def list_floors(self) -> list[Floor]:
        """Stockwerke aufsteigend, Räume in Anlagereihenfolge (tiefe Kopien)."""
        with self._lock:
            rooms = self._rooms.list()
        by_floor: dict[int, list[Room]] = {}
        for room in rooms:
            by_floor.setdefault(room.floor, []).append(room)
        return [
            Floor(floor_number=number, rooms=by_floor[number])
            for number in sorted(by_floor)
        ]

    def get_room(self, room_id: str) -> Room:
        with self._lock:
            room = self._rooms.get(room_id)
        if room is None:
            raise NotFoundError("Raum", room_id)
        return room

    def list_audit_logs(self) -> list[AuditLogEntry]:
        """Audit-Einträge, neueste zuerst."""
        with self._lock:
            return list(reversed(self._audit.list()))

    # ─── Schreiben ───

    def set_override(
        self,
        room_id: str,
        status: Union[RoomStatus, str, None],
        acting_user: str,
    ) -> AuditLogEntry:
        """Setzt oder löscht (status=None) den Override und protokolliert ihn.

        Unbekannter Raum → NotFoundError, ungültiger Status →
        InvalidArgumentError. In beiden Fällen bleibt alles unverändert.
        """
        new_status = None if status is None else parse_choice(
            RoomStatus, status, "Raumstatus")

        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise NotFoundError("Raum", room_id)

            entry = AuditLogEntry(
                id=self._ids.next(),
                room_id=room.id,
                room_name=room.name,
                action=override_action(new_status),
                timestamp=self._stamps.next(),
                user=acting_user,
            )
            self._rooms.put(room.model_copy(update={"manual_override": new_status}))
            self._audit.put(entry)

        logger.info(f"{room.name}: {entry.action} (durch {acting_user})")
        return entry
