"""FacilityService – einheitliche Lese-/Schreib-API für die Präsentationsschicht.

Koordiniert Raumregister, Stundenplan, Resolver, Wartung und Fundbüro.
Der effektive Raumstatus wird bei JEDEM Lesezugriff neu berechnet
(er hängt von der Uhrzeit ab und wird nie zwischengespeichert).
"""

import time
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from config.schema import ServiceConfig
from models.room import RoomStatus
from models.schedule import ClassSchedule
from models.status import FloorView, RoomView
from models.audit_log import AuditLogEntry
from models.maintenance import IssueType, MaintenanceRequest, RequestStatus
from models.lost_item import ItemKind, LostItem
from models.facility_data import FacilityData
from engine.clock import Clock, SystemClock
from engine.errors import InvalidArgumentError, parse_choice
from engine.resolver import resolve
from engine.room_registry import RoomRegistry
from engine.schedule_store import ScheduleStore
from engine.maintenance_tracker import MaintenanceTracker
from engine.lost_found import LostAndFoundRegistry


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


_REPORTER_BY_ROLE = {
    UserRole.ADMIN: "Admin",
    UserRole.USER: "Student/Faculty",
}


class FacilityService:
    """Orchestrator über alle Stores der Engine."""

    def __init__(
        self,
        rooms: RoomRegistry,
        schedules: ScheduleStore,
        maintenance: MaintenanceTracker,
        lost_found: LostAndFoundRegistry,
        clock: Optional[Clock] = None,
        config: Optional[ServiceConfig] = None,
    ) -> None:
        self.rooms = rooms
        self.schedules = schedules
        self.maintenance = maintenance
        self.lost_found = lost_found
        self.clock = clock or SystemClock()
        self.config = config or ServiceConfig()

    @classmethod
    def from_data(
        cls,
        data: FacilityData,
        clock: Optional[Clock] = None,
        config: Optional[ServiceConfig] = None,
    ) -> "FacilityService":
        """Baut einen Service mit In-Memory-Stores aus einem Start-Datensatz."""
        clock = clock or SystemClock()
        rooms = RoomRegistry(clock=clock)
        rooms.seed(data.floors)
        schedules = ScheduleStore()
        schedules.seed(data.schedules)
        lost_found = LostAndFoundRegistry(clock=clock)
        lost_found.seed(data.lost_items)
        return cls(
            rooms=rooms,
            schedules=schedules,
            maintenance=MaintenanceTracker(clock=clock),
            lost_found=lost_found,
            clock=clock,
            config=config,
        )

    @property
    def default_actor(self) -> str:
        return self.config.default_actor

    def _simulate_latency(self) -> None:
        # Nur Test-Naht; standardmäßig 0
        if self.config.simulated_latency_ms:
            time.sleep(self.config.simulated_latency_ms / 1000)

    # ─── Räume & Status ───

    def list_floors(self, now: Optional[datetime] = None) -> list[FloorView]:
        """Alle Stockwerke mit aufgelöstem Status jedes Raums."""
        self._simulate_latency()
        moment = now or self.clock.now()
        floors = self.rooms.list_floors()
        by_room = self.schedules.group_by_room()
        return [
            FloorView(
                floor_number=floor.floor_number,
                rooms=[
                    RoomView.build(room, resolve(room, by_room.get(room.id, []), moment))
                    for room in floor.rooms
                ],
            )
            for floor in floors
        ]

    def get_room(self, room_id: str, now: Optional[datetime] = None) -> RoomView:
        self._simulate_latency()
        room = self.rooms.get_room(room_id)
        effective = resolve(room, self.schedules.list_by_room(room_id),
                            now or self.clock.now())
        return RoomView.build(room, effective)

    def search_rooms(self, query: str, now: Optional[datetime] = None) -> list[RoomView]:
        """Räume, deren ID oder Name `query` enthält (Groß-/Kleinschreibung egal)."""
        needle = query.strip().lower()
        return [
            room
            for floor in self.list_floors(now)
            for room in floor.rooms
            if needle in room.id.lower() or needle in room.name.lower()
        ]

    def list_schedules_for_room(self, room_id: str) -> list[ClassSchedule]:
        self._simulate_latency()
        self.rooms.get_room(room_id)
        return self.schedules.list_by_room(room_id)

    def set_override(
        self,
        room_id: str,
        status: Union[RoomStatus, str, None],
        acting_user: Optional[str] = None,
    ) -> AuditLogEntry:
        """Setzt (oder löscht mit None) den manuellen Override eines Raums."""
        self._simulate_latency()
        return self.rooms.set_override(room_id, status,
                                       acting_user or self.default_actor)

    def list_audit_logs(self) -> list[AuditLogEntry]:
        self._simulate_latency()
        return self.rooms.list_audit_logs()

    # ─── Wartung ───

    def list_maintenance_requests(self, room_id: str) -> list[MaintenanceRequest]:
        self._simulate_latency()
        return self.maintenance.list_by_room(room_id)

    def report_maintenance_issue(
        self,
        room_id: str,
        issue_type: Union[IssueType, str],
        description: str,
        reported_by: Optional[str] = None,
    ) -> MaintenanceRequest:
        """Neue Schadensmeldung im Status `pending`. Beschreibung darf nicht leer sein."""
        self._simulate_latency()
        if not description or not description.strip():
            raise InvalidArgumentError("Beschreibung darf nicht leer sein")
        return self.maintenance.report(
            room_id, issue_type, description.strip(),
            reported_by or self.reporter_for(UserRole.USER),
        )

    def update_maintenance_status(
        self,
        request_id: str,
        status: Union[RequestStatus, str],
    ) -> MaintenanceRequest:
        self._simulate_latency()
        return self.maintenance.update_status(request_id, status)

    # ─── Fundbüro ───

    def list_lost_items(self, kind: Union[ItemKind, str, None] = None) -> list[LostItem]:
        self._simulate_latency()
        return self.lost_found.list(kind)

    def report_lost_item(
        self,
        kind: Union[ItemKind, str],
        item_name: str,
        description: str = "",
        location: str = "",
        contact_info: str = "",
    ) -> LostItem:
        self._simulate_latency()
        if not item_name or not item_name.strip():
            raise InvalidArgumentError("Bezeichnung des Gegenstands darf nicht leer sein")
        return self.lost_found.report(kind, item_name.strip(), description,
                                      location, contact_info)

    def resolve_lost_item(self, item_id: str) -> LostItem:
        self._simulate_latency()
        return self.lost_found.resolve(item_id)

    # ─── Rollen ───

    @staticmethod
    def reporter_for(role: Union[UserRole, str]) -> str:
        """Melder-Kennung je Rolle ("Admin" bzw. "Student/Faculty")."""
        return _REPORTER_BY_ROLE[parse_choice(UserRole, role, "Rolle")]
