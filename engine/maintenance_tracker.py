"""Wartungsmeldungen pro Raum (pending → in-progress → resolved)."""

import logging
import threading
from typing import Optional, Union

from models.maintenance import IssueType, MaintenanceRequest, RequestStatus
from engine.clock import Clock, SystemClock
from engine.errors import NotFoundError, parse_choice
from engine.ids import IdSequence, MonotonicStamp
from engine.repository import InMemoryRepository, Repository

logger = logging.getLogger(__name__)


class MaintenanceTracker:
    """Nimmt Schadensmeldungen an und verfolgt deren Bearbeitungsstand."""

    def __init__(
        self,
        repository: Optional[Repository[MaintenanceRequest]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._repo: Repository[MaintenanceRequest] = repository or InMemoryRepository()
        self._lock = threading.RLock()
        self._ids = IdSequence("mnt")
        self._stamps = MonotonicStamp(clock or SystemClock())

    def list_by_room(self, room_id: str) -> list[MaintenanceRequest]:
        """Meldungen eines Raums, neueste zuerst."""
        with self._lock:
            requests = self._repo.list()
        return [r for r in reversed(requests) if r.room_id == room_id]

    def report(
        self,
        room_id: str,
        issue_type: Union[IssueType, str],
        description: str,
        reported_by: str,
    ) -> MaintenanceRequest:
        """Legt eine neue Meldung im Status `pending` an."""
        kind = parse_choice(IssueType, issue_type, "Schadensart")
        with self._lock:
            request = MaintenanceRequest(
                id=self._ids.next(),
                room_id=room_id,
                issue_type=kind,
                description=description,
                status=RequestStatus.PENDING,
                reported_by=reported_by,
                reported_at=self._stamps.next(),
            )
            self._repo.put(request)
        logger.info(f"Wartungsmeldung {request.id} für {room_id}: {kind.value}")
        return request

    def update_status(
        self,
        request_id: str,
        new_status: Union[RequestStatus, str],
    ) -> MaintenanceRequest:
        """Setzt den Bearbeitungsstand.

        Jeder Zielstatus wird angenommen. Gleicher Status ist ein No-op,
        ein Rückschritt (z.B. resolved → pending) wird nur als Warnung geloggt.
        """
        target = parse_choice(RequestStatus, new_status, "Bearbeitungsstand")
        with self._lock:
            request = self._repo.get(request_id)
            if request is None:
                raise NotFoundError("Wartungsmeldung", request_id)
            if target.rank < request.status.rank:
                logger.warning(
                    f"Wartungsmeldung {request_id}: Rückschritt "
                    f"{request.status.value} → {target.value}"
                )
            updated = request.model_copy(update={"status": target})
            self._repo.put(updated)
        logger.info(f"Wartungsmeldung {request_id}: Status {target.value}")
        return updated
