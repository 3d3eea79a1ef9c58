"""Datenmodell für Wartungsmeldungen (Pydantic v2)."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class IssueType(str, Enum):
    AC = "AC"
    ELECTRICAL = "Electrical"
    PLUMBING = "Plumbing"
    FURNITURE = "Furniture"
    CLEANLINESS = "Cleanliness"
    OTHER = "Other"


class RequestStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"

    @property
    def rank(self) -> int:
        """Position im Lebenszyklus (pending=0 → resolved=2)."""
        return list(RequestStatus).index(self)


class MaintenanceRequest(BaseModel):
    """Eine Schadensmeldung zu einem Raum. Wird nie gelöscht."""

    id: str
    room_id: str
    issue_type: IssueType
    description: str
    status: RequestStatus = RequestStatus.PENDING
    reported_by: str
    reported_at: datetime
