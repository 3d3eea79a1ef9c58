"""Datenmodell für Audit-Einträge (Pydantic v2)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AuditLogEntry(BaseModel):
    """Unveränderlicher Eintrag für genau eine Override-Änderung."""

    model_config = ConfigDict(frozen=True)

    id: str
    room_id: str
    room_name: str       # denormalisiert für die Anzeige
    action: str          # "Manual override set to reserved"
    timestamp: datetime
    user: str            # "Admin"
