"""Datenmodell für das Fundbüro (Pydantic v2)."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel


class ItemKind(str, Enum):
    LOST = "lost"
    FOUND = "found"


class ItemStatus(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class LostItem(BaseModel):
    """Verlust- oder Fundmeldung (gebäudeweit, nicht raumgebunden)."""

    id: str
    kind: ItemKind
    item_name: str
    description: str
    location: str        # Freitext, z.B. "MB-102" oder "3rd Floor Hallway"
    contact_info: str
    status: ItemStatus = ItemStatus.OPEN
    reported_at: datetime
