"""Datenmodell für Räume und Stockwerke (Pydantic v2)."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RoomStatus(str, Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    RESERVED = "reserved"


class Room(BaseModel):
    """Ein Unterrichtsraum.

    Ist `manual_override` gesetzt, hat er IMMER Vorrang vor dem Stundenplan.
    """

    id: str                                     # "f1-r1"
    name: str                                   # "MB-101"
    floor: int
    capacity: int = Field(gt=0)
    manual_override: Optional[RoomStatus] = None


class Floor(BaseModel):
    """Ein Stockwerk mit seinen Räumen (feste Raummenge)."""

    floor_number: int
    rooms: list[Room]
