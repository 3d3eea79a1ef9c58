"""Abgeleitete Statusmodelle (werden nie gespeichert, immer neu berechnet)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from models.room import Room, RoomStatus

MANUAL_OVERRIDE_LABEL = "Manual Override"


class EffectiveStatus(BaseModel):
    """Ergebnis der Statusauflösung für einen Raum zu einem Zeitpunkt."""

    model_config = ConfigDict(frozen=True)

    status: RoomStatus
    current_activity: Optional[str] = None


class RoomView(Room):
    """Anzeigefertiger Raum-Snapshot: Raumdaten + effektiver Status."""

    status: RoomStatus
    current_activity: Optional[str] = None

    @classmethod
    def build(cls, room: Room, effective: EffectiveStatus) -> "RoomView":
        return cls(
            **room.model_dump(),
            status=effective.status,
            current_activity=effective.current_activity,
        )


class FloorView(BaseModel):
    """Stockwerk mit aufgelösten Raum-Snapshots."""

    floor_number: int
    rooms: list[RoomView]
