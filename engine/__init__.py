"""Status-Engine: Räume, Stundenplan, Overrides, Audit-Log, Wartung, Fundbüro."""

from .errors import (
    FacilityError,
    NotFoundError,
    InvalidArgumentError,
    ConflictError,
)
from .clock import Clock, SystemClock, FixedClock
from .repository import Repository, InMemoryRepository
from .resolver import resolve, find_active_schedule
from .room_registry import RoomRegistry
from .schedule_store import ScheduleStore, make_schedule
from .maintenance_tracker import MaintenanceTracker
from .lost_found import LostAndFoundRegistry
from .service import FacilityService, UserRole

__all__ = [
    "FacilityError",
    "NotFoundError",
    "InvalidArgumentError",
    "ConflictError",
    "Clock",
    "SystemClock",
    "FixedClock",
    "Repository",
    "InMemoryRepository",
    "resolve",
    "find_active_schedule",
    "RoomRegistry",
    "ScheduleStore",
    "make_schedule",
    "MaintenanceTracker",
    "LostAndFoundRegistry",
    "FacilityService",
    "UserRole",
]
