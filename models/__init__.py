from models.room import Room, RoomStatus, Floor
from models.schedule import ClassSchedule
from models.status import EffectiveStatus, RoomView, FloorView
from models.audit_log import AuditLogEntry
from models.maintenance import MaintenanceRequest, IssueType, RequestStatus
from models.lost_item import LostItem, ItemKind, ItemStatus
from models.facility_data import FacilityData

__all__ = [
    "Room",
    "RoomStatus",
    "Floor",
    "ClassSchedule",
    "EffectiveStatus",
    "RoomView",
    "FloorView",
    "AuditLogEntry",
    "MaintenanceRequest",
    "IssueType",
    "RequestStatus",
    "LostItem",
    "ItemKind",
    "ItemStatus",
    "FacilityData",
]
