"""FacilityData: Start-Datensatz des Gebäudes (Pydantic v2)."""

from pydantic import BaseModel

from models.room import Floor
from models.schedule import ClassSchedule
from models.lost_item import LostItem


class FacilityData(BaseModel):
    """Räume, Stundenplan und vorhandene Fundbüro-Einträge beim Start."""

    building_name: str
    floors: list[Floor]
    schedules: list[ClassSchedule]
    lost_items: list[LostItem] = []

    @property
    def room_count(self) -> int:
        return sum(len(f.rooms) for f in self.floors)

    def summary(self) -> str:
        """Kurze Übersicht über den Datensatz."""
        lines = [
            f"Gebäude: {self.building_name}",
            f"Stockwerke: {len(self.floors)}",
            f"Räume: {self.room_count}",
            f"Lehrveranstaltungen: {len(self.schedules)} pro Woche",
            f"Fundbüro-Einträge: {len(self.lost_items)}" if self.lost_items else "",
        ]
        return "\n".join(l for l in lines if l)
