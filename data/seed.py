"""Startdaten-Generator für das Gebäude.

Erzeugt die feste Raummenge pro Stockwerk, einen zufälligen (aber per Seed
reproduzierbaren) Wochenstundenplan und optional Beispiel-Einträge im
Fundbüro.

Raum-IDs:   f{stockwerk}-r{nr}          z.B. "f1-r1"
Raumnamen:  {präfix}-{stockwerk}{nr:02} z.B. "MB-101"
Kurs-IDs:   {raum}-{tag}-{beginn}       z.B. "f1-r1-1-08:00"
"""

import random
from datetime import datetime, timedelta
from typing import Optional

from config.schema import FacilityConfig
from config.defaults import SAMPLE_LOST_ITEMS
from models.room import Floor, Room
from models.schedule import ClassSchedule
from models.lost_item import ItemKind, LostItem
from models.facility_data import FacilityData
from engine.schedule_store import make_schedule


class FacilityDataGenerator:
    """Generiert den Start-Datensatz auf Basis der FacilityConfig."""

    def __init__(self, config: FacilityConfig, seed: Optional[int] = None) -> None:
        self.config = config
        self.rng = random.Random(config.seed if seed is None else seed)

    # ─── Räume ────────────────────────────────────────────────────────────────

    def _generate_rooms(self, floor: int) -> list[Room]:
        bc = self.config.building
        rooms = []
        for i in range(1, bc.rooms_per_floor + 1):
            rooms.append(Room(
                id=f"f{floor}-r{i}",
                name=f"{bc.room_prefix}-{floor}{i:02d}",
                floor=floor,
                capacity=self.rng.randint(bc.capacity_min, bc.capacity_max),
            ))
        return rooms

    def _generate_floors(self) -> list[Floor]:
        return [
            Floor(floor_number=n, rooms=self._generate_rooms(n))
            for n in range(1, self.config.building.num_floors + 1)
        ]

    # ─── Stundenplan ──────────────────────────────────────────────────────────

    def _generate_schedules(self, floors: list[Floor]) -> list[ClassSchedule]:
        """Belegt jedes Zeitfenster mit Wahrscheinlichkeit `fill_probability`."""
        sc = self.config.schedule
        schedules = []
        for floor in floors:
            for room in floor.rooms:
                for day in sc.days:
                    for slot in sc.time_slots:
                        if self.rng.random() >= sc.fill_probability:
                            continue
                        schedules.append(make_schedule(
                            id=f"{room.id}-{day}-{slot.start_time}",
                            room_id=room.id,
                            course_name=self.rng.choice(sc.courses),
                            instructor=self.rng.choice(sc.instructors),
                            day_of_week=day,
                            start_time=slot.start_time,
                            end_time=slot.end_time,
                        ))
        return schedules

    # ─── Fundbüro ─────────────────────────────────────────────────────────────

    def _generate_lost_items(self, now: datetime) -> list[LostItem]:
        if not self.config.service.seed_lost_items:
            return []
        items = []
        for i, sample in enumerate(SAMPLE_LOST_ITEMS, start=1):
            items.append(LostItem(
                id=f"lf-seed-{i:02d}",
                kind=ItemKind(sample["kind"]),
                item_name=sample["item_name"],
                description=sample["description"],
                location=sample["location"],
                contact_info=sample["contact_info"],
                reported_at=now - timedelta(days=sample["age_days"]),
            ))
        return items

    # ─── Gesamt ───────────────────────────────────────────────────────────────

    def generate(self, now: Optional[datetime] = None) -> FacilityData:
        """Erzeugt den vollständigen Datensatz."""
        now = now or datetime.now().astimezone()
        floors = self._generate_floors()
        return FacilityData(
            building_name=self.config.building.building_name,
            floors=floors,
            schedules=self._generate_schedules(floors),
            lost_items=self._generate_lost_items(now),
        )

    # ─── Ausgabe ──────────────────────────────────────────────────────────────

    def print_summary(self, data: FacilityData) -> None:
        """Gibt eine Rich-Tabelle mit Übersicht der erzeugten Daten aus."""
        from rich.console import Console
        from rich.table import Table
        from rich import box

        console = Console()
        table = Table(title="Erzeugte Startdaten", box=box.ROUNDED)
        table.add_column("Kategorie", style="bold cyan")
        table.add_column("Anzahl", justify="right")
        table.add_column("Details")

        table.add_row("Stockwerke", str(len(data.floors)), data.building_name)
        table.add_row("Räume", str(data.room_count),
                      f"{self.config.building.rooms_per_floor} pro Stockwerk")
        table.add_row("Lehrveranstaltungen", str(len(data.schedules)),
                      f"{len(self.config.schedule.days)} Tage × "
                      f"{len(self.config.schedule.time_slots)} Zeitfenster")
        table.add_row("Fundbüro", str(len(data.lost_items)), "")

        console.print(table)
