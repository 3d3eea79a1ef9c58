from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional

from models.schedule import to_minutes


# ─── GEBÄUDE ───

class BuildingConfig(BaseModel):
    """Gebäude: Stockwerke, Räume pro Stockwerk, Kapazitäten."""
    # Anzeigename des Gebäudes
    building_name: str = Field("Main Building",
        description="Name des Gebäudes")
    # Präfix der Raumnamen, z.B. "MB" → "MB-101"
    room_prefix: str = Field("MB",
        description="Präfix der Raumnamen")
    # Anzahl Stockwerke (1-basiert durchnummeriert)
    num_floors: int = Field(6, ge=1, le=50,
        description="Anzahl Stockwerke")
    # Räume pro Stockwerk (6 auf jeder Seite des Flurs)
    rooms_per_floor: int = Field(12, ge=1, le=99,
        description="Räume pro Stockwerk")
    # Untere Grenze der zufälligen Raumkapazität
    capacity_min: int = Field(30, ge=1,
        description="Minimale Raumkapazität")
    # Obere Grenze der zufälligen Raumkapazität
    capacity_max: int = Field(49, ge=1,
        description="Maximale Raumkapazität")

    @model_validator(mode='after')
    def validate_capacity_range(self):
        if self.capacity_min > self.capacity_max:
            raise ValueError(
                f"capacity_min ({self.capacity_min}) > capacity_max ({self.capacity_max})")
        return self


# ─── STUNDENPLAN ───

class TimeSlotDef(BaseModel):
    """Ein Zeitfenster im Tagesraster, in dem Veranstaltungen liegen können."""
    # Beginn im Format "HH:MM"
    start_time: str
    # Ende im Format "HH:MM"
    end_time: str

    @model_validator(mode='after')
    def validate_interval(self):
        if to_minutes(self.end_time) <= to_minutes(self.start_time):
            raise ValueError(
                f"Zeitfenster {self.start_time}-{self.end_time}: Ende muss nach Beginn liegen")
        return self


class ScheduleConfig(BaseModel):
    """Parameter für die Erzeugung des Wochenstundenplans."""
    # Unterrichtstage (0=So, 1=Mo, ..., 6=Sa)
    days: list[int] = Field(
        default=[1, 2, 3, 4, 5],
        description="Unterrichtstage (0=So ... 6=Sa)")
    # Zeitfenster pro Tag
    time_slots: list[TimeSlotDef] = Field(
        description="Zeitfenster pro Tag")
    # Kursnamen, aus denen zufällig gezogen wird
    courses: list[str] = Field(
        description="Kursnamen")
    # Lehrende, aus denen zufällig gezogen wird
    instructors: list[str] = Field(
        default=["Dr. Smith"],
        description="Lehrende")
    # Wahrscheinlichkeit, dass ein Zeitfenster belegt ist
    fill_probability: float = Field(0.6, ge=0.0, le=1.0,
        description="Belegungswahrscheinlichkeit pro Zeitfenster")

    @field_validator("days")
    @classmethod
    def validate_days(cls, v: list[int]) -> list[int]:
        for d in v:
            if not 0 <= d <= 6:
                raise ValueError(f"Wochentag {d} ungültig (0=So ... 6=Sa)")
        return sorted(set(v))

    @model_validator(mode='after')
    def validate_pools(self):
        if self.fill_probability > 0 and not self.courses:
            raise ValueError("Mindestens ein Kurs nötig, wenn Zeitfenster belegt werden")
        if self.fill_probability > 0 and not self.instructors:
            raise ValueError("Mindestens eine Lehrkraft nötig")
        return self

    @model_validator(mode='after')
    def validate_unique_slot_starts(self):
        # Kurs-IDs sind {raum}-{tag}-{beginn}
        starts = [s.start_time for s in self.time_slots]
        duplicates = sorted({s for s in starts if starts.count(s) > 1})
        if duplicates:
            raise ValueError(
                f"Zeitfenster mit gleichem Beginn: {', '.join(duplicates)}")
        return self


# ─── SERVICE ───

class ServiceConfig(BaseModel):
    """Laufzeitverhalten des Facility-Service."""
    # Standard-Nutzer für Audit-Einträge
    default_actor: str = Field("Admin",
        description="Standard-Nutzer für Audit-Einträge")
    # Künstliche Verzögerung pro Aufruf in ms (nur Test-Naht, 0 = aus)
    simulated_latency_ms: int = Field(0, ge=0, le=5000,
        description="Künstliche Verzögerung pro Aufruf (ms)")
    # Beispiel-Einträge im Fundbüro anlegen
    seed_lost_items: bool = Field(True,
        description="Beispiel-Einträge im Fundbüro anlegen")


# ─── GESAMT-CONFIG ───

class FacilityConfig(BaseModel):
    """Gesamtkonfiguration."""
    # Gebäude-Konfiguration
    building: BuildingConfig = Field(default_factory=BuildingConfig)
    # Stundenplan-Erzeugung
    schedule: ScheduleConfig
    # Service-Verhalten
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    # Zufalls-Seed für reproduzierbare Startdaten (None = zufällig)
    seed: Optional[int] = Field(42,
        description="Zufalls-Seed für Startdaten")
