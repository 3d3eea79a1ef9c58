from config.schema import (
    BuildingConfig,
    FacilityConfig,
    ScheduleConfig,
    ServiceConfig,
    TimeSlotDef,
)


COURSES = [
    "Data Structures",
    "Web Dev",
    "Calculus",
    "Physics",
    "History",
    "Ethics",
    "Networking",
]

INSTRUCTORS = [
    "Dr. Smith",
    "Prof. Reyes",
    "Dr. Santos",
    "Prof. Garcia",
    "Dr. Mendoza",
]

# Beispiel-Einträge für das Fundbüro (Alter in Tagen)
SAMPLE_LOST_ITEMS = [
    {
        "kind": "lost",
        "item_name": "Calculus Textbook",
        "description": "Hardcover, slightly worn.",
        "location": "3rd Floor Hallway",
        "contact_info": "student@dlsl.edu.ph",
        "age_days": 1,
    },
    {
        "kind": "found",
        "item_name": "Blue Umbrella",
        "description": "Found under a chair near the back.",
        "location": "MB-102",
        "contact_info": "Turned over to guard",
        "age_days": 0,
    },
]


def default_time_slots() -> list[TimeSlotDef]:
    """Standard-Tagesraster.

    1. Block  08:00 - 09:30
    2. Block  10:00 - 11:30
       ── Mittagspause ──
    3. Block  13:00 - 14:30
    4. Block  15:00 - 16:30
    """
    return [
        TimeSlotDef(start_time="08:00", end_time="09:30"),
        TimeSlotDef(start_time="10:00", end_time="11:30"),
        TimeSlotDef(start_time="13:00", end_time="14:30"),
        TimeSlotDef(start_time="15:00", end_time="16:30"),
    ]


def default_schedule() -> ScheduleConfig:
    """Mo–Fr, vier Blöcke pro Tag, ca. 60 % belegt."""
    return ScheduleConfig(
        days=[1, 2, 3, 4, 5],
        time_slots=default_time_slots(),
        courses=list(COURSES),
        instructors=list(INSTRUCTORS),
        fill_probability=0.6,
    )


def default_facility_config() -> FacilityConfig:
    """Vollständige Standard-Konfiguration: 6 Stockwerke × 12 Räume."""
    return FacilityConfig(
        building=BuildingConfig(),
        schedule=default_schedule(),
        service=ServiceConfig(),
        seed=42,
    )
