"""Gemeinsamer Renderer für die Terminal-Anzeige.

Wird von den CLI-Befehlen `floors`, `room` und `console` verwendet.
Liefert nur Tabellenzeilen; die Darstellung (Rich) macht der Aufrufer.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.status import FloorView
    from models.schedule import ClassSchedule
    from config.schema import ScheduleConfig

STATUS_STYLES = {
    "free": "green",
    "occupied": "red",
    "reserved": "yellow",
}


def status_markup(status: str) -> str:
    """Status als farbiger Rich-Text."""
    style = STATUS_STYLES.get(status, "white")
    return f"[{style}]{status}[/{style}]"


def render_floor_rows(floor: "FloorView") -> list[list[str]]:
    """Gibt Tabellenzeilen für ein Stockwerk zurück.

    Jede Zeile: [id, name, kapazität, status, aktivität, override]
    """
    rows: list[list[str]] = []
    for room in floor.rooms:
        rows.append([
            room.id,
            room.name,
            str(room.capacity),
            status_markup(room.status.value),
            room.current_activity or "—",
            room.manual_override.value if room.manual_override else "",
        ])
    return rows


def render_week_rows(
    schedules: list["ClassSchedule"],
    schedule_config: "ScheduleConfig",
) -> list[list[str]]:
    """Gibt Tabellenzeilen für den Wochenplan eines Raums zurück.

    Jede Zeile: [zeitfenster, tag_1, tag_2, ...] in der Reihenfolge von
    `schedule_config.days`. Veranstaltungen außerhalb des Rasters erscheinen
    in eigenen Zeilen.
    """
    days = schedule_config.days
    windows = [(s.start_time, s.end_time) for s in schedule_config.time_slots]
    for s in schedules:
        if (s.start_time, s.end_time) not in windows:
            windows.append((s.start_time, s.end_time))
    windows.sort()

    slot_map: dict = {
        (s.day_of_week, s.start_time, s.end_time): s for s in schedules
    }
    rows: list[list[str]] = []
    for start, end in windows:
        cells = [f"{start}–{end}"]
        for day in days:
            entry = slot_map.get((day, start, end))
            if entry is None:
                cells.append("—")
            else:
                cells.append(f"{entry.course_name}\n{entry.instructor}")
        rows.append(cells)
    return rows
