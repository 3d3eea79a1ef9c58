"""Statusauflösung: Override vs. Stundenplan.

Reihenfolge (erster Treffer gewinnt):
1. Manueller Override des Raums
2. Laufende Lehrveranstaltung (gleicher Wochentag, start <= jetzt < ende)
3. Frei

Reine Funktion ohne Seiteneffekte – gleiche Eingaben, gleiches Ergebnis.
"""

from datetime import datetime
from typing import Iterable, Optional

from models.room import Room, RoomStatus
from models.schedule import ClassSchedule
from models.status import EffectiveStatus, MANUAL_OVERRIDE_LABEL


def day_of_week(moment: datetime) -> int:
    """Wochentag mit 0=Sonntag … 6=Samstag."""
    return moment.isoweekday() % 7


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def find_active_schedule(
    room: Room,
    schedules: Iterable[ClassSchedule],
    now: datetime,
) -> Optional[ClassSchedule]:
    """Gibt die Veranstaltung zurück, die zum Zeitpunkt `now` im Raum läuft.

    Bei Überschneidungen gewinnt der früheste Beginn, danach die kleinste ID.
    Eine Überschneidung ist kein Fehler.
    """
    day = day_of_week(now)
    minutes = minutes_of_day(now)
    candidates = [
        s for s in schedules
        if s.room_id == room.id and s.covers(day, minutes)
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda s: (s.start_minutes, s.id))


def resolve(
    room: Room,
    schedules: Iterable[ClassSchedule],
    now: datetime,
) -> EffectiveStatus:
    """Berechnet den effektiven Status eines Raums zum Zeitpunkt `now`."""
    if room.manual_override is not None:
        label = (
            MANUAL_OVERRIDE_LABEL
            if room.manual_override == RoomStatus.OCCUPIED
            else None
        )
        return EffectiveStatus(status=room.manual_override,
                               current_activity=label)

    active = find_active_schedule(room, schedules, now)
    if active is not None:
        return EffectiveStatus(status=RoomStatus.OCCUPIED,
                               current_activity=active.course_name)

    return EffectiveStatus(status=RoomStatus.FREE)
