"""Datenmodell für wiederkehrende Lehrveranstaltungen (Pydantic v2)."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

# 0=Sonntag (wie JavaScript Date.getDay), nicht 0=Montag wie im Zeitraster
DAY_NAMES = ["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"]


def to_minutes(value: str) -> int:
    """Wandelt "HH:MM" in Minuten seit Mitternacht um."""
    match = _TIME_RE.match(value)
    if match is None:
        raise ValueError(f"Ungültige Uhrzeit '{value}' (erwartet HH:MM)")
    return int(match.group(1)) * 60 + int(match.group(2))


class ClassSchedule(BaseModel):
    """Eine wöchentlich wiederkehrende Lehrveranstaltung in einem Raum.

    Unveränderlich nach dem Anlegen. Das Intervall ist halboffen:
    [start_time, end_time).
    """

    model_config = ConfigDict(frozen=True)

    id: str                                  # "f1-r1-1-08:00"
    room_id: str
    course_name: str
    instructor: str
    day_of_week: int = Field(ge=0, le=6)     # 0=So, 1=Mo, ..., 6=Sa
    start_time: str                          # "HH:MM", 24h
    end_time: str                            # "HH:MM", 24h

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time_format(cls, v: str) -> str:
        to_minutes(v)
        return v

    @model_validator(mode="after")
    def _check_interval(self):
        if self.end_minutes <= self.start_minutes:
            raise ValueError(
                f"Ende ({self.end_time}) muss nach Beginn ({self.start_time}) liegen"
            )
        return self

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]

    def covers(self, day_of_week: int, minutes: int) -> bool:
        """True wenn die Veranstaltung an diesem Tag zu dieser Minute läuft."""
        return (
            self.day_of_week == day_of_week
            and self.start_minutes <= minutes < self.end_minutes
        )
