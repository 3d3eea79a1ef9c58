"""Fehlertypen der Status-Engine.

Alle Fehler werden an den direkten Aufrufer weitergereicht. Die Engine
wiederholt nichts, verschluckt nichts und loggt keine Fehler – was der
Nutzer zu sehen bekommt, entscheidet die Präsentationsschicht (CLI).
"""

from enum import Enum
from typing import TypeVar, Union

E = TypeVar("E", bound=Enum)


class FacilityError(Exception):
    """Basisklasse aller Engine-Fehler."""


class NotFoundError(FacilityError):
    """Eine Operation referenziert eine unbekannte ID."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' nicht gefunden")


class InvalidArgumentError(FacilityError):
    """Wert außerhalb einer Aufzählung oder Feld-Invariante verletzt."""


class ConflictError(FacilityError):
    """Reserviert für konkurrierende Änderungen.

    Wird derzeit nie ausgelöst: Schreibzugriffe sind pro Store serialisiert.
    """


def parse_choice(enum_cls: type[E], value: Union[E, str], field: str) -> E:
    """Wandelt einen Rohwert in ein Enum-Mitglied um.

    Unbekannte Werte werden NICHT umgedeutet, sondern abgelehnt.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise InvalidArgumentError(
            f"Ungültiger Wert für {field}: {value!r} (erlaubt: {allowed})"
        ) from None
