"""Persistenz-Schnittstelle (get/put/list pro Entitätstyp).

Die Stores der Engine arbeiten ausschließlich gegen `Repository`. Die
mitgelieferte Implementierung hält alles im Speicher (Lebensdauer = Prozess);
ein dauerhaftes Backend kann ohne Änderung an Resolver oder Service
eingesetzt werden.
"""

import threading
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class Repository(ABC, Generic[T]):
    """Minimale Speicherschnittstelle. Schlüssel ist immer `item.id`."""

    @abstractmethod
    def get(self, item_id: str) -> Optional[T]:
        ...

    @abstractmethod
    def put(self, item: T) -> None:
        """Legt an oder ersetzt (gleiche ID behält ihre Position)."""

    @abstractmethod
    def list(self) -> list[T]:
        """Alle Einträge in Einfügereihenfolge (älteste zuerst)."""


class InMemoryRepository(Repository[T]):
    """Dict-basiertes Repository. Gibt stets tiefe Kopien heraus."""

    def __init__(self, items: Optional[list[T]] = None) -> None:
        self._items: dict[str, T] = {}
        self._lock = threading.RLock()
        for item in items or []:
            self.put(item)

    def get(self, item_id: str) -> Optional[T]:
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy(deep=True) if item is not None else None

    def put(self, item: T) -> None:
        with self._lock:
            self._items[item.id] = item.model_copy(deep=True)

    def list(self) -> list[T]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"InMemoryRepository({len(self._items)} items)"
