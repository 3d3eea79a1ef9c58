"""Fundbüro: gebäudeweite Verlust- und Fundmeldungen (open → resolved)."""

import logging
import threading
from typing import Optional, Union

from models.lost_item import ItemKind, ItemStatus, LostItem
from engine.clock import Clock, SystemClock
from engine.errors import NotFoundError, parse_choice
from engine.ids import IdSequence, MonotonicStamp
from engine.repository import InMemoryRepository, Repository

logger = logging.getLogger(__name__)


class LostAndFoundRegistry:

    def __init__(
        self,
        repository: Optional[Repository[LostItem]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._repo: Repository[LostItem] = repository or InMemoryRepository()
        self._lock = threading.RLock()
        self._ids = IdSequence("lf")
        self._stamps = MonotonicStamp(clock or SystemClock())

    def seed(self, items: list[LostItem]) -> None:
        """Übernimmt bestehende Einträge (älteste zuerst)."""
        with self._lock:
            for item in sorted(items, key=lambda i: i.reported_at):
                self._repo.put(item)
                self._stamps.observe(item.reported_at)

    def list(self, kind: Union[ItemKind, str, None] = None) -> list[LostItem]:
        """Alle Einträge, neueste zuerst; optional nur `lost` oder `found`."""
        wanted = None if kind is None else parse_choice(ItemKind, kind, "Meldungsart")
        with self._lock:
            items = self._repo.list()
        return [i for i in reversed(items) if wanted is None or i.kind == wanted]

    def report(
        self,
        kind: Union[ItemKind, str],
        item_name: str,
        description: str,
        location: str,
        contact_info: str,
    ) -> LostItem:
        """Legt einen neuen Eintrag im Status `open` an."""
        item_kind = parse_choice(ItemKind, kind, "Meldungsart")
        with self._lock:
            item = LostItem(
                id=self._ids.next(),
                kind=item_kind,
                item_name=item_name,
                description=description,
                location=location,
                contact_info=contact_info,
                status=ItemStatus.OPEN,
                reported_at=self._stamps.next(),
            )
            self._repo.put(item)
        logger.info(f"Fundbüro {item.id}: {item_kind.value} '{item_name}'")
        return item

    def resolve(self, item_id: str) -> LostItem:
        """Markiert einen Eintrag als erledigt. Mehrfacher Aufruf ist ein No-op."""
        with self._lock:
            item = self._repo.get(item_id)
            if item is None:
                raise NotFoundError("Fundbüro-Eintrag", item_id)
            if item.status == ItemStatus.RESOLVED:
                return item
            item = item.model_copy(update={"status": ItemStatus.RESOLVED})
            self._repo.put(item)
        logger.info(f"Fundbüro {item_id}: erledigt")
        return item
