"""Append-only log of waste entries."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable
from datetime import UTC

from ..core.errors import ValidationFailure
from ..core.models import Category, WasteLogEntry
from ..core.storage import KeyValueStore
from .records import LOGS_KEY, decode_list, encode_list

log = logging.getLogger("wastewise.waste_log")


def utc_today() -> datetime.date:
    """Calendar date in UTC, used to stamp entries and anchor the weekly windows."""
    return datetime.datetime.now(tz=UTC).date()


class WasteLogStore:
    """Persist :class:`WasteLogEntry` items. There is no update or delete."""

    def __init__(
        self,
        storage: KeyValueStore,
        today: Callable[[], datetime.date] = utc_today,
    ) -> None:
        self.storage = storage
        self.today = today

    def append(
        self,
        category: Category | str,
        item_name: str,
        quantity: int,
        owner_user_id: str,
    ) -> WasteLogEntry | ValidationFailure:
        """Log an item dated today, or report every invalid field."""
        invalid: list[str] = []
        try:
            category = Category(category)
        except ValueError:
            invalid.append("category")
        if not isinstance(item_name, str) or not item_name.strip():
            invalid.append("itemName")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            invalid.append("quantity")
        if not owner_user_id:
            invalid.append("userId")
        if invalid:
            return ValidationFailure(tuple(invalid))

        entry = WasteLogEntry(
            date=self.today(),
            category=category,
            item_name=item_name.strip(),
            quantity=quantity,
            user_id=owner_user_id,
        )
        entries = self.list_all()
        entries.append(entry)
        self.storage.update({LOGS_KEY: encode_list(entries)})
        log.debug("Logged %s x%d (%s) for %s", entry.item_name, quantity, category.value, owner_user_id)
        return entry

    def list_all(self) -> list[WasteLogEntry]:
        """Return every stored entry in insertion order."""
        return decode_list(self.storage.get(LOGS_KEY), WasteLogEntry, LOGS_KEY)

    def list_for_user(self, user_id: str) -> list[WasteLogEntry]:
        return [e for e in self.list_all() if e.user_id == user_id]

    def count_for_user(self, user_id: str) -> int:
        return len(self.list_for_user(user_id))

    def recent(self, user_id: str, limit: int = 5) -> list[WasteLogEntry]:
        """Newest-dated entries first; same-day entries keep insertion order."""
        entries = sorted(self.list_for_user(user_id), key=lambda e: e.date, reverse=True)
        return entries[:limit]
