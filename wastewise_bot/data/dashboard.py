"""Shared stores plus one session slot per presentation client."""

from __future__ import annotations

import asyncio
import datetime
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.models import DEFAULT_COMMUNITY, SessionProfile
from ..core.storage import KeyValueStore
from .credentials import CredentialStore
from .waste_log import WasteLogStore, utc_today

T = TypeVar("T")


class Dashboard:
    """Entry point used by the bot.

    Each client (a Discord user) gets its own :class:`CredentialStore` whose
    session is kept under a key scoped to the client, so several people can
    be logged in at once over the same user and log records.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        default_community: str = DEFAULT_COMMUNITY,
        today: Callable[[], datetime.date] = utc_today,
    ) -> None:
        self.storage = storage
        self.default_community = default_community
        self.today = today
        self.logs = WasteLogStore(storage, today=today)
        self._credentials: dict[str, CredentialStore] = {}
        self._lock = threading.Lock()

    async def run(self, func: Callable[..., T], *args: Any) -> T:
        """Run a blocking store or aggregator call off the event loop.

        Calls are serialised, so store mutations never interleave even though
        they execute on worker threads.
        """
        return await asyncio.to_thread(self._locked, func, *args)

    def _locked(self, func: Callable[..., T], *args: Any) -> T:
        with self._lock:
            return func(*args)

    def credentials_for(self, client_id: int | str) -> CredentialStore:
        key = str(client_id)
        if key not in self._credentials:
            self._credentials[key] = CredentialStore(
                self.storage,
                session_scope=key,
                default_community=self.default_community,
            )
        return self._credentials[key]

    def session_for(self, client_id: int | str) -> SessionProfile | None:
        return self.credentials_for(client_id).current
