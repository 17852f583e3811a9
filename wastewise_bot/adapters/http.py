"""Remote key-value backend implementing :class:`~wastewise_bot.core.storage.KeyValueStore`.

The backend talks to a tiny HTTP API with a single resource::

    GET  {base_url}/records   -> the persisted document (404 when empty)
    PUT  {base_url}/records   <- the full document

It uses :mod:`httpx` and keeps the same document format as the file backend.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from ..core.errors import CorruptPersistedState
from ..core.storage import KeyValueStore, decode_document, encode_document

log = logging.getLogger("wastewise.storage.http")


class HTTPKeyValueStore(KeyValueStore):
    """Store that keeps its records behind an HTTP API."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Store the API ``base_url``, optional bearer ``token`` and ``client``."""
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.client = client or httpx.Client(timeout=10.0)

    @property
    def _url(self) -> str:
        return f"{self.base_url}/records"

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    # ------------------------------------------------------------------
    def load(self) -> dict[str, str]:
        """Fetch the remote document.

        A missing document is empty state; a malformed one is logged and
        treated as empty. HTTP errors other than 404 are raised.
        """
        response = self.client.get(self._url, headers=self._headers())
        if response.status_code == 404:
            return {}
        response.raise_for_status()
        try:
            return decode_document(response.json())
        except (ValueError, CorruptPersistedState) as exc:
            log.warning("Ignoring unreadable remote document at %s: %s", self._url, exc)
            return {}

    def save(self, records: Mapping[str, str]) -> None:
        """Replace the remote document with ``records``."""
        response = self.client.put(
            self._url, json=encode_document(records), headers=self._headers()
        )
        response.raise_for_status()

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client`."""
        self.client.close()
