"""Key-value persistence for Wastewise records.

Every backend stores one document::

    {"schema_version": 1, "records": {"<key>": "<json encoded value>", ...}}

The stores above this layer only ever see the ``records`` mapping, so the
medium (memory, a JSON file, a remote API) can be swapped freely.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import CorruptPersistedState

SCHEMA_VERSION = 1

log = logging.getLogger("wastewise.storage")


def encode_document(records: Mapping[str, str]) -> dict[str, Any]:
    return {"schema_version": SCHEMA_VERSION, "records": dict(records)}


def decode_document(data: Any) -> dict[str, str]:
    """Return the ``records`` mapping of a persisted document.

    Raises :class:`CorruptPersistedState` if the document has the wrong shape
    or an unknown schema version.
    """
    if not isinstance(data, dict):
        raise CorruptPersistedState("document is not an object")
    if data.get("schema_version") != SCHEMA_VERSION:
        raise CorruptPersistedState(
            f"unsupported schema version {data.get('schema_version')!r}"
        )
    records = data.get("records", {})
    if not isinstance(records, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in records.items()
    ):
        raise CorruptPersistedState("records must map strings to strings")
    return records


class KeyValueStore(ABC):
    """Abstract string-keyed store of JSON-encoded values."""

    @abstractmethod
    def load(self) -> dict[str, str]:
        """Return every stored record. Unreadable state yields ``{}``."""

    @abstractmethod
    def save(self, records: Mapping[str, str]) -> None:
        """Replace the stored records with ``records``."""

    # ------------------------------------------------------------------
    # Helpers built on load/save
    def get(self, key: str) -> str | None:
        return self.load().get(key)

    def update(self, changes: Mapping[str, str | None]) -> None:
        """Apply several writes in a single ``save``.

        A value of ``None`` removes the key.
        """
        records = self.load()
        for key, value in changes.items():
            if value is None:
                records.pop(key, None)
            else:
                records[key] = value
        self.save(records)


class MemoryStore(KeyValueStore):
    """Store that lives only as long as the process."""

    def __init__(self, records: Mapping[str, str] | None = None) -> None:
        self._records: dict[str, str] = dict(records or {})

    def load(self) -> dict[str, str]:
        return dict(self._records)

    def save(self, records: Mapping[str, str]) -> None:
        self._records = dict(records)


class JSONFileStore(KeyValueStore):
    """Persist records to a single JSON file.

    The file is rewritten on every save through a temporary file and
    :func:`os.replace`, so a reader never sees a half-written document.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            return decode_document(json.loads(self.path.read_text(encoding="utf-8")))
        except ValueError as exc:  # covers UnicodeDecodeError and CorruptPersistedState
            log.warning("Ignoring unreadable store file %s: %s", self.path, exc)
            return {}

    def save(self, records: Mapping[str, str]) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(encode_document(records), f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)
