"""Encoding of model collections into key-value records."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import CorruptPersistedState
from ..core.models import Record

SESSION_KEY = "wasteManager_user"
USERS_KEY = "wasteManager_users"
LOGS_KEY = "wasteManager_logs"

M = TypeVar("M", bound=BaseModel)

log = logging.getLogger("wastewise.records")


def encode_list(items: Iterable[Record]) -> str:
    return json.dumps([item.to_record() for item in items])


def encode_object(item: Record) -> str:
    return json.dumps(item.to_record())


def _parse(raw: str, model: type[M], many: bool) -> M | list[M]:
    try:
        data = json.loads(raw)
        if many:
            if not isinstance(data, list):
                raise CorruptPersistedState("expected a JSON array")
            return [model.model_validate(item) for item in data]
        return model.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise CorruptPersistedState(str(exc)) from exc


def decode_list(raw: str | None, model: type[M], key: str) -> list[M]:
    """Decode a JSON array record; absent or corrupt records yield ``[]``."""
    if raw is None:
        return []
    try:
        return _parse(raw, model, many=True)
    except CorruptPersistedState as exc:
        log.warning(
            "Record %r is corrupt, treating it as empty; the next write replaces it: %s",
            key,
            exc,
        )
        return []


def decode_object(raw: str | None, model: type[M], key: str) -> M | None:
    """Decode a JSON object record; absent or corrupt records yield ``None``."""
    if raw is None:
        return None
    try:
        return _parse(raw, model, many=False)
    except CorruptPersistedState as exc:
        log.warning("Record %r is corrupt, treating it as absent: %s", key, exc)
        return None
