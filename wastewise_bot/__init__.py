"""Core package for Wastewise.

This module exposes the data models, the persistence layer and the stores so
that consumers of the package can simply import them from ``wastewise_bot``.
"""

from .core.models import Category, SessionProfile, UserRecord, WasteLogEntry
from .core.storage import JSONFileStore, KeyValueStore, MemoryStore
from .data.credentials import CredentialStore
from .data.waste_log import WasteLogStore

__all__ = [
    "Category",
    "SessionProfile",
    "UserRecord",
    "WasteLogEntry",
    "JSONFileStore",
    "KeyValueStore",
    "MemoryStore",
    "CredentialStore",
    "WasteLogStore",
]
