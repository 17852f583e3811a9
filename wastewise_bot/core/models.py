"""Data models for Wastewise's core entities.

The models are implemented using :mod:`pydantic` so that they provide
runtime validation and convenient serialisation to and from dictionaries.
Serialised field names keep the camelCase keys used by the persisted records
(``itemName``, ``userId``) while the Python attributes are snake_case.
"""

from __future__ import annotations

import datetime
import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_COMMUNITY = "EcoVille"


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


class Category(str, Enum):
    """Closed classification of waste."""

    RECYCLABLE = "Recyclable"
    COMPOSTABLE = "Compostable"
    LANDFILL = "Landfill"


class Record(BaseModel):
    """Base for models persisted as JSON records."""

    model_config = ConfigDict(populate_by_name=True)

    def to_record(self) -> dict:
        """Dump using the persisted (aliased) field names."""
        return self.model_dump(mode="json", by_alias=True)


class SessionProfile(Record):
    """Who is currently logged in. Never carries the password."""

    id: str
    name: str
    email: str
    community: str = DEFAULT_COMMUNITY


class UserRecord(Record):
    """A stored account.

    Attributes
    ----------
    id:
        Opaque unique identifier, a random UUID4 hex string by default.
    name:
        Display name.
    email:
        Login identity; unique across all records (exact match).
    password:
        Stored and compared as plaintext.
    community:
        Community the user belongs to.

    """

    id: str = Field(default_factory=new_id)
    name: str
    email: str
    password: str
    community: str = DEFAULT_COMMUNITY

    def profile(self) -> SessionProfile:
        return SessionProfile(
            id=self.id, name=self.name, email=self.email, community=self.community
        )


class WasteLogEntry(Record):
    """One logged waste item. Entries are immutable once created."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=new_id)
    date: datetime.date
    category: Category
    item_name: str = Field(alias="itemName", min_length=1)
    quantity: int = Field(ge=1)
    user_id: str = Field(alias="userId")


class DayBucket(BaseModel):
    """Per-category quantities logged on a single calendar day."""

    date: datetime.date
    label: str
    recyclable: int = 0
    compostable: int = 0
    landfill: int = 0

    @property
    def total(self) -> int:
        return self.recyclable + self.compostable + self.landfill

    def amount(self, category: Category) -> int:
        return getattr(self, category.name.lower())


class CategoryTotal(BaseModel):
    category: Category
    total: int


class SummaryStats(BaseModel):
    total_items: int = 0
    recyclable_pct: int = 0
    compostable_pct: int = 0
    landfill_pct: int = 0


class WeeklyTrend(BaseModel):
    """Week-over-week comparison of logged quantities.

    ``reduction_pct`` is positive when less waste was logged this week than
    the week before, negative when more was logged, and ``None`` when there is
    no previous week to compare against.
    """

    this_week: int
    last_week: int
    reduction_pct: int | None = None
