"""Failure values returned by the stores.

None of these terminate anything: callers receive them in place of a result
and show ``message`` to the user.
"""

from __future__ import annotations

from dataclasses import dataclass


class CorruptPersistedState(ValueError):
    """Raised while decoding a persisted record that cannot be understood.

    Stores catch this and fall back to empty state; it never reaches callers.
    """


@dataclass(frozen=True)
class DuplicateEmail:
    email: str

    @property
    def message(self) -> str:
        return "An account with that email already exists."


@dataclass(frozen=True)
class InvalidCredentials:
    @property
    def message(self) -> str:
        return "Invalid email or password."


@dataclass(frozen=True)
class ValidationFailure:
    """Lists every missing or invalid field of a rejected submission."""

    fields: tuple[str, ...]

    @property
    def message(self) -> str:
        return "Missing or invalid: " + ", ".join(self.fields) + "."


AuthFailure = DuplicateEmail | InvalidCredentials
