"""Account records and the active session."""

from __future__ import annotations

import logging

from ..core.errors import DuplicateEmail, InvalidCredentials
from ..core.models import DEFAULT_COMMUNITY, SessionProfile, UserRecord
from ..core.storage import KeyValueStore
from .records import SESSION_KEY, USERS_KEY, decode_list, decode_object, encode_list, encode_object

log = logging.getLogger("wastewise.credentials")


class CredentialStore:
    """Signup, login and session handling over a :class:`KeyValueStore`.

    Passwords are stored and compared as plaintext; this is a local stand-in
    for a real identity service, not a security boundary.

    ``session_scope`` gives a client its own session slot
    (``wasteManager_user:<scope>``) while the user records stay shared.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        session_scope: str | None = None,
        default_community: str = DEFAULT_COMMUNITY,
    ) -> None:
        self.storage = storage
        self.session_key = f"{SESSION_KEY}:{session_scope}" if session_scope else SESSION_KEY
        self.default_community = default_community
        self.current: SessionProfile | None = None
        self.restore_session()

    def users(self) -> list[UserRecord]:
        return decode_list(self.storage.get(USERS_KEY), UserRecord, USERS_KEY)

    # ------------------------------------------------------------------
    def signup(
        self, name: str, email: str, password: str, community: str | None = None
    ) -> SessionProfile | DuplicateEmail:
        users = self.users()
        if any(u.email == email for u in users):
            return DuplicateEmail(email)

        record = UserRecord(
            name=name,
            email=email,
            password=password,
            community=community or self.default_community,
        )
        users.append(record)
        profile = record.profile()
        # users and session are written in one save
        self.storage.update(
            {USERS_KEY: encode_list(users), self.session_key: encode_object(profile)}
        )
        self.current = profile
        log.info("Created account %s", record.id)
        return profile

    def login(self, email: str, password: str) -> SessionProfile | InvalidCredentials:
        found = next(
            (u for u in self.users() if u.email == email and u.password == password),
            None,
        )
        if found is None:
            return InvalidCredentials()
        profile = found.profile()
        self.storage.update({self.session_key: encode_object(profile)})
        self.current = profile
        log.info("User %s logged in", profile.id)
        return profile

    def logout(self) -> None:
        self.current = None
        self.storage.update({self.session_key: None})

    def restore_session(self) -> SessionProfile | None:
        """Rehydrate the active session from storage, trusting it as-is."""
        self.current = decode_object(
            self.storage.get(self.session_key), SessionProfile, self.session_key
        )
        return self.current
