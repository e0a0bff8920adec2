"""Credential Store - guarded signup and login over the users collection.

Invariants:
    - signup holds the guard in exclusive mode across check-then-insert,
      so two concurrent signups for one username cannot both pass the check
    - login is read-only and holds the guard in shared mode
    - Passwords are compared verbatim (plaintext; known weakness)
"""

import asyncio
import logging
from typing import Any

from blog_api.core.errors import InvalidCredentialsError, UsernameTakenError
from blog_api.core.guard import CollectionGuard
from blog_api.core.repository_protocols import DocumentCollection
from blog_api.schemas.user import Credentials
from blog_api.services.decode_payload import decode_payload

logger = logging.getLogger(__name__)


class CredentialStore:
    """Owns the users collection and its guard."""

    def __init__(self, collection: DocumentCollection):
        self._collection = collection
        self._guard = CollectionGuard()

    @property
    def guard(self) -> CollectionGuard:
        return self._guard

    async def signup(self, credentials: Any) -> None:
        decoded = decode_payload(Credentials, credentials)
        await asyncio.shield(self._signup(decoded))

    async def login(self, credentials: Any) -> None:
        decoded = decode_payload(Credentials, credentials)
        async with self._guard.shared():
            match = await self._collection.find_one(
                {"username": decoded.username, "password": decoded.password},
            )
        if match is None:
            logger.warning("Login rejected", extra={"username": decoded.username})
            raise InvalidCredentialsError()
        logger.info("Login accepted", extra={"username": decoded.username})

    async def _signup(self, credentials: Credentials) -> None:
        async with self._guard.exclusive():
            existing = await self._collection.find_one(
                {"username": credentials.username},
            )
            if existing is not None:
                logger.warning(
                    "Signup rejected: username taken",
                    extra={"username": credentials.username},
                )
                raise UsernameTakenError(credentials.username)
            await self._collection.insert({
                "username": credentials.username,
                "password": credentials.password,
            })
        logger.info("User created", extra={"username": credentials.username})
