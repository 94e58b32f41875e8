# authapi/stores/base.py
"""
Credential store boundary.

A UserStore holds user records keyed by email. Implementations are created
explicitly at startup, connected once, shared by all requests and closed on
shutdown.
"""
from abc import ABC, abstractmethod

from authapi.schemas.user import StoredUser


class UserStoreError(Exception):
    """Base class for errors a store raises on purpose."""


class DuplicateEmailError(UserStoreError):
    """The store's unique constraint on email rejected an insert."""


class UserStore(ABC):
    """Lookup by email and insert of new users."""

    @abstractmethod
    async def connect(self) -> None:
        """Open connections; raise if the database is unreachable."""

    @abstractmethod
    async def close(self) -> None:
        """Release connections."""

    @abstractmethod
    async def find_by_email(self, email: str) -> StoredUser | None:
        """Return the user with exactly this email, or None."""

    @abstractmethod
    async def insert_user(self, username: str, email: str, password_hash: str) -> StoredUser:
        """
        Persist a new user and return it with its store-assigned id.

        Raises:
            DuplicateEmailError: If another user already has this email
        """
