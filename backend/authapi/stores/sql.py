# authapi/stores/sql.py
"""
Relational user store backed by Tortoise ORM (MySQL, PostgreSQL or SQLite).
"""
import logging

from tortoise.exceptions import IntegrityError

from authapi.core.db import init_db, close_db
from authapi.models.user import User
from authapi.schemas.user import StoredUser
from authapi.stores.base import DuplicateEmailError, UserStore

logger = logging.getLogger("uvicorn.error")


def _to_stored(user: User) -> StoredUser:
    return StoredUser(
        id=str(user.id),
        username=user.username,
        email=user.email,
        password_hash=user.password_hash,
    )


class TortoiseUserStore(UserStore):
    def __init__(self, db_url: str, generate_schemas: bool = False):
        self.db_url = db_url
        self.generate_schemas = generate_schemas

    async def connect(self) -> None:
        await init_db(self.db_url, generate_schemas=self.generate_schemas)
        # Tortoise connects lazily; run a query so a bad URL fails at startup
        await User.all().limit(1)
        logger.info("[store] SQL user store connected")

    async def close(self) -> None:
        await close_db()
        logger.info("[store] SQL user store closed")

    async def find_by_email(self, email: str) -> StoredUser | None:
        user = await User.get_or_none(email=email)
        return _to_stored(user) if user else None

    async def insert_user(self, username: str, email: str, password_hash: str) -> StoredUser:
        try:
            user = await User.create(username=username, email=email, password_hash=password_hash)
        except IntegrityError as exc:
            raise DuplicateEmailError(email) from exc
        return _to_stored(user)
