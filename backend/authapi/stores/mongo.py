# authapi/stores/mongo.py
"""
Document user store backed by MongoDB through PyMongo's asyncio client.

Document shape:
{"_id": ObjectId, "username": str, "email": str, "password": <bcrypt hash>}
"""
import logging
from typing import Any, Callable

from pymongo import AsyncMongoClient
from pymongo.errors import DuplicateKeyError

from authapi.schemas.user import StoredUser
from authapi.stores.base import DuplicateEmailError, UserStore

logger = logging.getLogger("uvicorn.error")


def _to_stored(doc: dict) -> StoredUser:
    return StoredUser(
        id=str(doc["_id"]),
        username=doc["username"],
        email=doc["email"],
        password_hash=doc["password"],
    )


class MongoUserStore(UserStore):
    def __init__(
        self,
        uri: str,
        database: str,
        collection: str = "users",
        client_factory: Callable[[str], Any] = AsyncMongoClient,
    ):
        self.uri = uri
        self.database = database
        self.collection_name = collection
        self._client_factory = client_factory
        self._client = None
        self._collection = None

    @property
    def collection(self):
        if self._collection is None:
            raise RuntimeError("MongoUserStore is not connected")
        return self._collection

    async def connect(self) -> None:
        self._client = self._client_factory(self.uri)
        # The client connects lazily; ping so an unreachable cluster fails at startup
        await self._client.admin.command("ping")
        self._collection = self._client[self.database][self.collection_name]
        await self._collection.create_index("email", unique=True)
        logger.info("[store] MongoDB user store connected (db=%s)", self.database)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._collection = None
            logger.info("[store] MongoDB user store closed")

    async def find_by_email(self, email: str) -> StoredUser | None:
        doc = await self.collection.find_one({"email": email})
        return _to_stored(doc) if doc else None

    async def insert_user(self, username: str, email: str, password_hash: str) -> StoredUser:
        doc = {"username": username, "email": email, "password": password_hash}
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateEmailError(email) from exc
        return _to_stored({**doc, "_id": result.inserted_id})
