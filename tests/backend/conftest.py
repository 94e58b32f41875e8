import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

TEST_DB_URL = "sqlite://:memory:"
TEST_JWT_SECRET = "test-secret"
os.environ["USER_STORE"] = "sql"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["JWT_SECRET"] = TEST_JWT_SECRET

from authapi.config import settings
from authapi.core.security import hash_password
from authapi.main import app
from authapi.schemas.user import StoredUser
from authapi.stores.base import DuplicateEmailError, UserStore
from authapi.stores.sql import TortoiseUserStore

settings.database_url = TEST_DB_URL
settings.jwt_secret = TEST_JWT_SECRET


class InMemoryUserStore(UserStore):
    """
    Dict-backed store for workflow tests.
    Set fail_with to make every call raise, simulating a database outage.
    """

    def __init__(self):
        self.users: dict[str, StoredUser] = {}
        self.fail_with: Exception | None = None
        self._next_id = 1

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def connect(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def find_by_email(self, email):
        self._maybe_fail()
        return self.users.get(email)

    async def insert_user(self, username, email, password_hash):
        self._maybe_fail()
        if email in self.users:
            raise DuplicateEmailError(email)
        user = StoredUser(id=str(self._next_id), username=username, email=email, password_hash=password_hash)
        self._next_id += 1
        self.users[email] = user
        return user


@pytest.fixture
def memory_store():
    return InMemoryUserStore()


@pytest_asyncio.fixture
async def sql_store():
    """
    Tortoise-backed store on a fresh in-memory SQLite database.
    Tables are recreated from scratch for every test.
    """
    store = TortoiseUserStore(TEST_DB_URL, generate_schemas=True)
    await store.connect()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def client(sql_store):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    The startup hook is skipped; the store is installed directly.
    """
    app.state.user_store = sql_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    app.state.user_store = None


@pytest_asyncio.fixture
async def create_user(sql_store):
    """
    Factory fixture to create users directly through the store.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[StoredUser, str]:
        tag = uuid.uuid4().hex[:6]
        user = await sql_store.insert_user(
            username=f"user_{tag}",
            email=f"{tag}@example.com",
            password_hash=hash_password(password),
        )
        return user, password

    return _create_user
