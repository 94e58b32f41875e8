# authapi/stores/__init__.py
"""
Credential stores.

build_user_store picks the implementation named by USER_STORE:
- sql: TortoiseUserStore (MySQL / PostgreSQL / SQLite)
- mongo: MongoUserStore
"""
from authapi.config import ConfigError, Settings
from authapi.stores.base import DuplicateEmailError, UserStore, UserStoreError
from authapi.stores.mongo import MongoUserStore
from authapi.stores.sql import TortoiseUserStore


def build_user_store(settings: Settings) -> UserStore:
    """Construct (but do not connect) the configured user store."""
    if settings.user_store == "sql":
        return TortoiseUserStore(settings.sql_url(), generate_schemas=settings.generate_schemas)
    if settings.user_store == "mongo":
        return MongoUserStore(settings.mongo_url(), settings.mongo_db)
    raise ConfigError(f"Unknown USER_STORE {settings.user_store!r} (expected 'sql' or 'mongo')")


__all__ = [
    "DuplicateEmailError",
    "MongoUserStore",
    "TortoiseUserStore",
    "UserStore",
    "UserStoreError",
    "build_user_store",
]
