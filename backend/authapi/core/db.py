# authapi/core/db.py
"""
Relational database configuration.
Builds the Tortoise ORM config and opens/closes the connection pool.
"""
from tortoise import Tortoise

# Model modules registered with Tortoise
MODEL_MODULES = [
    "authapi.models.user",  # User model
]


def build_tortoise_config(db_url: str) -> dict:
    """
    Build a Tortoise ORM configuration dictionary for the given URL.

    The URL scheme selects the backend: mysql://, postgres:// or sqlite://.
    """
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": list(MODEL_MODULES),
                "default_connection": "default",
            },
        },
    }


async def init_db(db_url: str, generate_schemas: bool = False) -> None:
    """
    Initialize Tortoise ORM and register all models.

    With generate_schemas the users table (and its unique email index) is
    created when missing; existing tables are left untouched.
    """
    await Tortoise.init(config=build_tortoise_config(db_url))
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)


async def close_db() -> None:
    """Close all database connections."""
    await Tortoise.close_connections()
