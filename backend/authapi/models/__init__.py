# authapi/models/__init__.py
"""
Database models module initialization.
Exports the Tortoise ORM models used by the relational user store.
"""
from .user import User
