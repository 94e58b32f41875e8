# authapi/models/user.py
"""
Database model for users.
Represents a registered account and its password hash.
"""
from tortoise import fields, models

from authapi.schemas.user import MAX_FIELD_LENGTH


class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a bcrypt hash (never store plain text passwords)
    - Email is unique across all users; the unique index is the guard against
      two concurrent registrations with the same email
    """
    id = fields.IntField(pk=True)  # Auto-increment primary key
    username = fields.CharField(max_length=MAX_FIELD_LENGTH)  # Display name
    email = fields.CharField(max_length=MAX_FIELD_LENGTH, unique=True, index=True)  # Login identifier (case-sensitive, except under MySQL *_ci collations)
    password_hash = fields.CharField(max_length=255, source_field="password")  # bcrypt hash, column "password"
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
