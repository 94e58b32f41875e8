# authapi/schemas/user.py
"""
Store-independent view of a user record.
"""
from pydantic import BaseModel

# Longest username or email any store accepts (width of the SQL columns)
MAX_FIELD_LENGTH = 255


class StoredUser(BaseModel):
    """
    A user as returned by any UserStore.

    The id is whatever the store assigned (integer primary key, ObjectId),
    always rendered as a string.
    """
    id: str
    username: str
    email: str
    password_hash: str
