# authapi/core/security.py
"""
Security module for authentication.
Handles password hashing and JWT token creation/validation.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from authapi.config import settings

# Password hashing context
# bcrypt with a fixed work factor of 10 rounds (2^10 iterations); the salt is
# generated per hash and embedded in the result
BCRYPT_ROUNDS = 10
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)

# JWT configuration
ACCESS_TOKEN_EXPIRE_MINUTES = 60  # Tokens are valid for one hour
JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)


def _secret(secret: str | None) -> str:
    key = secret or settings.jwt_secret
    if not key:
        raise RuntimeError("JWT_SECRET is not configured")
    return key


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a stored hash.

    A hash that cannot be parsed counts as a mismatch.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: str, email: str, secret: str | None = None) -> str:
    """
    Create a signed JWT carrying the user's identity.

    Token payload includes:
        - id: User identifier as assigned by the store
        - email: User email
        - iat: Issued at timestamp
        - exp: Expiration timestamp (iat + ACCESS_TOKEN_EXPIRE_MINUTES)
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, _secret(secret), algorithm=JWT_ALG)


def decode_access_token(token: str, secret: str | None = None) -> dict:
    """
    Decode and validate a JWT access token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, _secret(secret), algorithms=[JWT_ALG])
