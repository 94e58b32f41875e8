# authapi/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request/response models for registration and login.

Request fields are optional on purpose: a missing field must surface as the
workflow's own validation message rather than a pydantic 422.
"""
from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request model for the registration endpoint."""
    username: str | None = None
    email: str | None = None
    password: str | None = None
    confirmpassword: str | None = None  # Must equal password


class LoginRequest(BaseModel):
    """Request model for the login endpoint."""
    email: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    """Response model for successful login."""
    message: str
    token: str  # JWT, valid for one hour


class ErrorResponse(BaseModel):
    error: str
