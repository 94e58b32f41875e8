"""
Services Module

- auth_service: registration and login workflow over a UserStore
"""
from .auth_service import AuthService, LoginResult

__all__ = [
    "AuthService",
    "LoginResult",
]
