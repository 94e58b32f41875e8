from fastapi import Depends, Request

from authapi.config import settings
from authapi.services.auth_service import AuthService
from authapi.stores.base import UserStore


def get_user_store(request: Request) -> UserStore:
    """
    FastAPI dependency returning the store connected at startup.

    The store lives on app.state so tests can install their own.
    """
    return request.app.state.user_store


def get_auth_service(store: UserStore = Depends(get_user_store)) -> AuthService:
    return AuthService(store, jwt_secret=settings.jwt_secret)
