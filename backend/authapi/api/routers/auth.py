# authapi/api/routers/auth.py
from fastapi import APIRouter, Depends, status

from authapi.api.deps import get_auth_service
from authapi.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
)
from authapi.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses=_ERRORS,
)
async def register(body: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user account.

    All four fields are required and password must equal confirmpassword.
    The email must not be registered yet. The password is hashed before
    storage. No token is issued here; call /auth/login afterwards.

    Returns:
        201 {"message": ...}, or 400/500 {"error": ...}
    """
    message = await service.register(body.username, body.email, body.password, body.confirmpassword)
    return {"message": message}


@router.post("/login", response_model=LoginResponse, responses=_ERRORS)
async def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Authenticate with email and password.

    Returns:
        200 {"message": ..., "token": <JWT valid for one hour>}, or
        400 for missing fields, unknown email or wrong password, 500 on store failure
    """
    result = await service.login(body.email, body.password)
    return {"message": result.message, "token": result.token}
