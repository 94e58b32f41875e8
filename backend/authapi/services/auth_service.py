"""
Authentication workflow.

Registration and login against any UserStore. Each call is independent; the
service keeps no state besides its store handle and signing secret.
"""
import logging
from dataclasses import dataclass

from starlette.concurrency import run_in_threadpool

from authapi.core.errors import (
    AuthError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from authapi.core.security import create_access_token, hash_password, verify_password
from authapi.schemas.user import MAX_FIELD_LENGTH
from authapi.stores.base import DuplicateEmailError, UserStore

logger = logging.getLogger("uvicorn.error")

MSG_FIELDS_REQUIRED = "Todos os campos são obrigatórios"
MSG_PASSWORDS_MISMATCH = "As senhas não coincidem"
MSG_EMAIL_TAKEN = "Esse e-mail já está cadastrado"
MSG_REGISTERED = "Usuário registrado com sucesso"
MSG_REGISTER_FAILED = "Erro ao registrar usuário"
MSG_FIELD_TOO_LONG = f"Nome de usuário e e-mail devem ter no máximo {MAX_FIELD_LENGTH} caracteres"
MSG_PASSWORD_NULL_BYTE = "A senha não pode conter caracteres nulos"

MSG_LOGIN_FIELDS_REQUIRED = "E-mail e senha são obrigatórios"
MSG_USER_NOT_FOUND = "Usuário não encontrado"
MSG_WRONG_PASSWORD = "Senha incorreta"
MSG_LOGGED_IN = "Login bem-sucedido"
MSG_LOGIN_FAILED = "Erro ao fazer login"


@dataclass
class LoginResult:
    message: str
    token: str


class AuthService:
    def __init__(self, store: UserStore, jwt_secret: str | None = None):
        self.store = store
        self.jwt_secret = jwt_secret

    async def register(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        confirm_password: str | None,
    ) -> str:
        """
        Create a user account. Returns the confirmation message; no token is
        issued at registration.

        Raises:
            ValidationError: A field is missing, too long, or the passwords differ
            ConflictError: The email is already registered
            InternalError: The store failed
        """
        if not username or not email or not password or not confirm_password:
            raise ValidationError(MSG_FIELDS_REQUIRED)
        if password != confirm_password:
            raise ValidationError(MSG_PASSWORDS_MISMATCH)
        if len(username) > MAX_FIELD_LENGTH or len(email) > MAX_FIELD_LENGTH:
            raise ValidationError(MSG_FIELD_TOO_LONG)
        # bcrypt rejects NUL bytes
        if "\x00" in password:
            raise ValidationError(MSG_PASSWORD_NULL_BYTE)

        try:
            if await self.store.find_by_email(email):
                raise ConflictError(MSG_EMAIL_TAKEN)
            password_hash = await run_in_threadpool(hash_password, password)
            user = await self.store.insert_user(username, email, password_hash)
        except ConflictError:
            raise
        except DuplicateEmailError:
            # Lost a race with a concurrent registration of the same email
            raise ConflictError(MSG_EMAIL_TAKEN)
        except Exception:
            logger.exception("[auth] registration failed")
            raise InternalError(MSG_REGISTER_FAILED)

        logger.info("[auth] registered user id=%s username=%s", user.id, user.username)
        return MSG_REGISTERED

    async def login(self, email: str | None, password: str | None) -> LoginResult:
        """
        Check credentials and issue a one-hour token carrying {id, email}.

        Raises:
            ValidationError: Email or password missing
            NotFoundError: No user with this email
            AuthError: Wrong password
            InternalError: The store failed
        """
        if not email or not password:
            raise ValidationError(MSG_LOGIN_FIELDS_REQUIRED)

        try:
            user = await self.store.find_by_email(email)
        except Exception:
            logger.exception("[auth] login lookup failed")
            raise InternalError(MSG_LOGIN_FAILED)

        if user is None:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        if not await run_in_threadpool(verify_password, password, user.password_hash):
            raise AuthError(MSG_WRONG_PASSWORD)

        token = create_access_token(user.id, user.email, secret=self.jwt_secret)
        return LoginResult(message=MSG_LOGGED_IN, token=token)
