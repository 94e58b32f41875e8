# authapi/core/errors.py
"""
Error taxonomy for the authentication workflow.

Every error carries a short, client-safe message and the HTTP status it maps
to. Internal details (tracebacks, driver errors) are logged server-side and
never placed in the message.
"""


class AuthWorkflowError(Exception):
    """Base class for errors returned to API clients as {"error": message}."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AuthWorkflowError):
    """Missing or malformed input."""


class ConflictError(AuthWorkflowError):
    """Email already registered."""


class NotFoundError(AuthWorkflowError):
    """No user with the given email."""


class AuthError(AuthWorkflowError):
    """Password does not match the stored hash."""


class InternalError(AuthWorkflowError):
    """Store or infrastructure failure; message is always generic."""

    status_code = 500
