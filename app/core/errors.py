"""
Domain errors raised by services and dependencies.
Each error carries the HTTP status it maps to; app.main renders them as {"message": ...}.
"""


class AppError(Exception):
    """Base class for errors that terminate a request with a known status."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(AppError):
    """Missing, invalid or expired credential, or unknown user. Always the same message to clients."""

    status_code = 401
    default_message = "Not authorized"

    NO_TOKEN = "no_token"
    TOKEN_INVALID = "token_invalid"
    USER_NOT_FOUND = "user_not_found"
    BAD_CREDENTIALS = "bad_credentials"

    def __init__(self, reason: str, message: str | None = None):
        # reason is for server-side logs only
        self.reason = reason
        super().__init__(message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Not authorized to access this resource."


class ConflictError(AppError):
    status_code = 409
    default_message = "Conflict"


class StoreError(AppError):
    status_code = 500
    default_message = "Internal Server Error"
