"""Exception taxonomy shared by the session layer and the REST API."""


class AuthError(Exception):
    """Authentication failed: bad credentials, invalid signup or no backend."""

    code = "auth_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"


class DuplicateAccountError(AuthError):
    code = "duplicate_account"


class SignupValidationError(AuthError):
    code = "validation_error"


class SessionRestoreFailure(Exception):
    """A persisted session could not be restored. Never leaves bootstrap()."""


class DuplicateError(Exception):
    """Raised by repositories when a unique key already exists."""


__all__ = [
    "AuthError",
    "InvalidCredentialsError",
    "DuplicateAccountError",
    "SignupValidationError",
    "SessionRestoreFailure",
    "DuplicateError",
]
