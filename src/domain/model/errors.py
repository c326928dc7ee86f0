"""Domain-level exceptions.

Services raise these errors to express business rule violations.
The API layer maps each one to its ``status_code`` and renders ``message``
as the JSON response body.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated validation rule."""
    field: str
    message: str


class DomainError(Exception):
    """Base class for all domain errors."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Input violates one or more declarative field rules."""

    default_message = "Validation failed"

    def __init__(self, errors: list[FieldError], message: str | None = None):
        self.errors = list(errors)
        super().__init__(message)


class DuplicateResourceError(DomainError):
    """Entity with the same unique key already exists."""

    default_message = "A user with that email is already registered"


class InvalidCredentialsError(DomainError):
    """Email/password pair did not match.

    The message is the same whether the email is unknown or the password is wrong.
    """

    default_message = "Invalid email or password"


class AuthorizationMissingError(DomainError):
    """No bearer token was presented."""

    status_code = 401
    default_message = "Authorization required"


class InvalidTokenError(DomainError):
    """Bearer token is malformed, tampered with or expired."""

    status_code = 401
    default_message = "Invalid or expired token"


class NotFoundError(DomainError):
    """Requested entity does not exist."""

    status_code = 404
    default_message = "User not found"
