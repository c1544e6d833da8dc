"""Domain Exceptions."""

from apps.oauth_gateway.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.oauth_gateway.domain.exceptions.base import DomainError
from apps.oauth_gateway.domain.exceptions.profile import ProfileValidationError
from apps.oauth_gateway.domain.exceptions.user import ConflictError, UserNotFoundError

__all__ = [
    "DomainError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenTypeMismatchError",
    "ProfileValidationError",
    "ConflictError",
    "UserNotFoundError",
]
