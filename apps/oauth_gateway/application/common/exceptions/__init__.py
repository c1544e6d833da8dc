"""Application Exceptions.

공통 예외만 포함합니다. OAuth 예외는 apps.oauth_gateway.application.oauth.exceptions에서 import하세요.
"""

from apps.oauth_gateway.application.common.exceptions.auth import (
    AuthenticationError,
    InternalError,
)
from apps.oauth_gateway.application.common.exceptions.base import ApplicationError

__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "InternalError",
]
