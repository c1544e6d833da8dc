"""OAuth DTOs."""

from apps.oauth_gateway.application.oauth.dto.oauth import (
    AuthUrlRequest,
    AuthUrlResponse,
    OAuthCallbackRequest,
    SessionTokenResponse,
)

__all__ = [
    "AuthUrlRequest",
    "AuthUrlResponse",
    "OAuthCallbackRequest",
    "SessionTokenResponse",
]
