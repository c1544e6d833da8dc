"""HTTP Schemas."""

from apps.oauth_gateway.presentation.http.schemas.auth import (
    AuthUrlResponse,
    ErrorResponse,
    TokenResponse,
    UserProfileResponse,
)

__all__ = ["AuthUrlResponse", "ErrorResponse", "TokenResponse", "UserProfileResponse"]
