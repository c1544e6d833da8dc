"""OAuth Exceptions."""

from apps.oauth_gateway.application.oauth.exceptions.oauth import (
    InvalidStateError,
    UnsupportedProviderError,
    UpstreamAuthError,
)

__all__ = [
    "InvalidStateError",
    "UnsupportedProviderError",
    "UpstreamAuthError",
]
