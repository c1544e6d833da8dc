"""HTTP Auth Dependencies."""

from apps.oauth_gateway.presentation.http.auth.dependencies import get_bearer_token

__all__ = ["get_bearer_token"]
