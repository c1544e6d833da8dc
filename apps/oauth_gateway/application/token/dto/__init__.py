"""Token DTOs."""

from apps.oauth_gateway.application.token.dto.token import RefreshSessionRequest, UserInfo

__all__ = ["RefreshSessionRequest", "UserInfo"]
