"""Domain Enums."""

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.enums.token_type import TokenType

__all__ = ["OAuthProvider", "TokenType"]
