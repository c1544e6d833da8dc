"""Security Infrastructure."""

from apps.oauth_gateway.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["JwtTokenService"]
