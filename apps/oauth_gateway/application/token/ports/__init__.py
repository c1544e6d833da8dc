"""Token Ports."""

from apps.oauth_gateway.application.token.ports.issuer import TokenIssuer, TokenPair

__all__ = ["TokenIssuer", "TokenPair"]
