"""Session Token Payload Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.enums.token_type import TokenType


@dataclass(frozen=True, slots=True)
class SessionTokenPayload:
    """검증된 세션 토큰 페이로드."""

    user_id: UUID
    provider: OAuthProvider
    token_type: TokenType
    jti: str
    issued_at: int
    expires_at: int
    email: str | None = None
