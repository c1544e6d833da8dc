"""TokenIssuer Port.

세션 토큰 발급/검증을 위한 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.enums.provider import OAuthProvider
    from apps.oauth_gateway.domain.enums.token_type import TokenType
    from apps.oauth_gateway.domain.value_objects.token_payload import SessionTokenPayload


@dataclass(frozen=True, slots=True)
class TokenPair:
    """세션 토큰 쌍."""

    access_token: str
    refresh_token: str
    access_expires_in: int


class TokenIssuer(Protocol):
    """세션 토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    async def issue_pair(
        self,
        *,
        user_id: UUID,
        provider: "OAuthProvider",
        email: str | None = None,
    ) -> TokenPair:
        """access/refresh 토큰 쌍 발급."""
        ...

    def verify(self, token: str, expected_type: "TokenType") -> "SessionTokenPayload":
        """서명, 만료, 종류 검증.

        Raises:
            InvalidTokenError: 서명 오류, 종류 불일치
            TokenExpiredError: 만료
        """
        ...
