"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
세션 토큰은 자체 완결형으로, 서명 키만으로 검증하며 서버 세션 테이블이 필요 없습니다.
"""

from __future__ import annotations

import asyncio
import time
import uuid
from datetime import timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from apps.oauth_gateway.application.token.ports import TokenPair
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.enums.token_type import TokenType
from apps.oauth_gateway.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.oauth_gateway.domain.value_objects.token_payload import SessionTokenPayload


class JwtTokenService:
    """JWT 세션 토큰 서비스.

    TokenIssuer 구현체.
    access/refresh는 type 클레임과 만료 시간만 다르게 서명됩니다.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "oauth-gateway",
        audience: str = "api",
        access_token_expire_seconds: int = 900,  # 15분
        refresh_token_expire_seconds: int = 604800,  # 7일
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(seconds=access_token_expire_seconds)
        self._refresh_token_expire = timedelta(seconds=refresh_token_expire_seconds)

    @property
    def access_token_ttl_seconds(self) -> int:
        return int(self._access_token_expire.total_seconds())

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def _create_token(
        self,
        *,
        user_id: UUID,
        provider: OAuthProvider,
        email: str | None,
        token_type: TokenType,
        expires_delta: timedelta,
    ) -> str:
        """토큰 생성."""
        now = self._now_timestamp()
        expires_at = now + int(expires_delta.total_seconds())

        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": str(uuid.uuid4()),
            "type": token_type.value,
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
            "provider": provider.value,
        }
        if email:
            payload["email"] = email

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    async def issue_pair(
        self,
        *,
        user_id: UUID,
        provider: OAuthProvider,
        email: str | None = None,
    ) -> TokenPair:
        """토큰 쌍 발급.

        두 서명은 공유 상태가 없어 스레드에서 동시에 수행합니다.
        """
        access_token, refresh_token = await asyncio.gather(
            asyncio.to_thread(
                self._create_token,
                user_id=user_id,
                provider=provider,
                email=email,
                token_type=TokenType.ACCESS,
                expires_delta=self._access_token_expire,
            ),
            asyncio.to_thread(
                self._create_token,
                user_id=user_id,
                provider=provider,
                email=email,
                token_type=TokenType.REFRESH,
                expires_delta=self._refresh_token_expire,
            ),
        )
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            access_expires_in=self.access_token_ttl_seconds,
        )

    def decode(self, token: str) -> SessionTokenPayload:
        """토큰 디코딩 (서명, 만료, iss/aud 검증)."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
            )
        except ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except JWTError as e:
            raise InvalidTokenError("Invalid token") from e

        try:
            return SessionTokenPayload(
                user_id=UUID(payload["sub"]),
                provider=OAuthProvider(payload["provider"]),
                token_type=TokenType(payload["type"]),
                jti=payload["jti"],
                issued_at=payload["iat"],
                expires_at=payload["exp"],
                email=payload.get("email"),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError("Malformed token claims") from e

    def ensure_type(self, payload: SessionTokenPayload, expected_type: TokenType) -> None:
        """토큰 타입 검증."""
        if payload.token_type != expected_type:
            raise TokenTypeMismatchError(
                expected=expected_type.value,
                actual=payload.token_type.value,
            )

    def verify(
        self,
        token: str,
        expected_type: TokenType = TokenType.ACCESS,
    ) -> SessionTokenPayload:
        """디코딩 + 타입 검증."""
        payload = self.decode(token)
        self.ensure_type(payload, expected_type)
        return payload

    # ------------------------------------------------------------
    # 검증 없는 조회용 헬퍼 (인가 판단에 단독으로 사용하지 말 것)
    # ------------------------------------------------------------

    def decode_without_verify(self, token: str) -> dict[str, Any]:
        """서명 검증 없이 클레임 조회."""
        try:
            return jwt.get_unverified_claims(token)
        except JWTError as e:
            raise InvalidTokenError("Malformed token") from e

    def is_expired(self, token: str) -> bool:
        """만료 여부. 해석할 수 없는 토큰은 만료로 간주."""
        return self.time_remaining(token) <= 0

    def time_remaining(self, token: str) -> int:
        """만료까지 남은 초. 만료되었거나 해석할 수 없으면 0."""
        try:
            exp = int(self.decode_without_verify(token)["exp"])
        except (InvalidTokenError, KeyError, TypeError, ValueError):
            return 0
        return max(0, exp - self._now_timestamp())
