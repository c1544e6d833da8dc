"""JWT Token Service 단위 테스트.

JwtTokenService의 토큰 발급/검증 로직을 테스트합니다.
"""

from unittest.mock import patch
from uuid import uuid4

import pytest
from jose import jwt

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.enums.token_type import TokenType
from apps.oauth_gateway.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.oauth_gateway.infrastructure.security import JwtTokenService


class TestJwtTokenService:
    """JwtTokenService 테스트."""

    @pytest.mark.asyncio
    async def test_issue_pair(self, token_service: JwtTokenService) -> None:
        pair = await token_service.issue_pair(user_id=uuid4(), provider=OAuthProvider.GOOGLE)

        access = token_service.decode(pair.access_token)
        refresh = token_service.decode(pair.refresh_token)
        assert access.jti != refresh.jti
        assert access.expires_at < refresh.expires_at
        assert pair.access_expires_in == 900

    @pytest.mark.asyncio
    async def test_round_trip(self, token_service: JwtTokenService) -> None:
        user_id = uuid4()
        pair = await token_service.issue_pair(
            user_id=user_id, provider=OAuthProvider.KAKAO, email="a@b.com"
        )

        payload = token_service.verify(pair.access_token, TokenType.ACCESS)

        assert payload.user_id == user_id
        assert payload.provider == OAuthProvider.KAKAO
        assert payload.token_type == TokenType.ACCESS
        assert payload.email == "a@b.com"
        assert payload.expires_at - payload.issued_at == 900

    @pytest.mark.asyncio
    async def test_kind_mismatch(self, token_service: JwtTokenService) -> None:
        pair = await token_service.issue_pair(user_id=uuid4(), provider=OAuthProvider.KAKAO)

        with pytest.raises(TokenTypeMismatchError) as exc_info:
            token_service.verify(pair.refresh_token, TokenType.ACCESS)

        assert exc_info.value.expected == "access"
        assert exc_info.value.actual == "refresh"

    @pytest.mark.asyncio
    async def test_expired_token(self, token_service: JwtTokenService) -> None:
        # 발급 시각을 과거로 돌려 이미 만료된 토큰 생성
        with patch.object(token_service, "_now_timestamp", return_value=1_000_000):
            pair = await token_service.issue_pair(user_id=uuid4(), provider=OAuthProvider.KAKAO)

        with pytest.raises(TokenExpiredError):
            token_service.verify(pair.access_token, TokenType.ACCESS)
        assert token_service.is_expired(pair.access_token) is True
        assert token_service.time_remaining(pair.access_token) == 0

    @pytest.mark.asyncio
    async def test_wrong_secret(self, token_service: JwtTokenService) -> None:
        other = JwtTokenService(
            secret_key="another-secret",
            issuer="test-issuer",
            audience="test-audience",
        )
        pair = await other.issue_pair(user_id=uuid4(), provider=OAuthProvider.KAKAO)

        with pytest.raises(InvalidTokenError):
            token_service.decode(pair.access_token)

    def test_garbage_token(self, token_service: JwtTokenService) -> None:
        with pytest.raises(InvalidTokenError):
            token_service.decode("not.a.token")

    def test_missing_claims(self, token_service: JwtTokenService) -> None:
        token = jwt.encode(
            {"sub": "not-a-uuid", "iss": "test-issuer", "aud": "test-audience"},
            "test-secret-key-12345",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            token_service.decode(token)

    @pytest.mark.asyncio
    async def test_time_remaining(self, token_service: JwtTokenService) -> None:
        pair = await token_service.issue_pair(user_id=uuid4(), provider=OAuthProvider.KAKAO)

        remaining = token_service.time_remaining(pair.access_token)

        assert 0 < remaining <= 900
        assert token_service.is_expired(pair.access_token) is False

    def test_time_remaining_of_garbage_is_zero(self, token_service: JwtTokenService) -> None:
        assert token_service.time_remaining("garbage") == 0
