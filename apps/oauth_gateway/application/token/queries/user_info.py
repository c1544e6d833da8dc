"""GetUserInfo Query.

세션 access 토큰으로 최신 프로바이더 프로필을 조회합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_gateway.application.common.exceptions import AuthenticationError
from apps.oauth_gateway.application.oauth.exceptions import (
    UnsupportedProviderError,
    UpstreamAuthError,
)
from apps.oauth_gateway.application.token.dto import UserInfo
from apps.oauth_gateway.domain.enums.token_type import TokenType
from apps.oauth_gateway.domain.exceptions.auth import InvalidTokenError
from apps.oauth_gateway.domain.exceptions.profile import ProfileValidationError

if TYPE_CHECKING:
    from apps.oauth_gateway.application.oauth.ports import StrategyResolver
    from apps.oauth_gateway.application.token.ports import TokenIssuer
    from apps.oauth_gateway.application.users.ports import UserStore

logger = logging.getLogger(__name__)


class GetUserInfoQueryService:
    """사용자 정보 조회 Query Service.

    캐시된 사용자 레코드가 아니라 프로바이더에서 프로필을 다시 가져옵니다.
    """

    def __init__(
        self,
        token_issuer: "TokenIssuer",
        strategy_resolver: "StrategyResolver",
        user_store: "UserStore",
    ) -> None:
        self._token_issuer = token_issuer
        self._strategy_resolver = strategy_resolver
        self._user_store = user_store

    async def execute(self, access_token: str) -> UserInfo:
        """사용자 정보를 조회합니다.

        Raises:
            InvalidTokenError: 토큰 검증 실패, 저장된 프로바이더 토큰 없음
            AuthenticationError: 프로바이더 프로필 조회 실패
        """
        payload = self._token_issuer.verify(access_token, TokenType.ACCESS)

        stored = await self._user_store.find_provider_token(payload.user_id, payload.provider)
        if stored is None:
            raise InvalidTokenError("No provider session for this token")

        try:
            strategy = self._strategy_resolver.resolve(payload.provider)
            profile = await strategy.fetch_profile(stored.access_token, id_token=stored.id_token)
        except (UnsupportedProviderError, UpstreamAuthError, ProfileValidationError) as e:
            logger.warning(
                "User info fetch failed",
                extra={
                    "user_id": str(payload.user_id),
                    "provider": payload.provider.value,
                    "error_type": type(e).__name__,
                },
            )
            raise AuthenticationError("Failed to fetch user info") from e

        return UserInfo(user_id=payload.user_id, profile=profile)
