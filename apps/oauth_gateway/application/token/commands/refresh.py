"""RefreshSession Command.

세션 토큰 갱신 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_gateway.application.common.exceptions import AuthenticationError
from apps.oauth_gateway.application.oauth.dto import SessionTokenResponse
from apps.oauth_gateway.application.token.dto import RefreshSessionRequest
from apps.oauth_gateway.domain.enums.token_type import TokenType
from apps.oauth_gateway.domain.exceptions.auth import InvalidTokenError

if TYPE_CHECKING:
    from apps.oauth_gateway.application.common.ports import TransactionManager
    from apps.oauth_gateway.application.oauth.ports import StrategyResolver
    from apps.oauth_gateway.application.token.ports import TokenIssuer
    from apps.oauth_gateway.application.users.ports import UserStore

logger = logging.getLogger(__name__)


class RefreshSessionInteractor:
    """세션 갱신 Interactor (지휘자).

    Workflow:
        1. refresh 토큰 검증 (access 토큰은 거부)
        2. 사용자 및 저장된 프로바이더 토큰 조회
        3. 프로바이더 토큰 갱신 후 upsert, 커밋
        4. access/refresh 모두 새로 발급 (refresh 토큰 재사용 없음)
    """

    def __init__(
        self,
        token_issuer: "TokenIssuer",
        strategy_resolver: "StrategyResolver",
        user_store: "UserStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._token_issuer = token_issuer
        self._strategy_resolver = strategy_resolver
        self._user_store = user_store
        self._transaction_manager = transaction_manager

    async def execute(self, request: RefreshSessionRequest) -> SessionTokenResponse:
        """세션 토큰을 갱신합니다.

        Raises:
            InvalidTokenError: 토큰 검증 실패, 종류 불일치, 갱신할 프로바이더 토큰 없음
            AuthenticationError: 프로바이더 갱신 등 그 외 실패
        """
        # 1. refresh 토큰 검증
        payload = self._token_issuer.verify(request.refresh_token, TokenType.REFRESH)

        try:
            # 2. 사용자/프로바이더 토큰 조회
            user = await self._user_store.get_user(payload.user_id)
            if user is None:
                raise InvalidTokenError("Token subject no longer exists")

            stored = await self._user_store.find_provider_token(user.id, payload.provider)
            if stored is None or not stored.refresh_token:
                raise InvalidTokenError("No provider token to refresh")

            # 3. 프로바이더 토큰 갱신
            strategy = self._strategy_resolver.resolve(payload.provider)
            refreshed = await strategy.refresh(stored.refresh_token)
            await self._user_store.upsert_provider_token(
                user.id, payload.provider, refreshed.carry_over(stored)
            )
            await self._transaction_manager.commit()

        except InvalidTokenError:
            await self._transaction_manager.rollback()
            raise
        except Exception as e:
            await self._transaction_manager.rollback()
            logger.warning(
                "Session refresh failed",
                extra={
                    "user_id": str(payload.user_id),
                    "provider": payload.provider.value,
                    "error_type": type(e).__name__,
                },
            )
            raise AuthenticationError("Token refresh failed") from e

        # 4. 세션 토큰 재발급
        pair = await self._token_issuer.issue_pair(
            user_id=user.id,
            provider=payload.provider,
            email=user.email,
        )

        logger.info(
            "Session refreshed",
            extra={"user_id": str(user.id), "provider": payload.provider.value},
        )

        return SessionTokenResponse(
            user_id=user.id,
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.access_expires_in,
        )
