"""GenerateAuthUrl Command.

OAuth 인증 URL 생성 Use Case입니다.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from apps.oauth_gateway.application.oauth.dto import AuthUrlRequest, AuthUrlResponse
from apps.oauth_gateway.application.oauth.ports import OAuthState
from apps.oauth_gateway.application.oauth.state import generate_state

if TYPE_CHECKING:
    from apps.oauth_gateway.application.oauth.ports import OAuthStateStore, StrategyResolver

logger = logging.getLogger(__name__)


class GenerateAuthUrlInteractor:
    """인증 URL 생성 Interactor (지휘자).

    Workflow:
        1. 전략 조회 (알 수 없는 프로바이더 → UnsupportedProviderError)
        2. state 결정 (요청 값 또는 새로 생성)
        3. 인증 URL 생성
        4. state 저장 (콜백에서 일회성으로 소비)
    """

    def __init__(
        self,
        strategy_resolver: "StrategyResolver",
        state_store: "OAuthStateStore",
        state_ttl_seconds: int = 600,
    ) -> None:
        self._strategy_resolver = strategy_resolver
        self._state_store = state_store
        self._state_ttl_seconds = state_ttl_seconds

    async def execute(self, request: AuthUrlRequest) -> AuthUrlResponse:
        """인증 URL을 생성합니다.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
        """
        strategy = self._strategy_resolver.resolve(request.provider)
        state = request.state or generate_state()

        url = strategy.generate_auth_url(state)

        await self._state_store.save(
            state,
            OAuthState(provider=strategy.provider.value, issued_at=int(time.time())),
            ttl_seconds=self._state_ttl_seconds,
        )

        logger.info("Authorization URL generated", extra={"provider": strategy.provider.value})
        return AuthUrlResponse(url=url, state=state)
