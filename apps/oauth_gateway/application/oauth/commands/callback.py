"""OAuthCallback Command.

OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): OAuthCallbackInteractor
    - Services(연주자): UserResolutionService
    - Ports(인프라): StrategyResolver, OAuthStateStore, UserStore, TokenIssuer, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.oauth_gateway.application.common.exceptions import AuthenticationError
from apps.oauth_gateway.application.oauth.dto import (
    OAuthCallbackRequest,
    SessionTokenResponse,
)
from apps.oauth_gateway.application.oauth.exceptions import InvalidStateError
from apps.oauth_gateway.application.oauth.flow import AuthFlowStage
from apps.oauth_gateway.domain.exceptions.user import ConflictError

if TYPE_CHECKING:
    # Services (연주자)
    from apps.oauth_gateway.application.users.services import UserResolutionService

    # Ports (인프라)
    from apps.oauth_gateway.application.common.ports import TransactionManager
    from apps.oauth_gateway.application.oauth.ports import OAuthStateStore, StrategyResolver
    from apps.oauth_gateway.application.token.ports import TokenIssuer
    from apps.oauth_gateway.application.users.ports import UserStore
    from apps.oauth_gateway.domain.enums.provider import OAuthProvider

logger = logging.getLogger(__name__)


class OAuthCallbackInteractor:
    """OAuth 콜백 Interactor (지휘자).

    한 번의 인증 플로우를 순서대로 진행합니다. 각 단계는 이전 결과에 의존하므로 병렬화하지 않습니다.

    Workflow:
        1. 전략 조회, state 검증
        2. 인증 코드 → 프로바이더 토큰 교환
        3. 프로필 조회/정규화
        4. 사용자 조회/생성 (UserResolutionService)
        5. 프로바이더 토큰 upsert
        6. 트랜잭션 커밋
        7. 세션 토큰 발급

    에러 정책:
        - UnsupportedProviderError, InvalidStateError: 플로우 시작 전 클라이언트 오류
        - ConflictError: 롤백 후 그대로 전달 (계정 연결 UX용)
        - 그 외 모든 실패: 롤백 후 AuthenticationError 하나로 통합 (실패 단계는 로그에만)
    """

    def __init__(
        self,
        # Services (연주자)
        user_resolution: "UserResolutionService",
        # Ports (인프라)
        strategy_resolver: "StrategyResolver",
        state_store: "OAuthStateStore",
        user_store: "UserStore",
        token_issuer: "TokenIssuer",
        transaction_manager: "TransactionManager",
        state_required: bool = False,
    ) -> None:
        # Services
        self._user_resolution = user_resolution
        # Ports
        self._strategy_resolver = strategy_resolver
        self._state_store = state_store
        self._user_store = user_store
        self._token_issuer = token_issuer
        self._transaction_manager = transaction_manager
        self._state_required = state_required

    async def execute(self, request: OAuthCallbackRequest) -> SessionTokenResponse:
        """OAuth 콜백을 처리합니다.

        Args:
            request: 콜백 요청 DTO

        Returns:
            세션 토큰 응답 DTO

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
            InvalidStateError: state 검증 실패
            ConflictError: 이메일이 다른 프로바이더 계정에 연결됨
            AuthenticationError: 그 외 모든 실패
        """
        # 1. 전략 조회, state 검증
        strategy = self._strategy_resolver.resolve(request.provider)
        provider = strategy.provider
        await self._verify_state(request.state, provider)

        stage = AuthFlowStage.CALLBACK_RECEIVED
        try:
            # 2. 토큰 교환
            tokens = await strategy.exchange_code(request.code)
            stage = AuthFlowStage.PROVIDER_TOKENS_OBTAINED

            # 3. 프로필 조회
            profile = await strategy.fetch_profile(tokens.access_token, id_token=tokens.id_token)
            stage = AuthFlowStage.PROFILE_FETCHED

            # 4. 사용자 조회/생성
            resolved = await self._user_resolution.find_or_create(profile)
            user = resolved.user
            stage = AuthFlowStage.USER_RESOLVED

            # 5. 프로바이더 토큰 저장 + 6. 커밋
            await self._user_store.upsert_provider_token(user.id, provider, tokens)
            await self._transaction_manager.commit()
            stage = AuthFlowStage.TOKENS_STORED

            # 7. 세션 토큰 발급
            pair = await self._token_issuer.issue_pair(
                user_id=user.id,
                provider=provider,
                email=user.email,
            )
            stage = AuthFlowStage.SESSION_ISSUED

        except ConflictError:
            await self._transaction_manager.rollback()
            logger.info(
                "OAuth callback rejected by email conflict",
                extra={"provider": provider.value, "stage": stage.value},
            )
            raise
        except Exception as e:
            await self._transaction_manager.rollback()
            logger.warning(
                "OAuth callback failed",
                extra={
                    "provider": provider.value,
                    "stage": stage.value,
                    "next_stage": AuthFlowStage.FAILED.value,
                    "error_type": type(e).__name__,
                },
            )
            raise AuthenticationError("OAuth callback processing failed") from e

        logger.info(
            "OAuth login successful",
            extra={
                "user_id": str(user.id),
                "provider": provider.value,
                "is_new_user": resolved.is_new_user,
                "stage": stage.value,
            },
        )

        return SessionTokenResponse(
            user_id=user.id,
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.access_expires_in,
            is_new_user=resolved.is_new_user,
        )

    async def _verify_state(self, state: str | None, provider: "OAuthProvider") -> None:
        """발급한 state가 같은 프로바이더로 되돌아왔는지 확인 (일회용)."""
        if state is None:
            if self._state_required:
                raise InvalidStateError("Missing state")
            return

        stored = await self._state_store.consume(state)
        if stored is None or stored.provider != provider.value:
            raise InvalidStateError()
