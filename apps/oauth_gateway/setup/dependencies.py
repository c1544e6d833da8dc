"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.oauth_gateway.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.oauth_gateway.infrastructure.oauth import StrategyRegistry
    from apps.oauth_gateway.infrastructure.security import JwtTokenService


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.oauth_gateway.infrastructure.persistence_postgres.session import (
        get_async_session,
    )

    async for session in get_async_session():
        yield session


def get_oauth_state_redis() -> "aioredis.Redis":
    """OAuth state 저장용 Redis 클라이언트 제공자."""
    from apps.oauth_gateway.infrastructure.persistence_redis.client import (
        get_oauth_state_redis,
    )

    return get_oauth_state_redis()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_user_store(session: "AsyncSession" = Depends(get_db_session)):
    """UserStore 제공자."""
    from apps.oauth_gateway.infrastructure.persistence_postgres.adapters import SqlaUserStore

    return SqlaUserStore(session)


async def get_transaction_manager(session: "AsyncSession" = Depends(get_db_session)):
    """TransactionManager 제공자."""
    from apps.oauth_gateway.infrastructure.persistence_postgres.adapters import (
        SqlaTransactionManager,
    )

    return SqlaTransactionManager(session)


def get_state_store(redis: "aioredis.Redis" = Depends(get_oauth_state_redis)):
    """OAuthStateStore 제공자."""
    from apps.oauth_gateway.infrastructure.persistence_redis import RedisStateStore

    return RedisStateStore(redis)


# ============================================================
# Service Dependencies
# ============================================================


@lru_cache
def _build_token_service(
    secret_key: str,
    algorithm: str,
    issuer: str,
    audience: str,
    access_seconds: int,
    refresh_seconds: int,
) -> "JwtTokenService":
    from apps.oauth_gateway.infrastructure.security import JwtTokenService

    return JwtTokenService(
        secret_key=secret_key,
        algorithm=algorithm,
        issuer=issuer,
        audience=audience,
        access_token_expire_seconds=access_seconds,
        refresh_token_expire_seconds=refresh_seconds,
    )


def get_token_service(settings: Settings = Depends(get_settings)) -> "JwtTokenService":
    """TokenIssuer 제공자."""
    return _build_token_service(
        settings.jwt_secret_key.get_secret_value(),
        settings.jwt_algorithm,
        settings.jwt_issuer,
        settings.jwt_audience,
        settings.jwt_access_expiration_seconds,
        settings.jwt_refresh_expiration_seconds,
    )


_strategy_registry: "StrategyRegistry | None" = None


def get_strategy_registry(settings: Settings = Depends(get_settings)) -> "StrategyRegistry":
    """StrategyRegistry 제공자 (싱글톤, 시작 후 불변)."""
    global _strategy_registry
    if _strategy_registry is None:
        from apps.oauth_gateway.infrastructure.oauth import build_strategy_registry

        _strategy_registry = build_strategy_registry(settings)
    return _strategy_registry


def get_user_resolution_service(user_store=Depends(get_user_store)):
    """UserResolutionService 제공자."""
    from apps.oauth_gateway.application.users.services import UserResolutionService

    return UserResolutionService(user_store)


# ============================================================
# Use Case Dependencies
# ============================================================


async def get_generate_auth_url_interactor(
    settings: Settings = Depends(get_settings),
    strategy_resolver=Depends(get_strategy_registry),
    state_store=Depends(get_state_store),
):
    """GenerateAuthUrlInteractor 제공자."""
    from apps.oauth_gateway.application.oauth.commands import GenerateAuthUrlInteractor

    return GenerateAuthUrlInteractor(
        strategy_resolver=strategy_resolver,
        state_store=state_store,
        state_ttl_seconds=settings.oauth_state_ttl_seconds,
    )


async def get_oauth_callback_interactor(
    settings: Settings = Depends(get_settings),
    user_resolution=Depends(get_user_resolution_service),
    strategy_resolver=Depends(get_strategy_registry),
    state_store=Depends(get_state_store),
    user_store=Depends(get_user_store),
    token_issuer=Depends(get_token_service),
    transaction_manager=Depends(get_transaction_manager),
):
    """OAuthCallbackInteractor 제공자."""
    from apps.oauth_gateway.application.oauth.commands import OAuthCallbackInteractor

    return OAuthCallbackInteractor(
        user_resolution=user_resolution,
        strategy_resolver=strategy_resolver,
        state_store=state_store,
        user_store=user_store,
        token_issuer=token_issuer,
        transaction_manager=transaction_manager,
        state_required=settings.oauth_state_required,
    )


async def get_refresh_session_interactor(
    token_issuer=Depends(get_token_service),
    strategy_resolver=Depends(get_strategy_registry),
    user_store=Depends(get_user_store),
    transaction_manager=Depends(get_transaction_manager),
):
    """RefreshSessionInteractor 제공자."""
    from apps.oauth_gateway.application.token.commands import RefreshSessionInteractor

    return RefreshSessionInteractor(
        token_issuer=token_issuer,
        strategy_resolver=strategy_resolver,
        user_store=user_store,
        transaction_manager=transaction_manager,
    )


async def get_user_info_query_service(
    token_issuer=Depends(get_token_service),
    strategy_resolver=Depends(get_strategy_registry),
    user_store=Depends(get_user_store),
):
    """GetUserInfoQueryService 제공자."""
    from apps.oauth_gateway.application.token.queries import GetUserInfoQueryService

    return GetUserInfoQueryService(
        token_issuer=token_issuer,
        strategy_resolver=strategy_resolver,
        user_store=user_store,
    )
