"""OAuth Strategy Registry.

프로바이더 → 전략 조회 테이블입니다. 시작 시 한 번 구성되고 이후 변경되지 않습니다.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping

import httpx
from pydantic import SecretStr

from apps.oauth_gateway.application.oauth.exceptions import UnsupportedProviderError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.services import ProfileNormalizer
from apps.oauth_gateway.infrastructure.oauth.http import ProviderHttpClient
from apps.oauth_gateway.infrastructure.oauth.providers import (
    AppleCredentials,
    AppleOAuthStrategy,
    GoogleOAuthStrategy,
    KakaoOAuthStrategy,
    NaverOAuthStrategy,
    OAuthClientCredentials,
)

if TYPE_CHECKING:
    from apps.oauth_gateway.application.oauth.ports import ProviderStrategy
    from apps.oauth_gateway.setup.config import Settings

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """불변 전략 레지스트리.

    StrategyResolver 구현체.
    """

    def __init__(self, strategies: Iterable["ProviderStrategy"]) -> None:
        table: dict[OAuthProvider, "ProviderStrategy"] = {}
        for strategy in strategies:
            if strategy.provider in table:
                raise ValueError(f"Duplicate strategy for provider: {strategy.provider}")
            table[strategy.provider] = strategy
        self._strategies: Mapping[OAuthProvider, "ProviderStrategy"] = MappingProxyType(table)

    @property
    def providers(self) -> tuple[OAuthProvider, ...]:
        """등록된 프로바이더 목록."""
        return tuple(self._strategies)

    def resolve(self, provider: OAuthProvider | str) -> "ProviderStrategy":
        """전략 조회.

        Raises:
            UnsupportedProviderError: 알 수 없거나 등록되지 않은 프로바이더
        """
        try:
            key = OAuthProvider(provider.lower() if isinstance(provider, str) else provider)
        except ValueError as e:
            raise UnsupportedProviderError(str(provider)) from e

        strategy = self._strategies.get(key)
        if strategy is None:
            raise UnsupportedProviderError(key.value)
        return strategy


def _secret(value: SecretStr | None) -> str | None:
    if value is None:
        return None
    return value.get_secret_value() or None


def build_strategy_registry(
    settings: "Settings",
    *,
    normalizer: ProfileNormalizer | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StrategyRegistry:
    """설정된 프로바이더만 등록한 레지스트리 생성."""
    normalizer = normalizer or ProfileNormalizer()
    timeout = settings.oauth_http_timeout_seconds

    def http(provider: OAuthProvider) -> ProviderHttpClient:
        return ProviderHttpClient(provider, timeout_seconds=timeout, transport=transport)

    strategies: list["ProviderStrategy"] = []

    if settings.kakao_client_id:
        strategies.append(
            KakaoOAuthStrategy(
                OAuthClientCredentials(
                    client_id=settings.kakao_client_id,
                    client_secret=_secret(settings.kakao_client_secret),
                    redirect_uri=settings.redirect_uri_for(OAuthProvider.KAKAO),
                ),
                http(OAuthProvider.KAKAO),
                normalizer,
            )
        )

    if settings.naver_client_id:
        strategies.append(
            NaverOAuthStrategy(
                OAuthClientCredentials(
                    client_id=settings.naver_client_id,
                    client_secret=_secret(settings.naver_client_secret),
                    redirect_uri=settings.redirect_uri_for(OAuthProvider.NAVER),
                ),
                http(OAuthProvider.NAVER),
                normalizer,
            )
        )

    if settings.google_client_id:
        strategies.append(
            GoogleOAuthStrategy(
                OAuthClientCredentials(
                    client_id=settings.google_client_id,
                    client_secret=_secret(settings.google_client_secret),
                    redirect_uri=settings.redirect_uri_for(OAuthProvider.GOOGLE),
                ),
                http(OAuthProvider.GOOGLE),
                normalizer,
            )
        )

    apple_private_key = settings.apple_private_key_pem
    if (
        settings.apple_client_id
        and settings.apple_team_id
        and settings.apple_key_id
        and apple_private_key
    ):
        strategies.append(
            AppleOAuthStrategy(
                AppleCredentials(
                    client_id=settings.apple_client_id,
                    team_id=settings.apple_team_id,
                    key_id=settings.apple_key_id,
                    private_key=apple_private_key,
                    redirect_uri=settings.redirect_uri_for(OAuthProvider.APPLE),
                ),
                http(OAuthProvider.APPLE),
                normalizer,
            )
        )

    registry = StrategyRegistry(strategies)
    logger.info(
        "OAuth strategies registered",
        extra={"providers": [provider.value for provider in registry.providers]},
    )
    return registry
