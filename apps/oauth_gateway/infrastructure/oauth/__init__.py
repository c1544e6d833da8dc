"""OAuth Strategy Implementations."""

from apps.oauth_gateway.infrastructure.oauth.http import ProviderHttpClient
from apps.oauth_gateway.infrastructure.oauth.providers import (
    AppleOAuthStrategy,
    GoogleOAuthStrategy,
    KakaoOAuthStrategy,
    NaverOAuthStrategy,
)
from apps.oauth_gateway.infrastructure.oauth.registry import (
    StrategyRegistry,
    build_strategy_registry,
)

__all__ = [
    "AppleOAuthStrategy",
    "GoogleOAuthStrategy",
    "KakaoOAuthStrategy",
    "NaverOAuthStrategy",
    "ProviderHttpClient",
    "StrategyRegistry",
    "build_strategy_registry",
]
