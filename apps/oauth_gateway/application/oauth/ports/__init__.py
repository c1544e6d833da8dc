"""OAuth Ports."""

from apps.oauth_gateway.application.oauth.ports.provider_strategy import (
    ProviderStrategy,
    StrategyResolver,
)
from apps.oauth_gateway.application.oauth.ports.state_store import (
    OAuthState,
    OAuthStateStore,
)

__all__ = [
    "OAuthState",
    "OAuthStateStore",
    "ProviderStrategy",
    "StrategyResolver",
]
