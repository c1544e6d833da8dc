"""OAuth Provider Strategies.

각 프로바이더 전략 구현체입니다.
"""

from apps.oauth_gateway.infrastructure.oauth.providers.apple import (
    AppleClientSecretSigner,
    AppleCredentials,
    AppleOAuthStrategy,
)
from apps.oauth_gateway.infrastructure.oauth.providers.credentials import (
    OAuthClientCredentials,
)
from apps.oauth_gateway.infrastructure.oauth.providers.google import GoogleOAuthStrategy
from apps.oauth_gateway.infrastructure.oauth.providers.kakao import KakaoOAuthStrategy
from apps.oauth_gateway.infrastructure.oauth.providers.naver import NaverOAuthStrategy

__all__ = [
    "AppleClientSecretSigner",
    "AppleCredentials",
    "AppleOAuthStrategy",
    "GoogleOAuthStrategy",
    "KakaoOAuthStrategy",
    "NaverOAuthStrategy",
    "OAuthClientCredentials",
]
