"""ProviderStrategy Port.

프로바이더(Kakao, Naver, Apple, Google)별 OAuth 프로토콜을 캡슐화하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.enums.provider import OAuthProvider
    from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile
    from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet


class ProviderStrategy(Protocol):
    """프로바이더 전략 인터페이스.

    구현체는 생성 이후 상태가 없습니다.
    네트워크/프로바이더 오류는 모두 UpstreamAuthError로 감싸서 던집니다.

    구현체:
        - KakaoOAuthStrategy, NaverOAuthStrategy, GoogleOAuthStrategy, AppleOAuthStrategy
          (infrastructure/oauth/providers/)
    """

    provider: "OAuthProvider"

    def generate_auth_url(self, state: str | None = None) -> str:
        """인증 URL 생성.

        state가 없으면 새로 생성합니다. I/O가 없고 실패하지 않습니다.
        """
        ...

    async def exchange_code(self, code: str) -> "ProviderTokenSet":
        """인증 코드 → 프로바이더 토큰 교환.

        인증 코드는 일회용이므로 재시도하지 않습니다.

        Raises:
            UpstreamAuthError: non-2xx, 타임아웃, 잘못된 응답
        """
        ...

    async def fetch_profile(
        self,
        access_token: str,
        *,
        id_token: str | None = None,
    ) -> "CanonicalProfile":
        """프로필 조회.

        Apple은 네트워크 호출 없이 ID 토큰을 디코딩합니다.

        Raises:
            UpstreamAuthError: 조회 또는 디코딩 실패
            ProfileValidationError: 정규화 불변식 위반
        """
        ...

    async def refresh(self, refresh_token: str) -> "ProviderTokenSet":
        """프로바이더 토큰 갱신.

        응답에 refresh_token이 없을 수 있습니다 (Apple). 호출자가 이전 값을 유지합니다.

        Raises:
            UpstreamAuthError: 갱신 실패
        """
        ...

    async def validate_token(self, access_token: str) -> bool:
        """프로바이더 토큰 유효성 확인. 예외를 던지지 않고 실패 시 False."""
        ...


class StrategyResolver(Protocol):
    """프로바이더 → 전략 조회 인터페이스.

    구현체:
        - StrategyRegistry (infrastructure/oauth/)
    """

    def resolve(self, provider: "OAuthProvider | str") -> ProviderStrategy:
        """전략 조회.

        Raises:
            UnsupportedProviderError: 알 수 없거나 등록되지 않은 프로바이더
        """
        ...
