"""Kakao OAuth Strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.infrastructure.oauth.http import build_url, resolve_state

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.services import ProfileNormalizer
    from apps.oauth_gateway.domain.value_objects import CanonicalProfile, ProviderTokenSet
    from apps.oauth_gateway.infrastructure.oauth.http import ProviderHttpClient
    from apps.oauth_gateway.infrastructure.oauth.providers.credentials import (
        OAuthClientCredentials,
    )

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"
KAKAO_TOKEN_INFO_URL = "https://kapi.kakao.com/v1/user/access_token_info"


class KakaoOAuthStrategy:
    """Kakao OAuth 전략.

    카카오는 scope를 보내지 않고 개발자 콘솔의 동의항목 설정을 따릅니다.
    """

    provider = OAuthProvider.KAKAO

    def __init__(
        self,
        credentials: "OAuthClientCredentials",
        http: "ProviderHttpClient",
        normalizer: "ProfileNormalizer",
    ) -> None:
        self._credentials = credentials
        self._http = http
        self._normalizer = normalizer

    def generate_auth_url(self, state: str | None = None) -> str:
        return build_url(
            KAKAO_AUTH_URL,
            {
                "client_id": self._credentials.client_id,
                "redirect_uri": self._credentials.redirect_uri,
                "response_type": "code",
                "state": resolve_state(state),
            },
        )

    async def exchange_code(self, code: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            KAKAO_TOKEN_URL,
            {
                "grant_type": "authorization_code",
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "redirect_uri": self._credentials.redirect_uri,
                "code": code,
            },
        )
        return self._http.parse_token_response(payload)

    async def fetch_profile(
        self,
        access_token: str,
        *,
        id_token: str | None = None,
    ) -> "CanonicalProfile":
        payload = await self._http.get_json(
            KAKAO_PROFILE_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        return self._normalizer.normalize(self.provider, payload)

    async def refresh(self, refresh_token: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            KAKAO_TOKEN_URL,
            {
                "grant_type": "refresh_token",
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "refresh_token": refresh_token,
            },
        )
        return self._http.parse_token_response(payload)

    async def validate_token(self, access_token: str) -> bool:
        """토큰 정보 API가 2xx를 반환하면 유효."""
        try:
            await self._http.get_json(
                KAKAO_TOKEN_INFO_URL,
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except UpstreamAuthError:
            return False
        return True
