"""Naver OAuth Strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.exceptions.profile import ProfileValidationError
from apps.oauth_gateway.infrastructure.oauth.http import build_url, resolve_state

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.services import ProfileNormalizer
    from apps.oauth_gateway.domain.value_objects import CanonicalProfile, ProviderTokenSet
    from apps.oauth_gateway.infrastructure.oauth.http import ProviderHttpClient
    from apps.oauth_gateway.infrastructure.oauth.providers.credentials import (
        OAuthClientCredentials,
    )

NAVER_AUTH_URL = "https://nid.naver.com/oauth2.0/authorize"
NAVER_TOKEN_URL = "https://nid.naver.com/oauth2.0/token"
NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"
NAVER_SUCCESS_RESULT_CODE = "00"


class NaverOAuthStrategy:
    """Naver OAuth 전략.

    네이버는 실패도 200으로 응답하므로 본문의 error / resultcode를 확인합니다.
    """

    provider = OAuthProvider.NAVER

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
            NAVER_AUTH_URL,
            {
                "response_type": "code",
                "client_id": self._credentials.client_id,
                "redirect_uri": self._credentials.redirect_uri,
                "state": resolve_state(state),
            },
        )

    async def exchange_code(self, code: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            NAVER_TOKEN_URL,
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
        payload = await self._fetch_me(access_token)
        return self._normalizer.normalize(self.provider, payload)

    async def refresh(self, refresh_token: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            NAVER_TOKEN_URL,
            {
                "grant_type": "refresh_token",
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "refresh_token": refresh_token,
            },
        )
        return self._http.parse_token_response(payload)

    async def validate_token(self, access_token: str) -> bool:
        """별도 토큰 정보 API가 없어 프로필 조회 성공 여부로 판단."""
        try:
            await self._fetch_me(access_token)
        except (UpstreamAuthError, ProfileValidationError):
            return False
        return True

    async def _fetch_me(self, access_token: str) -> dict[str, Any]:
        payload = await self._http.get_json(
            NAVER_PROFILE_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        result_code = payload.get("resultcode")
        if result_code != NAVER_SUCCESS_RESULT_CODE:
            raise UpstreamAuthError(self.provider.value, f"profile resultcode {result_code}")
        return payload
