"""Google OAuth Strategy."""

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

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
GOOGLE_TOKEN_INFO_URL = "https://oauth2.googleapis.com/tokeninfo"
GOOGLE_DEFAULT_SCOPES = ("openid", "email", "profile")


class GoogleOAuthStrategy:
    """Google OAuth 전략.

    refresh_token을 받기 위해 access_type=offline으로 요청합니다.
    """

    provider = OAuthProvider.GOOGLE

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
            GOOGLE_AUTH_URL,
            {
                "client_id": self._credentials.client_id,
                "redirect_uri": self._credentials.redirect_uri,
                "response_type": "code",
                "scope": " ".join(GOOGLE_DEFAULT_SCOPES),
                "access_type": "offline",
                "state": resolve_state(state),
            },
        )

    async def exchange_code(self, code: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            GOOGLE_TOKEN_URL,
            {
                "grant_type": "authorization_code",
                "code": code,
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "redirect_uri": self._credentials.redirect_uri,
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
            GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        return self._normalizer.normalize(self.provider, payload)

    async def refresh(self, refresh_token: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            GOOGLE_TOKEN_URL,
            {
                "grant_type": "refresh_token",
                "client_id": self._credentials.client_id,
                "client_secret": self._credentials.client_secret,
                "refresh_token": refresh_token,
            },
        )
        return self._http.parse_token_response(payload)

    async def validate_token(self, access_token: str) -> bool:
        """tokeninfo가 2xx이고 우리 클라이언트에 발급된 토큰이면 유효."""
        try:
            info = await self._http.get_json(
                GOOGLE_TOKEN_INFO_URL,
                params={"access_token": access_token},
            )
        except UpstreamAuthError:
            return False
        audience = info.get("aud") or info.get("azp")
        return audience is not None and audience == self._credentials.client_id
