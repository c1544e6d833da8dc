"""Apple OAuth Strategy.

Apple은 정적 client_secret 대신 등록된 개인키(ES256)로 서명한 client assertion JWT를 요구합니다.
프로필은 userinfo API가 아니라 토큰 응답의 ID 토큰 클레임에 담겨 옵니다.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jose import jwt
from jose.exceptions import JOSEError

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.infrastructure.oauth.http import build_url, resolve_state

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.services import ProfileNormalizer
    from apps.oauth_gateway.domain.value_objects import CanonicalProfile, ProviderTokenSet
    from apps.oauth_gateway.infrastructure.oauth.http import ProviderHttpClient

logger = logging.getLogger(__name__)

APPLE_ISSUER = "https://appleid.apple.com"
APPLE_AUTH_URL = "https://appleid.apple.com/auth/authorize"
APPLE_TOKEN_URL = "https://appleid.apple.com/auth/token"
APPLE_KEYS_URL = "https://appleid.apple.com/auth/keys"
APPLE_DEFAULT_SCOPES = ("name", "email")
APPLE_ID_TOKEN_ALGORITHM = "RS256"
CLIENT_SECRET_ALGORITHM = "ES256"
CLIENT_SECRET_MAX_LIFETIME_SECONDS = 3600


@dataclass(frozen=True, slots=True)
class AppleCredentials:
    """Apple 개발자 계정에 등록된 정보.

    Attributes:
        client_id: Services ID
        team_id: 팀 ID (client assertion iss)
        key_id: 키 ID (client assertion 헤더 kid)
        private_key: .p8 개인키 PEM
        redirect_uri: 콜백 URL
    """

    client_id: str
    team_id: str
    key_id: str
    private_key: str = field(repr=False)
    redirect_uri: str | None = None


class AppleClientSecretSigner:
    """Apple client assertion 생성기.

    토큰 요청마다 새로 서명하며 캐시하지 않습니다.
    """

    def __init__(
        self,
        credentials: AppleCredentials,
        lifetime_seconds: int = CLIENT_SECRET_MAX_LIFETIME_SECONDS,
    ) -> None:
        self._credentials = credentials
        self._lifetime = min(lifetime_seconds, CLIENT_SECRET_MAX_LIFETIME_SECONDS)

    def sign(self) -> str:
        now = int(time.time())
        claims = {
            "iss": self._credentials.team_id,
            "iat": now,
            "exp": now + self._lifetime,
            "aud": APPLE_ISSUER,
            "sub": self._credentials.client_id,
        }
        return jwt.encode(
            claims,
            self._credentials.private_key,
            algorithm=CLIENT_SECRET_ALGORITHM,
            headers={"kid": self._credentials.key_id},
        )


class AppleOAuthStrategy:
    """Apple OAuth 전략."""

    provider = OAuthProvider.APPLE

    def __init__(
        self,
        credentials: AppleCredentials,
        http: "ProviderHttpClient",
        normalizer: "ProfileNormalizer",
        signer: AppleClientSecretSigner | None = None,
    ) -> None:
        self._credentials = credentials
        self._http = http
        self._normalizer = normalizer
        self._signer = signer or AppleClientSecretSigner(credentials)

    def generate_auth_url(self, state: str | None = None) -> str:
        # name/email scope는 form_post 응답 모드에서만 허용됨
        return build_url(
            APPLE_AUTH_URL,
            {
                "response_type": "code",
                "client_id": self._credentials.client_id,
                "redirect_uri": self._credentials.redirect_uri,
                "scope": " ".join(APPLE_DEFAULT_SCOPES),
                "response_mode": "form_post",
                "state": resolve_state(state),
            },
        )

    async def exchange_code(self, code: str) -> "ProviderTokenSet":
        payload = await self._http.post_form(
            APPLE_TOKEN_URL,
            {
                "grant_type": "authorization_code",
                "code": code,
                "client_id": self._credentials.client_id,
                "client_secret": self._client_secret(),
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
        """ID 토큰 클레임으로 프로필 생성 (네트워크 호출 없음).

        ID 토큰은 토큰 엔드포인트에서 TLS로 직접 받은 값입니다.
        """
        claims = self._decode_claims(id_token or access_token)
        if claims.get("iss") != APPLE_ISSUER or claims.get("aud") != self._credentials.client_id:
            raise UpstreamAuthError(self.provider.value, "id_token issuer/audience mismatch")
        return self._normalizer.normalize(self.provider, claims)

    async def refresh(self, refresh_token: str) -> "ProviderTokenSet":
        # Apple은 갱신 응답에 refresh_token을 다시 주지 않음
        payload = await self._http.post_form(
            APPLE_TOKEN_URL,
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "client_id": self._credentials.client_id,
                "client_secret": self._client_secret(),
            },
        )
        return self._http.parse_token_response(payload)

    async def validate_token(self, access_token: str) -> bool:
        """Apple 공개키(JWK)로 ID 토큰 서명, issuer, audience 검증."""
        try:
            header = jwt.get_unverified_header(access_token)
            key_set = await self._http.get_json(APPLE_KEYS_URL)
            jwk = next(
                (key for key in key_set.get("keys", []) if key.get("kid") == header.get("kid")),
                None,
            )
            if jwk is None:
                return False

            jwt.decode(
                access_token,
                jwk,
                algorithms=[APPLE_ID_TOKEN_ALGORITHM],
                audience=self._credentials.client_id,
                issuer=APPLE_ISSUER,
                options={"verify_at_hash": False},
            )
        except (JOSEError, UpstreamAuthError) as e:
            logger.debug("Apple token validation failed", extra={"error_type": type(e).__name__})
            return False
        return True

    def _client_secret(self) -> str:
        try:
            return self._signer.sign()
        except JOSEError as e:
            raise UpstreamAuthError(self.provider.value, "failed to sign client secret") from e

    def _decode_claims(self, token: str) -> dict[str, Any]:
        try:
            return jwt.get_unverified_claims(token)
        except JOSEError as e:
            raise UpstreamAuthError(self.provider.value, "failed to decode id_token") from e
