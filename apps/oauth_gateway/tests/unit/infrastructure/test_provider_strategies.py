"""Provider Strategy 단위 테스트.

httpx.MockTransport로 프로바이더 API를 흉내냅니다.
"""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.services import ProfileNormalizer
from apps.oauth_gateway.infrastructure.oauth import (
    GoogleOAuthStrategy,
    KakaoOAuthStrategy,
    NaverOAuthStrategy,
    ProviderHttpClient,
)
from apps.oauth_gateway.infrastructure.oauth.providers import OAuthClientCredentials

CREDENTIALS = OAuthClientCredentials(
    client_id="client-id",
    client_secret="super-secret",
    redirect_uri="https://gw.example.com/auth/callback",
)


def _strategy(cls, provider: OAuthProvider, handler):
    http = ProviderHttpClient(provider, transport=httpx.MockTransport(handler))
    return cls(CREDENTIALS, http, ProfileNormalizer())


def _query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlparse(url).query)


class TestAuthUrl:
    @pytest.mark.parametrize(
        ("cls", "provider"),
        [
            (KakaoOAuthStrategy, OAuthProvider.KAKAO),
            (NaverOAuthStrategy, OAuthProvider.NAVER),
            (GoogleOAuthStrategy, OAuthProvider.GOOGLE),
        ],
    )
    def test_state_verbatim_and_no_secret(self, cls, provider) -> None:
        strategy = _strategy(cls, provider, lambda request: httpx.Response(200, json={}))

        url = strategy.generate_auth_url("st@te/with spaces")
        query = _query(url)

        assert query["state"] == ["st@te/with spaces"]
        assert query["client_id"] == ["client-id"]
        assert query["response_type"] == ["code"]
        assert "super-secret" not in url

    def test_generates_state_when_missing(self) -> None:
        strategy = _strategy(
            KakaoOAuthStrategy, OAuthProvider.KAKAO, lambda r: httpx.Response(200, json={})
        )

        assert len(_query(strategy.generate_auth_url())["state"][0]) > 20

    def test_google_requests_offline_access(self) -> None:
        strategy = _strategy(
            GoogleOAuthStrategy, OAuthProvider.GOOGLE, lambda r: httpx.Response(200, json={})
        )

        query = _query(strategy.generate_auth_url("s"))

        assert query["access_type"] == ["offline"]
        assert query["scope"] == ["openid email profile"]


class TestKakaoStrategy:
    @pytest.mark.asyncio
    async def test_exchange_and_profile(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/oauth/token":
                return httpx.Response(
                    200,
                    json={
                        "access_token": "kakao-access",
                        "refresh_token": "kakao-refresh",
                        "expires_in": 21599,
                        "token_type": "bearer",
                        "scope": "profile_nickname account_email",
                    },
                )
            return httpx.Response(
                200,
                json={
                    "id": 12345,
                    "kakao_account": {
                        "email": "a@b.com",
                        "profile": {"nickname": "N", "profile_image_url": "http://x/p.png"},
                    },
                },
            )

        strategy = _strategy(KakaoOAuthStrategy, OAuthProvider.KAKAO, handler)

        tokens = await strategy.exchange_code("auth-code")
        profile = await strategy.fetch_profile(tokens.access_token)

        assert tokens.access_token == "kakao-access"
        assert tokens.refresh_token == "kakao-refresh"
        assert tokens.scope == ("profile_nickname", "account_email")
        assert parse_qs(seen[0].content.decode())["code"] == ["auth-code"]
        assert seen[1].headers["Authorization"] == "Bearer kakao-access"
        assert profile.external_id == "12345"
        assert profile.picture_url == "https://x/p.png"

    @pytest.mark.asyncio
    async def test_server_error_is_upstream_error(self) -> None:
        strategy = _strategy(
            KakaoOAuthStrategy,
            OAuthProvider.KAKAO,
            lambda r: httpx.Response(500, text="internal details"),
        )

        with pytest.raises(UpstreamAuthError) as exc_info:
            await strategy.exchange_code("code")

        assert exc_info.value.reason == "API error: 500"
        assert "internal details" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_token_error_field(self) -> None:
        strategy = _strategy(
            KakaoOAuthStrategy,
            OAuthProvider.KAKAO,
            lambda r: httpx.Response(200, json={"error": "invalid_grant"}),
        )

        with pytest.raises(UpstreamAuthError) as exc_info:
            await strategy.exchange_code("code")

        assert exc_info.value.reason == "token error"
        assert "invalid_grant" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_validate_token(self) -> None:
        valid = _strategy(
            KakaoOAuthStrategy, OAuthProvider.KAKAO, lambda r: httpx.Response(200, json={"id": 1})
        )
        invalid = _strategy(
            KakaoOAuthStrategy, OAuthProvider.KAKAO, lambda r: httpx.Response(401, json={})
        )

        assert await valid.validate_token("t") is True
        assert await invalid.validate_token("t") is False


class TestNaverStrategy:
    @pytest.mark.asyncio
    async def test_failure_result_code(self) -> None:
        strategy = _strategy(
            NaverOAuthStrategy,
            OAuthProvider.NAVER,
            lambda r: httpx.Response(200, json={"resultcode": "024", "message": "fail"}),
        )

        with pytest.raises(UpstreamAuthError):
            await strategy.fetch_profile("t")
        assert await strategy.validate_token("t") is False

    @pytest.mark.asyncio
    async def test_profile(self) -> None:
        strategy = _strategy(
            NaverOAuthStrategy,
            OAuthProvider.NAVER,
            lambda r: httpx.Response(
                200,
                json={"resultcode": "00", "response": {"id": "n-1", "nickname": "닉"}},
            ),
        )

        profile = await strategy.fetch_profile("t")

        assert profile.external_id == "n-1"
        assert profile.display_name == "닉"

    @pytest.mark.asyncio
    async def test_refresh_without_new_refresh_token(self) -> None:
        strategy = _strategy(
            NaverOAuthStrategy,
            OAuthProvider.NAVER,
            lambda r: httpx.Response(200, json={"access_token": "new", "expires_in": "3600"}),
        )

        tokens = await strategy.refresh("old-refresh")

        assert tokens.access_token == "new"
        assert tokens.expires_in == 3600
        assert tokens.refresh_token is None


class TestGoogleStrategy:
    @pytest.mark.asyncio
    async def test_validate_token_checks_audience(self) -> None:
        ours = _strategy(
            GoogleOAuthStrategy,
            OAuthProvider.GOOGLE,
            lambda r: httpx.Response(200, json={"aud": "client-id"}),
        )
        theirs = _strategy(
            GoogleOAuthStrategy,
            OAuthProvider.GOOGLE,
            lambda r: httpx.Response(200, json={"aud": "someone-else"}),
        )
        missing = _strategy(
            GoogleOAuthStrategy,
            OAuthProvider.GOOGLE,
            lambda r: httpx.Response(200, json={"expires_in": 3599}),
        )

        assert await ours.validate_token("t") is True
        assert await theirs.validate_token("t") is False
        assert await missing.validate_token("t") is False


class TestProviderHttpClient:
    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = ProviderHttpClient(OAuthProvider.GOOGLE, transport=httpx.MockTransport(handler))

        with pytest.raises(UpstreamAuthError) as exc_info:
            await client.get_json("https://example.com")

        assert exc_info.value.reason == "request timed out"

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        client = ProviderHttpClient(
            OAuthProvider.GOOGLE,
            transport=httpx.MockTransport(lambda r: httpx.Response(200, text="<html>")),
        )

        with pytest.raises(UpstreamAuthError) as exc_info:
            await client.get_json("https://example.com")

        assert exc_info.value.reason == "malformed response"

    @pytest.mark.asyncio
    async def test_omits_none_form_values(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = ProviderHttpClient(OAuthProvider.GOOGLE, transport=httpx.MockTransport(handler))
        await client.post_form("https://example.com", {"a": "1", "b": None})

        assert parse_qs(seen[0].content.decode()) == {"a": ["1"]}


class TestNaverExchange:
    @pytest.mark.asyncio
    async def test_exchange_sends_redirect_uri(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"access_token": "naver-access", "expires_in": "3600"})

        strategy = _strategy(NaverOAuthStrategy, OAuthProvider.NAVER, handler)

        await strategy.exchange_code("auth-code")

        form = parse_qs(seen[0].content.decode())
        assert form["redirect_uri"] == ["https://gw.example.com/auth/callback"]
        assert form["code"] == ["auth-code"]
