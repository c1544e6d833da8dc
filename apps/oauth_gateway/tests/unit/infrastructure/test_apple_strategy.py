"""Apple OAuth Strategy 단위 테스트.

테스트용 키는 cryptography로 생성합니다.
"""

import time
from urllib.parse import parse_qs

import httpx
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from jose import jwk, jwt

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.services import ProfileNormalizer
from apps.oauth_gateway.infrastructure.oauth import ProviderHttpClient
from apps.oauth_gateway.infrastructure.oauth.providers import (
    AppleClientSecretSigner,
    AppleCredentials,
    AppleOAuthStrategy,
)
from apps.oauth_gateway.infrastructure.oauth.providers.apple import APPLE_ISSUER

CLIENT_ID = "com.example.service"


def _pem(private_key) -> str:
    return private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()


def _public_pem(private_key) -> str:
    return (
        private_key.public_key()
        .public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo)
        .decode()
    )


@pytest.fixture(scope="module")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def credentials(ec_key) -> AppleCredentials:
    return AppleCredentials(
        client_id=CLIENT_ID,
        team_id="TEAM123",
        key_id="KEY123",
        private_key=_pem(ec_key),
        redirect_uri="https://gw.example.com/auth/apple/callback",
    )


@pytest.fixture
def apple_keys(rsa_key) -> dict:
    key = jwk.construct(_public_pem(rsa_key), "RS256").to_dict()
    key.update({"kid": "apple-kid", "use": "sig"})
    return {"keys": [key]}


def _id_token(rsa_key, **overrides) -> str:
    now = int(time.time())
    claims = {
        "iss": APPLE_ISSUER,
        "aud": CLIENT_ID,
        "sub": "001234.abcd",
        "email": "x@privaterelay.appleid.com",
        "email_verified": "true",
        "iat": now,
        "exp": now + 600,
    }
    claims.update(overrides)
    return jwt.encode(claims, _pem(rsa_key), algorithm="RS256", headers={"kid": "apple-kid"})


def _strategy(credentials, handler) -> AppleOAuthStrategy:
    http = ProviderHttpClient(OAuthProvider.APPLE, transport=httpx.MockTransport(handler))
    return AppleOAuthStrategy(credentials, http, ProfileNormalizer())


class TestAppleClientSecretSigner:
    def test_signs_es256_assertion(self, credentials, ec_key) -> None:
        token = AppleClientSecretSigner(credentials).sign()

        header = jwt.get_unverified_header(token)
        claims = jwt.decode(
            token, _public_pem(ec_key), algorithms=["ES256"], audience=APPLE_ISSUER
        )
        assert header["kid"] == "KEY123"
        assert header["alg"] == "ES256"
        assert claims["iss"] == "TEAM123"
        assert claims["sub"] == CLIENT_ID

    def test_lifetime_capped_at_one_hour(self, credentials) -> None:
        token = AppleClientSecretSigner(credentials, lifetime_seconds=86400).sign()

        claims = jwt.get_unverified_claims(token)
        assert claims["exp"] - claims["iat"] == 3600

    def test_credentials_repr_hides_key(self, credentials) -> None:
        assert "PRIVATE KEY" not in repr(credentials)


class TestAppleOAuthStrategy:
    def test_auth_url_uses_form_post(self, credentials) -> None:
        strategy = _strategy(credentials, lambda r: httpx.Response(200, json={}))

        url = strategy.generate_auth_url("abc")
        query = parse_qs(url.split("?", 1)[1])

        assert query["response_mode"] == ["form_post"]
        assert query["scope"] == ["name email"]
        assert query["state"] == ["abc"]
        assert "client_secret" not in query
        assert "PRIVATE" not in url
        assert "KEY123" not in url and "TEAM123" not in url

    @pytest.mark.asyncio
    async def test_exchange_sends_signed_client_secret(self, credentials, rsa_key) -> None:
        seen: list[httpx.Request] = []
        id_token = _id_token(rsa_key)

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "access_token": "apple-access",
                    "refresh_token": "apple-refresh",
                    "id_token": id_token,
                    "expires_in": 3600,
                },
            )

        strategy = _strategy(credentials, handler)
        tokens = await strategy.exchange_code("code")

        form = parse_qs(seen[0].content.decode())
        assert jwt.get_unverified_header(form["client_secret"][0])["kid"] == "KEY123"
        assert tokens.id_token == id_token

    @pytest.mark.asyncio
    async def test_profile_from_id_token(self, credentials, rsa_key) -> None:
        strategy = _strategy(credentials, lambda r: httpx.Response(500))

        profile = await strategy.fetch_profile("apple-access", id_token=_id_token(rsa_key))

        assert profile.external_id == "001234.abcd"
        assert profile.email_verified is True
        assert profile.display_name is None

    @pytest.mark.asyncio
    async def test_profile_rejects_foreign_audience(self, credentials, rsa_key) -> None:
        strategy = _strategy(credentials, lambda r: httpx.Response(500))

        with pytest.raises(UpstreamAuthError):
            await strategy.fetch_profile("a", id_token=_id_token(rsa_key, aud="other.app"))

    @pytest.mark.asyncio
    async def test_validate_token_with_jwks(self, credentials, rsa_key, apple_keys) -> None:
        strategy = _strategy(credentials, lambda r: httpx.Response(200, json=apple_keys))

        assert await strategy.validate_token(_id_token(rsa_key)) is True
        assert await strategy.validate_token(_id_token(rsa_key, exp=int(time.time()) - 10)) is False

    @pytest.mark.asyncio
    async def test_validate_token_rejects_other_signer(self, credentials, apple_keys) -> None:
        strategy = _strategy(credentials, lambda r: httpx.Response(200, json=apple_keys))
        forged = _id_token(rsa.generate_private_key(public_exponent=65537, key_size=2048))

        assert await strategy.validate_token(forged) is False
