"""Test Factories.

인메모리 저장소와 가짜 전략. DB/네트워크 없이 유스케이스를 검증합니다.
"""

from __future__ import annotations

from dataclasses import replace
from uuid import UUID

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.domain.entities.user import User
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.exceptions.user import ConflictError, UserNotFoundError
from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile
from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet


class InMemoryUserStore:
    """UserStore 인메모리 구현.

    writes에 쓰기 호출 이름을 순서대로 기록합니다.
    """

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.tokens: dict[tuple[UUID, OAuthProvider], ProviderTokenSet] = {}
        self.writes: list[str] = []

    async def find_user(self, provider: OAuthProvider, external_id: str) -> User | None:
        for user in self.users.values():
            if user.provider == provider and user.provider_id == external_id:
                return user
        return None

    async def find_user_by_email(self, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def get_user(self, user_id: UUID) -> User | None:
        return self.users.get(user_id)

    async def create_user(self, user: User) -> User:
        if await self.find_user(user.provider, user.provider_id) is not None:
            raise ConflictError("User identity or email already exists")
        if user.email and await self.find_user_by_email(user.email) is not None:
            raise ConflictError("User identity or email already exists")
        self.writes.append("create_user")
        self.users[user.id] = user
        return user

    async def update_user_profile(self, user_id: UUID, fields: dict[str, str]) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        email = fields.get("email")
        if email:
            owner = await self.find_user_by_email(email)
            if owner is not None and owner.id != user_id:
                raise ConflictError()
        self.writes.append("update_user_profile")
        user.apply_profile(fields)
        return user

    async def delete_user(self, user_id: UUID) -> None:
        self.writes.append("delete_user")
        self.users.pop(user_id, None)
        for key in [key for key in self.tokens if key[0] == user_id]:
            del self.tokens[key]

    async def upsert_provider_token(
        self,
        user_id: UUID,
        provider: OAuthProvider,
        token_set: ProviderTokenSet,
    ) -> None:
        self.writes.append("upsert_provider_token")
        previous = self.tokens.get((user_id, provider))
        self.tokens[(user_id, provider)] = (
            token_set.carry_over(previous) if previous is not None else token_set
        )

    async def find_provider_token(
        self,
        user_id: UUID,
        provider: OAuthProvider,
    ) -> ProviderTokenSet | None:
        return self.tokens.get((user_id, provider))

    async def delete_provider_token(self, user_id: UUID, provider: OAuthProvider) -> None:
        self.writes.append("delete_provider_token")
        self.tokens.pop((user_id, provider), None)


class InMemoryStateStore:
    """OAuthStateStore 인메모리 구현 (TTL 무시)."""

    def __init__(self) -> None:
        self.states: dict = {}

    async def save(self, state, data, ttl_seconds: int = 600) -> None:
        self.states[state] = data

    async def consume(self, state):
        return self.states.pop(state, None)


class FakeStrategy:
    """고정 응답을 돌려주는 ProviderStrategy.

    fail_exchange가 설정되면 토큰 교환에서 프로바이더 500을 흉내냅니다.
    """

    def __init__(
        self,
        provider: OAuthProvider,
        profile: CanonicalProfile,
        tokens: ProviderTokenSet | None = None,
        refreshed: ProviderTokenSet | None = None,
    ) -> None:
        self.provider = provider
        self.profile = profile
        self.tokens = tokens or ProviderTokenSet(
            access_token="provider-access",
            expires_in=3600,
            refresh_token="provider-refresh",
        )
        self.refreshed = refreshed or ProviderTokenSet(
            access_token="provider-access-2",
            expires_in=3600,
        )
        self.fail_exchange = False
        self.fail_profile = False
        self.exchanged_codes: list[str] = []
        self.refreshed_with: list[str] = []

    def generate_auth_url(self, state: str | None = None) -> str:
        return f"https://auth.example.com/{self.provider.value}?state={state}"

    async def exchange_code(self, code: str) -> ProviderTokenSet:
        self.exchanged_codes.append(code)
        if self.fail_exchange:
            raise UpstreamAuthError(self.provider.value, "API error: 500")
        return self.tokens

    async def fetch_profile(
        self,
        access_token: str,
        *,
        id_token: str | None = None,
    ) -> CanonicalProfile:
        if self.fail_profile:
            raise UpstreamAuthError(self.provider.value, "API error: 401")
        return self.profile

    async def refresh(self, refresh_token: str) -> ProviderTokenSet:
        self.refreshed_with.append(refresh_token)
        return self.refreshed

    async def validate_token(self, access_token: str) -> bool:
        return True


def make_profile(
    provider: OAuthProvider = OAuthProvider.KAKAO,
    external_id: str = "12345",
    **overrides,
) -> CanonicalProfile:
    """테스트용 정규화 프로필."""
    profile = CanonicalProfile(
        external_id=external_id,
        provider=provider,
        email="user@example.com",
        display_name="Tester",
        picture_url="https://img.example.com/a.png",
    )
    return replace(profile, **overrides)
