"""UserStore Port.

인증 엔진이 사용자/프로바이더 토큰 저장소에 요구하는 연산입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from apps.oauth_gateway.domain.entities.user import User
    from apps.oauth_gateway.domain.enums.provider import OAuthProvider
    from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet


class UserStore(Protocol):
    """사용자/토큰 저장소 인터페이스.

    (provider, provider_id)와 email의 유일성은 저장소 계층의 unique 제약으로 보장해야 합니다.
    동시에 들어온 신규 사용자 콜백 중 하나만 생성에 성공하고 나머지는 ConflictError를 봅니다.

    구현체:
        - SqlaUserStore (infrastructure/persistence_postgres/)
    """

    async def find_user(self, provider: "OAuthProvider", external_id: str) -> "User | None":
        """(provider, external_id)로 사용자 조회."""
        ...

    async def find_user_by_email(self, email: str) -> "User | None":
        """이메일로 사용자 조회."""
        ...

    async def get_user(self, user_id: UUID) -> "User | None":
        """내부 ID로 사용자 조회."""
        ...

    async def create_user(self, user: "User") -> "User":
        """사용자 생성.

        Raises:
            ConflictError: unique 제약 위반
        """
        ...

    async def update_user_profile(self, user_id: UUID, fields: dict[str, str]) -> "User":
        """사용자 프로필 부분 갱신.

        Raises:
            UserNotFoundError: 사용자 없음
            ConflictError: 이메일 unique 제약 위반
        """
        ...

    async def upsert_provider_token(
        self,
        user_id: UUID,
        provider: "OAuthProvider",
        token_set: "ProviderTokenSet",
    ) -> None:
        """(user, provider)당 한 행만 유지하도록 토큰 저장 (덮어쓰기)."""
        ...

    async def find_provider_token(
        self,
        user_id: UUID,
        provider: "OAuthProvider",
    ) -> "ProviderTokenSet | None":
        """저장된 프로바이더 토큰 조회. expires_in은 남은 시간입니다."""
        ...

    async def delete_provider_token(self, user_id: UUID, provider: "OAuthProvider") -> None:
        """프로바이더 토큰 삭제."""
        ...

    async def delete_user(self, user_id: UUID) -> None:
        """사용자 삭제 (프로바이더 토큰 포함)."""
        ...
