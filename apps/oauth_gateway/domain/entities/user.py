"""User entity.

(provider, provider_id) 조합과 email이 각각 유일합니다.
SQLAlchemy 매핑은 infrastructure/persistence_postgres/mappings/users.py에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """소셜 로그인 사용자 엔티티."""

    id: UUID
    provider: OAuthProvider
    provider_id: str
    email: str | None = None
    name: str | None = None
    picture: str | None = None
    email_verified: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_profile(cls, user_id: UUID, profile: CanonicalProfile) -> "User":
        """정규화 프로필로 신규 사용자를 만듭니다.

        이름이 없으면 ``User_<id 앞 8자리>``를 기본 이름으로 사용하고,
        이메일이 있으면 인증된 것으로 표시합니다.
        """
        return cls(
            id=user_id,
            provider=profile.provider,
            provider_id=profile.external_id,
            email=profile.email,
            name=profile.display_name or f"User_{user_id.hex[:8]}",
            picture=profile.picture_url,
            email_verified=profile.email is not None,
        )

    def changed_fields(self, profile: CanonicalProfile) -> dict[str, str]:
        """프로필에서 값이 있고 현재와 다른 필드만 반환.

        값이 없는 필드로 기존 값을 덮어쓰지 않습니다.
        """
        return {
            key: value
            for key, value in profile.non_empty_fields().items()
            if getattr(self, key) != value
        }

    def apply_profile(self, fields: dict[str, str]) -> None:
        """병합할 필드를 반영합니다."""
        for key, value in fields.items():
            setattr(self, key, value)
        if fields.get("email"):
            self.email_verified = True
        self.updated_at = _utcnow()
