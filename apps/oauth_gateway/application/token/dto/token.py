"""Token DTOs."""

from dataclasses import dataclass
from uuid import UUID

from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile


@dataclass(frozen=True, slots=True)
class RefreshSessionRequest:
    """세션 갱신 요청."""

    refresh_token: str


@dataclass(frozen=True, slots=True)
class UserInfo:
    """인증된 사용자의 최신 프로바이더 프로필."""

    user_id: UUID
    profile: CanonicalProfile
