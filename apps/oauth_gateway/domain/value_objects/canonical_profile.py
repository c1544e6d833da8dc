"""Canonical Profile Value Object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from apps.oauth_gateway.domain.enums.provider import OAuthProvider


@dataclass(frozen=True)
class CanonicalProfile:
    """프로바이더 무관 정규화 프로필.

    (provider, external_id)가 로컬 사용자를 찾는 자연키입니다.
    콜백마다 새로 만들어지며 그대로 저장되지 않습니다.
    """

    external_id: str
    provider: OAuthProvider
    email: str | None = None
    display_name: str | None = None
    picture_url: str | None = None
    email_verified: bool | None = None
    raw_payload: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def non_empty_fields(self) -> dict[str, str]:
        """사용자 레코드에 병합할 수 있는 값이 있는 필드만 반환."""
        candidates = {
            "email": self.email,
            "name": self.display_name,
            "picture": self.picture_url,
        }
        return {key: value for key, value in candidates.items() if value}
