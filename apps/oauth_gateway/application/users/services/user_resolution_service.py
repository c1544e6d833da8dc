"""User Resolution Service.

정규화 프로필로 로컬 사용자를 찾거나 생성하는 서비스(연주자)입니다.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.oauth_gateway.domain.entities.user import User
from apps.oauth_gateway.domain.exceptions.user import ConflictError
from apps.oauth_gateway.domain.value_objects.email import mask_email

if TYPE_CHECKING:
    from apps.oauth_gateway.application.users.ports import UserStore
    from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedUser:
    """조회/생성 결과."""

    user: User
    is_new_user: bool


class UserResolutionService:
    """(provider, external_id) 기준 사용자 find-or-create.

    - 있으면: 값이 있는 프로필 필드만 병합 (빈 값으로 덮어쓰지 않음)
    - 없고 이메일이 다른 계정에 있으면: ConflictError (자동 연결하지 않음)
    - 없으면: 새 ID로 생성, 이메일이 있으면 인증 처리
    """

    def __init__(self, user_store: "UserStore") -> None:
        self._user_store = user_store

    async def find_or_create(self, profile: "CanonicalProfile") -> ResolvedUser:
        """사용자 조회 또는 생성.

        Raises:
            ConflictError: 이메일이 다른 프로바이더 사용자에 연결됨
        """
        existing = await self._user_store.find_user(profile.provider, profile.external_id)
        if existing is not None:
            changed = existing.changed_fields(profile)
            if changed:
                existing = await self._user_store.update_user_profile(existing.id, changed)
            return ResolvedUser(user=existing, is_new_user=False)

        if profile.email:
            owner = await self._user_store.find_user_by_email(profile.email)
            if owner is not None:
                logger.info(
                    "Email already bound to another identity",
                    extra={
                        "provider": str(profile.provider),
                        "owner_provider": str(owner.provider),
                        "email": mask_email(profile.email),
                    },
                )
                raise ConflictError()

        user = User.from_profile(uuid.uuid4(), profile)
        created = await self._user_store.create_user(user)
        return ResolvedUser(user=created, is_new_user=True)
