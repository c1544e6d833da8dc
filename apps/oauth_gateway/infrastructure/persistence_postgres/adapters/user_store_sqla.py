"""SQLAlchemy implementation of UserStore.

사용자 및 프로바이더 토큰 저장소 구현체입니다.
변경은 요청 세션에 flush만 하고, 커밋은 SqlaTransactionManager가 담당합니다.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.oauth_gateway.domain.entities.user import User
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.exceptions.user import ConflictError, UserNotFoundError
from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet
from apps.oauth_gateway.infrastructure.persistence_postgres.mappings import (
    oauth_tokens_table,
    users_table,
)


class SqlaUserStore:
    """UserStore SQLAlchemy 구현.

    (provider, provider_id)와 email의 unique 제약 위반은 ConflictError로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    # ============================================================
    # Users
    # ============================================================

    async def find_user(self, provider: OAuthProvider, external_id: str) -> User | None:
        result = await self._session.execute(
            select(User).where(
                users_table.c.provider == provider,
                users_table.c.provider_id == external_id,
            )
        )
        return result.scalar_one_or_none()

    async def find_user_by_email(self, email: str) -> User | None:
        result = await self._session.execute(select(User).where(users_table.c.email == email))
        return result.scalar_one_or_none()

    async def get_user(self, user_id: UUID) -> User | None:
        return await self._session.get(User, user_id)

    async def create_user(self, user: User) -> User:
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("User identity or email already exists") from e
        return user

    async def update_user_profile(self, user_id: UUID, fields: dict[str, str]) -> User:
        user = await self._session.get(User, user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.apply_profile(fields)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError() from e
        return user

    async def delete_user(self, user_id: UUID) -> None:
        await self._session.execute(
            delete(oauth_tokens_table).where(oauth_tokens_table.c.user_id == user_id)
        )
        await self._session.execute(delete(users_table).where(users_table.c.id == user_id))

    # ============================================================
    # Provider Tokens
    # ============================================================

    async def upsert_provider_token(
        self,
        user_id: UUID,
        provider: OAuthProvider,
        token_set: ProviderTokenSet,
    ) -> None:
        """(user_id, provider) 충돌 시 덮어쓰기.

        새 응답에 refresh_token/id_token이 없으면 저장된 값을 유지합니다.
        """
        now = datetime.now(timezone.utc)
        values = {
            "access_token": token_set.access_token,
            "refresh_token": token_set.refresh_token,
            "id_token": token_set.id_token,
            "token_type": token_set.token_type,
            "scope": " ".join(token_set.scope) or None,
            "expires_at": token_set.expires_at(now),
            "updated_at": now,
        }
        stmt = pg_insert(oauth_tokens_table).values(
            id=uuid4(),
            user_id=user_id,
            provider=provider.value,
            created_at=now,
            **values,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[oauth_tokens_table.c.user_id, oauth_tokens_table.c.provider],
            set_={
                **values,
                "refresh_token": func.coalesce(
                    stmt.excluded.refresh_token, oauth_tokens_table.c.refresh_token
                ),
                "id_token": func.coalesce(stmt.excluded.id_token, oauth_tokens_table.c.id_token),
            },
        )
        await self._session.execute(stmt)

    async def find_provider_token(
        self,
        user_id: UUID,
        provider: OAuthProvider,
    ) -> ProviderTokenSet | None:
        result = await self._session.execute(
            select(oauth_tokens_table).where(
                oauth_tokens_table.c.user_id == user_id,
                oauth_tokens_table.c.provider == provider.value,
            )
        )
        row = result.mappings().one_or_none()
        if row is None:
            return None

        remaining = row["expires_at"] - datetime.now(timezone.utc)
        return ProviderTokenSet(
            access_token=row["access_token"],
            expires_in=max(0, int(remaining.total_seconds())),
            token_type=row["token_type"],
            refresh_token=row["refresh_token"],
            scope=ProviderTokenSet.parse_scope(row["scope"]),
            id_token=row["id_token"],
        )

    async def delete_provider_token(self, user_id: UUID, provider: OAuthProvider) -> None:
        await self._session.execute(
            delete(oauth_tokens_table).where(
                oauth_tokens_table.c.user_id == user_id,
                oauth_tokens_table.c.provider == provider.value,
            )
        )
