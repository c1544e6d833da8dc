"""OAuth Tokens Table.

(user_id, provider)당 한 행만 유지합니다. ORM 매핑 없이 Core upsert로 다룹니다.
scope는 공백 구분 문자열로 저장합니다.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.oauth_gateway.infrastructure.persistence_postgres.registry import mapper_registry

oauth_tokens_table = Table(
    "oauth_tokens",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("provider", Text, nullable=False),
    Column("access_token", Text, nullable=False),
    Column("refresh_token", Text),
    Column("id_token", Text),
    Column("token_type", Text, nullable=False, server_default="Bearer"),
    Column("scope", Text),
    Column("expires_at", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("user_id", "provider", name="uq_oauth_tokens_user_provider"),
)
