"""Users ORM Mapping.

타입 규칙:
    - TEXT: 기본 문자열 타입
    - email: VARCHAR(320) - RFC 5321
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.infrastructure.persistence_postgres.registry import mapper_registry

users_table = Table(
    "users",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "provider",
        Enum(
            OAuthProvider,
            name="oauth_provider",
            native_enum=False,
            length=16,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    ),
    Column("provider_id", Text, nullable=False),
    Column("email", String(320), unique=True),  # RFC 5321
    Column("name", Text),
    Column("picture", Text),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("provider", "provider_id", name="uq_users_provider_identity"),
)


def start_users_mapper() -> None:
    """User 매퍼 시작."""
    from apps.oauth_gateway.domain.entities.user import User

    if hasattr(User, "__mapper__"):
        return

    mapper_registry.map_imperatively(User, users_table)
