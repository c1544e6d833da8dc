"""Initial OAuth gateway schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Tables:
    - users: (provider, provider_id) 유일, email 유일
    - oauth_tokens: (user_id, provider)당 한 행, 사용자 삭제 시 함께 삭제
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create users / oauth_tokens tables."""
    # ============================================
    # users 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id UUID PRIMARY KEY,
            provider VARCHAR(16) NOT NULL,
            provider_id TEXT NOT NULL,
            email VARCHAR(320),
            name TEXT,
            picture TEXT,
            email_verified BOOLEAN NOT NULL DEFAULT false,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_users_provider_identity UNIQUE (provider, provider_id),
            CONSTRAINT users_email_key UNIQUE (email)
        )
    """)

    # ============================================
    # oauth_tokens 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS oauth_tokens (
            id UUID PRIMARY KEY,
            user_id UUID NOT NULL,
            provider TEXT NOT NULL,
            access_token TEXT NOT NULL,
            refresh_token TEXT,
            id_token TEXT,
            token_type TEXT NOT NULL DEFAULT 'Bearer',
            scope TEXT,
            expires_at TIMESTAMPTZ NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT fk_oauth_tokens_user
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE,
            CONSTRAINT uq_oauth_tokens_user_provider UNIQUE (user_id, provider)
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_oauth_tokens_user_id
        ON oauth_tokens(user_id)
    """)


def downgrade() -> None:
    """Drop tables (oauth_tokens 먼저)."""
    op.execute("DROP TABLE IF EXISTS oauth_tokens")
    op.execute("DROP TABLE IF EXISTS users")
