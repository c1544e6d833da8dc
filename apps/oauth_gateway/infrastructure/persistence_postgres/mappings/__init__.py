"""ORM Mappings.

도메인 엔티티와 DB 테이블의 매핑을 정의합니다.
"""

from apps.oauth_gateway.infrastructure.persistence_postgres.mappings.oauth_tokens import (
    oauth_tokens_table,
)
from apps.oauth_gateway.infrastructure.persistence_postgres.mappings.users import (
    start_users_mapper,
    users_table,
)


def start_all_mappers() -> None:
    """모든 매퍼 시작."""
    start_users_mapper()


__all__ = [
    "oauth_tokens_table",
    "start_all_mappers",
    "start_users_mapper",
    "users_table",
]
