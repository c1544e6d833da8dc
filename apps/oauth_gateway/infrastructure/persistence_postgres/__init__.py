"""PostgreSQL Persistence Layer."""

from apps.oauth_gateway.infrastructure.persistence_postgres.registry import mapper_registry
from apps.oauth_gateway.infrastructure.persistence_postgres.session import (
    dispose_engine,
    get_async_engine,
    get_async_session,
)

__all__ = ["dispose_engine", "get_async_engine", "get_async_session", "mapper_registry"]
