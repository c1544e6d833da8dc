"""Redis Adapters."""

from apps.oauth_gateway.infrastructure.persistence_redis.adapters.state_store_redis import (
    RedisStateStore,
)

__all__ = ["RedisStateStore"]
