"""Redis Persistence Layer."""

from apps.oauth_gateway.infrastructure.persistence_redis.adapters import RedisStateStore
from apps.oauth_gateway.infrastructure.persistence_redis.client import (
    close_oauth_state_redis,
    get_oauth_state_redis,
)

__all__ = ["RedisStateStore", "close_oauth_state_redis", "get_oauth_state_redis"]
