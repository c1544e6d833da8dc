"""Redis State Store.

OAuthStateStore 포트의 구현체입니다.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from apps.oauth_gateway.application.oauth.ports import OAuthState
from apps.oauth_gateway.infrastructure.persistence_redis.constants import STATE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis


class RedisStateStore:
    """Redis 기반 OAuth state 저장소.

    consume은 GETDEL로 조회와 삭제를 한 번에 수행하여 state 재사용을 막습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def save(self, state: str, data: OAuthState, ttl_seconds: int = 600) -> None:
        """state 저장."""
        key = f"{STATE_KEY_PREFIX}{state}"
        value = json.dumps({"provider": data.provider, "issued_at": data.issued_at})
        await self._redis.setex(key, ttl_seconds, value)

    async def consume(self, state: str) -> OAuthState | None:
        """state 조회 및 삭제."""
        key = f"{STATE_KEY_PREFIX}{state}"
        value = await self._redis.getdel(key)
        if not value:
            return None

        data = json.loads(value)
        return OAuthState(provider=data["provider"], issued_at=int(data.get("issued_at", 0)))
