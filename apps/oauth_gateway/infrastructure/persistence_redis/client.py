"""Redis Client Provider.

OAuth state 저장 전용 클라이언트입니다. state는 TTL이 짧고 일회성이라
연결 장애 시 재시도 후에도 실패하면 해당 인증 요청만 실패합니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 20
SOCKET_TIMEOUT = 3.0  # seconds
MAX_RETRIES = 3


def _build_state_client(redis_url: str) -> "aioredis.Redis":
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_connect_timeout=SOCKET_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
        retry=Retry(ExponentialBackoff(), retries=MAX_RETRIES),
        retry_on_error=[ConnectionError, TimeoutError],
    )


@lru_cache
def get_oauth_state_redis() -> "aioredis.Redis":
    """OAuth state 저장용 Redis 클라이언트 (프로세스당 하나).

    환경변수:
        - AUTH_REDIS_OAUTH_STATE_URL (default: redis://localhost:6379/3)
    """
    from apps.oauth_gateway.setup.config import get_settings

    return _build_state_client(get_settings().redis_oauth_state_url)


async def close_oauth_state_redis() -> None:
    """애플리케이션 종료 시 연결 풀 정리. 생성된 적 없으면 아무것도 하지 않음."""
    if get_oauth_state_redis.cache_info().currsize == 0:
        return
    await get_oauth_state_redis().aclose()
    get_oauth_state_redis.cache_clear()
