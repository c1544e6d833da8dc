"""RedisStateStore 단위 테스트."""

import json
from unittest.mock import AsyncMock

import pytest

from apps.oauth_gateway.application.oauth.ports import OAuthState
from apps.oauth_gateway.infrastructure.persistence_redis import RedisStateStore


class TestRedisStateStore:
    @pytest.fixture
    def redis(self) -> AsyncMock:
        mock = AsyncMock()
        mock.setex = AsyncMock(return_value=True)
        mock.getdel = AsyncMock(return_value=None)
        return mock

    @pytest.mark.asyncio
    async def test_save_uses_ttl(self, redis: AsyncMock) -> None:
        store = RedisStateStore(redis)

        await store.save("abc", OAuthState(provider="kakao", issued_at=100), ttl_seconds=300)

        key, ttl, value = redis.setex.call_args.args
        assert key == "oauth:state:abc"
        assert ttl == 300
        assert json.loads(value) == {"provider": "kakao", "issued_at": 100}

    @pytest.mark.asyncio
    async def test_consume_returns_state(self, redis: AsyncMock) -> None:
        redis.getdel.return_value = json.dumps({"provider": "naver", "issued_at": 7})
        store = RedisStateStore(redis)

        state = await store.consume("abc")

        assert state == OAuthState(provider="naver", issued_at=7)
        redis.getdel.assert_awaited_once_with("oauth:state:abc")

    @pytest.mark.asyncio
    async def test_consume_missing_state(self, redis: AsyncMock) -> None:
        assert await RedisStateStore(redis).consume("missing") is None
