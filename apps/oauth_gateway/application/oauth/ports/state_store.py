"""OAuthStateStore Port.

CSRF state 왕복 검증을 위한 저장소 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class OAuthState:
    """발급된 state에 묶인 데이터."""

    provider: str
    issued_at: int


class OAuthStateStore(Protocol):
    """OAuth state 저장소 인터페이스.

    구현체:
        - RedisStateStore (infrastructure/persistence_redis/)
    """

    async def save(self, state: str, data: OAuthState, ttl_seconds: int = 600) -> None:
        """state 저장 (TTL 이후 자동 만료)."""
        ...

    async def consume(self, state: str) -> OAuthState | None:
        """state 조회 및 삭제 (일회용). 없거나 만료되었으면 None."""
        ...
