"""Provider Token Set Value Object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Iterable


@dataclass(frozen=True, slots=True)
class ProviderTokenSet:
    """프로바이더가 발급한 OAuth 토큰 묶음.

    scope는 순서가 있는 문자열 튜플로 통일합니다.
    저장 형식(공백 구분 문자열 등)은 저장소가 결정합니다.
    """

    access_token: str
    expires_in: int
    token_type: str = "Bearer"
    refresh_token: str | None = None
    scope: tuple[str, ...] = ()
    id_token: str | None = None

    def expires_at(self, now: datetime) -> datetime:
        """절대 만료 시각 (now + expires_in)."""
        return now + timedelta(seconds=self.expires_in)

    def carry_over(self, previous: "ProviderTokenSet") -> "ProviderTokenSet":
        """갱신 응답에 없는 refresh_token, id_token은 이전 값을 유지한다."""
        return replace(
            self,
            refresh_token=self.refresh_token or previous.refresh_token,
            id_token=self.id_token or previous.id_token,
        )

    @staticmethod
    def parse_scope(raw: str | Iterable[str] | None) -> tuple[str, ...]:
        """공백/쉼표 구분 문자열이나 리스트를 scope 튜플로 변환."""
        if not raw:
            return ()
        if isinstance(raw, str):
            raw = raw.replace(",", " ").split()
        return tuple(item for item in raw if item)
