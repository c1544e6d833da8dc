"""OAuth DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class AuthUrlRequest:
    """인증 URL 요청."""

    provider: str
    state: str | None = None


@dataclass(frozen=True, slots=True)
class AuthUrlResponse:
    """인증 URL 응답."""

    url: str
    state: str


@dataclass(frozen=True, slots=True)
class OAuthCallbackRequest:
    """OAuth 콜백 요청."""

    provider: str
    code: str
    state: str | None = None


@dataclass(frozen=True, slots=True)
class SessionTokenResponse:
    """세션 토큰 발급 결과."""

    user_id: UUID
    access_token: str
    refresh_token: str
    expires_in: int
    token_type: str = "Bearer"
    is_new_user: bool = False
