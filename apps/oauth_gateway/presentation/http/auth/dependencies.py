"""Auth Dependencies.

Authorization: Bearer <token> 헤더에서 세션 토큰을 꺼냅니다.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from apps.oauth_gateway.domain.exceptions.auth import InvalidTokenError

bearer_scheme = HTTPBearer(auto_error=False, description="세션 토큰")


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Bearer 토큰 추출.

    Raises:
        InvalidTokenError: 헤더가 없거나 Bearer 스킴이 아님
    """
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError("Missing bearer token")
    return credentials.credentials
