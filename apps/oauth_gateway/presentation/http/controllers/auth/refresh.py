"""Refresh Controller.

세션 토큰 갱신 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends

from apps.oauth_gateway.application.token.commands import RefreshSessionInteractor
from apps.oauth_gateway.application.token.dto import RefreshSessionRequest
from apps.oauth_gateway.presentation.http.auth import get_bearer_token
from apps.oauth_gateway.presentation.http.schemas.auth import TokenResponse
from apps.oauth_gateway.setup.dependencies import get_refresh_session_interactor

router = APIRouter()


@router.post(
    "/refresh",
    response_model=TokenResponse,
    summary="세션 토큰 갱신",
)
async def refresh(
    refresh_token: str = Depends(get_bearer_token),
    interactor: RefreshSessionInteractor = Depends(get_refresh_session_interactor),
) -> TokenResponse:
    """refresh 토큰으로 access/refresh 토큰을 모두 새로 발급합니다."""
    result = await interactor.execute(RefreshSessionRequest(refresh_token=refresh_token))
    return TokenResponse(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        expires_in=result.expires_in,
        token_type=result.token_type,
    )
