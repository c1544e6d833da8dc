"""Authorize Controller.

OAuth 인증 URL 생성 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, Query

from apps.oauth_gateway.application.oauth.commands import GenerateAuthUrlInteractor
from apps.oauth_gateway.application.oauth.dto import AuthUrlRequest
from apps.oauth_gateway.presentation.http.schemas.auth import AuthUrlResponse
from apps.oauth_gateway.setup.dependencies import get_generate_auth_url_interactor

router = APIRouter()


@router.get(
    "/{provider}/url",
    response_model=AuthUrlResponse,
    summary="OAuth 인증 URL 생성",
)
async def get_auth_url(
    provider: str,
    state: str | None = Query(None, description="커스텀 상태 값 (없으면 생성)"),
    interactor: GenerateAuthUrlInteractor = Depends(get_generate_auth_url_interactor),
) -> AuthUrlResponse:
    """OAuth 인증 URL을 생성합니다.

    클라이언트는 반환된 url로 이동하고, 콜백에서 같은 state를 돌려받아야 합니다.
    """
    result = await interactor.execute(AuthUrlRequest(provider=provider, state=state))
    return AuthUrlResponse(url=result.url, state=result.state)
