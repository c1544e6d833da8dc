"""Callback Controller.

OAuth 콜백 처리 엔드포인트입니다.
Apple은 response_mode=form_post로 콜백하므로 POST(form)도 받습니다.
"""

import logging

from fastapi import APIRouter, Depends, Form, Query

from apps.oauth_gateway.application.oauth.commands import OAuthCallbackInteractor
from apps.oauth_gateway.application.oauth.dto import OAuthCallbackRequest
from apps.oauth_gateway.presentation.http.schemas.auth import TokenResponse
from apps.oauth_gateway.setup.dependencies import get_oauth_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()


async def _handle_callback(
    interactor: OAuthCallbackInteractor,
    provider: str,
    code: str,
    state: str | None,
) -> TokenResponse:
    result = await interactor.execute(
        OAuthCallbackRequest(provider=provider, code=code, state=state)
    )
    return TokenResponse(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        expires_in=result.expires_in,
        token_type=result.token_type,
    )


@router.get(
    "/{provider}/callback",
    response_model=TokenResponse,
    summary="OAuth 콜백 처리",
)
async def callback(
    provider: str,
    code: str = Query(..., description="OAuth 인증 코드"),
    state: str | None = Query(None, description="인증 URL 발급 시 받은 상태 값"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> TokenResponse:
    """OAuth 콜백을 처리하고 세션 토큰을 발급합니다.

    1. 인증 코드로 프로바이더 토큰 교환
    2. 사용자 프로필 조회
    3. 사용자 생성 또는 조회
    4. 세션 토큰 발급
    """
    return await _handle_callback(interactor, provider, code, state)


@router.post(
    "/{provider}/callback",
    response_model=TokenResponse,
    summary="OAuth 콜백 처리 (form_post)",
)
async def callback_form_post(
    provider: str,
    code: str = Form(..., description="OAuth 인증 코드"),
    state: str | None = Form(None, description="인증 URL 발급 시 받은 상태 값"),
    interactor: OAuthCallbackInteractor = Depends(get_oauth_callback_interactor),
) -> TokenResponse:
    """form_post 응답 모드 콜백 (Apple)."""
    return await _handle_callback(interactor, provider, code, state)
