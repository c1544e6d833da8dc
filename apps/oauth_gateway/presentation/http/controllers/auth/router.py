"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_gateway.presentation.http.controllers.auth.authorize import (
    router as authorize_router,
)
from apps.oauth_gateway.presentation.http.controllers.auth.callback import (
    router as callback_router,
)
from apps.oauth_gateway.presentation.http.controllers.auth.refresh import (
    router as refresh_router,
)
from apps.oauth_gateway.presentation.http.controllers.auth.user import router as user_router
from apps.oauth_gateway.presentation.http.schemas.auth import ErrorResponse

router = APIRouter(
    tags=["auth"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)

# /user, /refresh는 /{provider}/... 패턴과 경로 깊이가 달라 충돌하지 않음
router.include_router(user_router)
router.include_router(refresh_router)
router.include_router(authorize_router)
router.include_router(callback_router)
