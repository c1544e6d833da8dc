"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
"""

from fastapi import APIRouter

from apps.oauth_gateway.presentation.http.controllers.auth.router import router as auth_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth")
