"""OAuth Gateway Application Entry Point.

Clean Architecture 기반 OAuth 인증 게이트웨이입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.oauth_gateway.presentation.http.controllers import root_router
from apps.oauth_gateway.presentation.http.errors import register_exception_handlers
from apps.oauth_gateway.setup.config import get_settings
from apps.oauth_gateway.setup.logging import setup_logging

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    logger.info("Starting OAuth Gateway")

    from apps.oauth_gateway.infrastructure.persistence_postgres.mappings import (
        start_all_mappers,
    )

    start_all_mappers()
    logger.info("ORM mappers initialized")

    yield

    logger.info("Shutting down OAuth Gateway")
    from apps.oauth_gateway.infrastructure.persistence_postgres import dispose_engine
    from apps.oauth_gateway.infrastructure.persistence_redis import close_oauth_state_redis

    await dispose_engine()
    await close_oauth_state_redis()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    setup_logging(settings.effective_log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="OAuth 소셜 로그인 게이트웨이 (Kakao, Naver, Apple, Google)",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    cors_origins = (
        [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
        if settings.cors_origins
        else ["http://localhost:3000", "http://localhost:5173"]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "service": "oauth-gateway", "version": SERVICE_VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.oauth_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
