"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답에는 안정적인 code와 안전한 메시지만 담고, 프로바이더 응답 본문이나 키 자료는 담지 않습니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.oauth_gateway.application.common.exceptions import (
    ApplicationError,
    AuthenticationError,
    InternalError,
)
from apps.oauth_gateway.application.oauth.exceptions import (
    InvalidStateError,
    UnsupportedProviderError,
    UpstreamAuthError,
)
from apps.oauth_gateway.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenTypeMismatchError,
)
from apps.oauth_gateway.domain.exceptions.base import DomainError
from apps.oauth_gateway.domain.exceptions.profile import ProfileValidationError
from apps.oauth_gateway.domain.exceptions.user import ConflictError, UserNotFoundError


def _error(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(UnsupportedProviderError)
    async def unsupported_provider_handler(request: Request, exc: UnsupportedProviderError):
        return _error(400, exc.message, "UNSUPPORTED_PROVIDER")

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return _error(400, exc.message, "INVALID_STATE")

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return _error(409, exc.message, "CONFLICT")

    @app.exception_handler(TokenExpiredError)
    async def token_expired_handler(request: Request, exc: TokenExpiredError):
        return _error(401, exc.message, "TOKEN_EXPIRED")

    @app.exception_handler(TokenTypeMismatchError)
    async def token_type_mismatch_handler(request: Request, exc: TokenTypeMismatchError):
        return _error(401, exc.message, "TOKEN_TYPE_MISMATCH")

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(request: Request, exc: InvalidTokenError):
        return _error(401, exc.message, "INVALID_TOKEN")

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return _error(401, exc.message, "AUTHENTICATION_FAILED")

    @app.exception_handler(UpstreamAuthError)
    async def upstream_auth_handler(request: Request, exc: UpstreamAuthError):
        return _error(502, exc.message, "OAUTH_PROVIDER_ERROR")

    @app.exception_handler(ProfileValidationError)
    async def profile_validation_handler(request: Request, exc: ProfileValidationError):
        return _error(502, exc.message, "PROFILE_INVALID")

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return _error(404, "User not found", "USER_NOT_FOUND")

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError):
        return _error(500, exc.message, "INTERNAL_ERROR")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error(400, exc.message, "DOMAIN_ERROR")

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error(400, exc.message, "APPLICATION_ERROR")
