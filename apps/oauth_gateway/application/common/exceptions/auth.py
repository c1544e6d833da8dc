"""Authentication Flow Exceptions."""

from apps.oauth_gateway.application.common.exceptions.base import ApplicationError


class AuthenticationError(ApplicationError):
    """인증 플로우 실패.

    콜백/갱신/사용자 조회 중 어느 단계에서 실패했는지 드러내지 않도록
    하위 오류를 하나로 모아 전달합니다.
    """

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InternalError(ApplicationError):
    """저장소 장애 등 예상하지 못한 내부 오류."""

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
