"""User Exceptions."""

from uuid import UUID

from apps.oauth_gateway.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class ConflictError(DomainError):
    """이메일이 이미 다른 프로바이더 계정에 연결되어 있음.

    자동 계정 연결은 하지 않습니다. 클라이언트가 계정 연결 UX를 제공할 수 있도록
    다른 인증 실패와 구분되어 전달됩니다.
    """

    def __init__(self, reason: str = "Email is already registered with another provider") -> None:
        super().__init__(reason)
