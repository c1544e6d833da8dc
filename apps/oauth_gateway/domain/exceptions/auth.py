"""Session Token Exceptions."""

from apps.oauth_gateway.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """세션 토큰 검증 실패 (서명, 만료, 종류)."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(InvalidTokenError):
    """만료된 세션 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenTypeMismatchError(InvalidTokenError):
    """기대한 종류와 다른 세션 토큰 (access 자리에 refresh 등)."""

    def __init__(self, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} token, got {actual} token")
