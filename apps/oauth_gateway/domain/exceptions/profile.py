"""Profile Exceptions."""

from apps.oauth_gateway.domain.exceptions.base import DomainError


class ProfileValidationError(DomainError):
    """정규화된 프로필이 불변식을 만족하지 않음."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid provider profile: {reason}")
