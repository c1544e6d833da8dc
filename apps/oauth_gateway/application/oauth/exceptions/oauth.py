"""OAuth Exceptions."""

from apps.oauth_gateway.application.common.exceptions.base import ApplicationError


class UnsupportedProviderError(ApplicationError):
    """지원하지 않거나 설정되지 않은 프로바이더 (클라이언트 입력 오류)."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class UpstreamAuthError(ApplicationError):
    """프로바이더 통신 실패 (네트워크, non-2xx, 잘못된 응답).

    reason에는 상태 코드나 실패 종류만 담습니다. 프로바이더 응답 본문은 담지 않습니다.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"OAuth provider error ({provider}): {reason}")


class InvalidStateError(ApplicationError):
    """OAuth state 검증 실패."""

    def __init__(self, reason: str = "Invalid or expired state") -> None:
        super().__init__(reason)
