"""Authentication Flow Stages."""

from enum import Enum


class AuthFlowStage(str, Enum):
    """인증 플로우 하나의 진행 단계.

    URL_REQUESTED → CALLBACK_RECEIVED → PROVIDER_TOKENS_OBTAINED → PROFILE_FETCHED
    → USER_RESOLVED → TOKENS_STORED → SESSION_ISSUED (성공 종료).
    어느 단계에서든 FAILED로 전이할 수 있습니다. 단계는 로그에만 남기고 클라이언트에는 노출하지 않습니다.
    """

    URL_REQUESTED = "url_requested"
    CALLBACK_RECEIVED = "callback_received"
    PROVIDER_TOKENS_OBTAINED = "provider_tokens_obtained"
    PROFILE_FETCHED = "profile_fetched"
    USER_RESOLVED = "user_resolved"
    TOKENS_STORED = "tokens_stored"
    SESSION_ISSUED = "session_issued"
    FAILED = "failed"
