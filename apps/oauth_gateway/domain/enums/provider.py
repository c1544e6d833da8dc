"""OAuth Provider Enum."""

from enum import Enum


class OAuthProvider(str, Enum):
    """지원하는 OAuth 프로바이더.

    값은 URL 경로와 토큰 클레임에 그대로 사용됩니다.
    """

    KAKAO = "kakao"
    NAVER = "naver"
    APPLE = "apple"
    GOOGLE = "google"

    def __str__(self) -> str:
        return self.value
