"""Auth HTTP Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field


class AuthUrlResponse(BaseModel):
    """OAuth 인증 URL 응답."""

    url: str = Field(..., description="프로바이더 인증 URL")
    state: str = Field(..., description="CSRF 방지용 상태 값 (콜백에서 그대로 돌려받음)")


class TokenResponse(BaseModel):
    """세션 토큰 응답."""

    access_token: str = Field(..., description="세션 access 토큰")
    refresh_token: str = Field(..., description="세션 refresh 토큰")
    expires_in: int = Field(..., description="access 토큰 유효 시간(초)")
    token_type: str = Field(default="Bearer", description="토큰 타입")


class UserProfileResponse(BaseModel):
    """정규화된 사용자 프로필 응답."""

    user_id: UUID = Field(..., description="사용자 ID")
    provider: str = Field(..., description="OAuth 프로바이더")
    external_id: str = Field(..., description="프로바이더 사용자 ID")
    email: str | None = Field(None, description="이메일")
    display_name: str | None = Field(None, description="표시 이름")
    picture_url: str | None = Field(None, description="프로필 이미지 URL")
    email_verified: bool | None = Field(None, description="이메일 인증 여부")


class ErrorResponse(BaseModel):
    """에러 응답."""

    detail: str = Field(..., description="안전한 에러 메시지")
    code: str = Field(..., description="에러 코드")
