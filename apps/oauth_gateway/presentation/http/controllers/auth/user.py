"""User Info Controller."""

from fastapi import APIRouter, Depends

from apps.oauth_gateway.application.token.queries import GetUserInfoQueryService
from apps.oauth_gateway.presentation.http.auth import get_bearer_token
from apps.oauth_gateway.presentation.http.schemas.auth import UserProfileResponse
from apps.oauth_gateway.setup.dependencies import get_user_info_query_service

router = APIRouter()


@router.get(
    "/user",
    response_model=UserProfileResponse,
    summary="인증된 사용자 정보 조회",
)
async def get_user_info(
    access_token: str = Depends(get_bearer_token),
    service: GetUserInfoQueryService = Depends(get_user_info_query_service),
) -> UserProfileResponse:
    """세션 access 토큰으로 프로바이더의 최신 프로필을 조회합니다."""
    result = await service.execute(access_token)
    profile = result.profile
    return UserProfileResponse(
        user_id=result.user_id,
        provider=profile.provider.value,
        external_id=profile.external_id,
        email=profile.email,
        display_name=profile.display_name,
        picture_url=profile.picture_url,
        email_verified=profile.email_verified,
    )
