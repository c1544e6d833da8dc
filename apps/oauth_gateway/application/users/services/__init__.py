"""Users Services."""

from apps.oauth_gateway.application.users.services.user_resolution_service import (
    ResolvedUser,
    UserResolutionService,
)

__all__ = ["ResolvedUser", "UserResolutionService"]
