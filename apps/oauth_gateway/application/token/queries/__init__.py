"""Token Queries."""

from apps.oauth_gateway.application.token.queries.user_info import GetUserInfoQueryService

__all__ = ["GetUserInfoQueryService"]
