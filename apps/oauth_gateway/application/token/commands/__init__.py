"""Token Commands."""

from apps.oauth_gateway.application.token.commands.refresh import RefreshSessionInteractor

__all__ = ["RefreshSessionInteractor"]
