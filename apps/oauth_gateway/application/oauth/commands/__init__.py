"""OAuth Commands."""

from apps.oauth_gateway.application.oauth.commands.authorize import GenerateAuthUrlInteractor
from apps.oauth_gateway.application.oauth.commands.callback import OAuthCallbackInteractor

__all__ = ["GenerateAuthUrlInteractor", "OAuthCallbackInteractor"]
