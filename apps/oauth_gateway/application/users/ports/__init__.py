"""Users Ports."""

from apps.oauth_gateway.application.users.ports.user_store import UserStore

__all__ = ["UserStore"]
