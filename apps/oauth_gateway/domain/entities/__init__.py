"""Domain Entities."""

from apps.oauth_gateway.domain.entities.user import User

__all__ = ["User"]
