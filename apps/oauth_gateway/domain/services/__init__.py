"""Domain Services."""

from apps.oauth_gateway.domain.services.profile_normalizer import (
    PROFILE_FIELD_MAPS,
    ProfileFieldMap,
    ProfileNormalizer,
)

__all__ = ["PROFILE_FIELD_MAPS", "ProfileFieldMap", "ProfileNormalizer"]
