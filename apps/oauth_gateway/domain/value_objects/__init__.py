"""Domain Value Objects."""

from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile
from apps.oauth_gateway.domain.value_objects.email import (
    EMAIL_PATTERN,
    is_valid_email,
    mask_email,
)
from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet
from apps.oauth_gateway.domain.value_objects.token_payload import SessionTokenPayload

__all__ = [
    "CanonicalProfile",
    "EMAIL_PATTERN",
    "ProviderTokenSet",
    "SessionTokenPayload",
    "is_valid_email",
    "mask_email",
]
