"""Domain Entity / Value Object 단위 테스트."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from apps.oauth_gateway.domain.entities.user import User
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.value_objects import ProviderTokenSet, mask_email
from apps.oauth_gateway.tests.unit.factories import make_profile


class TestUser:
    """User 엔티티 테스트."""

    def test_from_profile(self) -> None:
        user_id = uuid4()
        user = User.from_profile(user_id, make_profile())

        assert user.id == user_id
        assert user.provider == OAuthProvider.KAKAO
        assert user.provider_id == "12345"
        assert user.email_verified is True

    def test_default_name_without_display_name(self) -> None:
        user_id = uuid4()
        user = User.from_profile(user_id, make_profile(display_name=None, email=None))

        assert user.name == f"User_{user_id.hex[:8]}"
        assert user.email_verified is False

    def test_changed_fields_ignores_empty_values(self) -> None:
        user = User.from_profile(uuid4(), make_profile())

        changed = user.changed_fields(make_profile(display_name="New", picture_url=None))

        assert changed == {"name": "New"}

    def test_apply_profile_updates_timestamp(self) -> None:
        user = User.from_profile(uuid4(), make_profile())
        before = user.updated_at

        user.apply_profile({"name": "Renamed"})

        assert user.name == "Renamed"
        assert user.updated_at >= before


class TestProviderTokenSet:
    def test_expires_at(self) -> None:
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        tokens = ProviderTokenSet(access_token="a", expires_in=60)

        assert tokens.expires_at(now) == now + timedelta(seconds=60)

    def test_carry_over_keeps_previous_refresh_token(self) -> None:
        previous = ProviderTokenSet(access_token="a", expires_in=60, refresh_token="r", id_token="i")
        refreshed = ProviderTokenSet(access_token="b", expires_in=60)

        merged = refreshed.carry_over(previous)

        assert merged.access_token == "b"
        assert merged.refresh_token == "r"
        assert merged.id_token == "i"

    def test_carry_over_prefers_new_refresh_token(self) -> None:
        previous = ProviderTokenSet(access_token="a", expires_in=60, refresh_token="r")
        refreshed = ProviderTokenSet(access_token="b", expires_in=60, refresh_token="r2")

        assert refreshed.carry_over(previous).refresh_token == "r2"

    def test_parse_scope(self) -> None:
        assert ProviderTokenSet.parse_scope("openid email,profile") == ("openid", "email", "profile")
        assert ProviderTokenSet.parse_scope(None) == ()


def test_mask_email() -> None:
    assert mask_email("someone@example.com") == "so***@example.com"
    assert mask_email(None) is None
