"""Profile Normalizer.

프로바이더별 원본 프로필을 CanonicalProfile로 변환하는 도메인 서비스입니다.

변환 규칙은 프로바이더마다 하나의 필드 매핑 테이블로 정의합니다.
각 필드는 키 경로 목록이며, 앞에서부터 처음으로 값이 있는 경로를 사용합니다 (fallback).

| Provider | external_id | email | name | picture |
|---|---|---|---|---|
| kakao | id | kakao_account.email | kakao_account.profile.nickname | kakao_account.profile.profile_image_url |
| naver | response.id | response.email | response.name | response.profile_image |
| apple | sub | email | name.firstName + name.lastName | - |
| google | sub | email | name | picture |
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.exceptions.profile import ProfileValidationError
from apps.oauth_gateway.domain.value_objects.canonical_profile import CanonicalProfile
from apps.oauth_gateway.domain.value_objects.email import is_valid_email

KeyPath = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ProfileFieldMap:
    """프로바이더 하나의 필드 매핑.

    name_parts가 있으면 name 대신 각 경로의 값을 공백으로 이어 붙입니다.
    """

    external_id: tuple[KeyPath, ...]
    email: tuple[KeyPath, ...] = ()
    name: tuple[KeyPath, ...] = ()
    name_parts: tuple[KeyPath, ...] = ()
    picture: tuple[KeyPath, ...] = ()
    email_verified: tuple[KeyPath, ...] = ()


PROFILE_FIELD_MAPS: Mapping[OAuthProvider, ProfileFieldMap] = MappingProxyType(
    {
        OAuthProvider.KAKAO: ProfileFieldMap(
            external_id=(("id",),),
            email=(("kakao_account", "email"),),
            name=(
                ("kakao_account", "profile", "nickname"),
                ("properties", "nickname"),
                ("nickname",),
            ),
            picture=(
                ("kakao_account", "profile", "profile_image_url"),
                ("properties", "profile_image"),
                ("profile_image",),
            ),
            email_verified=(("kakao_account", "is_email_verified"),),
        ),
        OAuthProvider.NAVER: ProfileFieldMap(
            external_id=(("response", "id"),),
            email=(("response", "email"),),
            name=(("response", "name"), ("response", "nickname")),
            picture=(("response", "profile_image"),),
        ),
        OAuthProvider.APPLE: ProfileFieldMap(
            external_id=(("sub",),),
            email=(("email",),),
            name_parts=(("name", "firstName"), ("name", "lastName")),
            email_verified=(("email_verified",),),
        ),
        OAuthProvider.GOOGLE: ProfileFieldMap(
            external_id=(("sub",),),
            email=(("email",),),
            name=(("name",),),
            picture=(("picture",),),
            email_verified=(("email_verified",),),
        ),
    }
)


def _lookup(payload: Mapping[str, Any], path: KeyPath) -> Any:
    current: Any = payload
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _as_text(value: Any) -> str | None:
    """값을 문자열로 변환 (숫자 id 포함). 빈 문자열은 None."""
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def _first_text(payload: Mapping[str, Any], paths: tuple[KeyPath, ...]) -> str | None:
    for path in paths:
        text = _as_text(_lookup(payload, path))
        if text is not None:
            return text
    return None


def _first_bool(payload: Mapping[str, Any], paths: tuple[KeyPath, ...]) -> bool | None:
    for path in paths:
        value = _lookup(payload, path)
        if isinstance(value, bool):
            return value
        # Apple은 "true"/"false" 문자열로 보내기도 함
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
    return None


def _joined_text(payload: Mapping[str, Any], paths: tuple[KeyPath, ...]) -> str | None:
    parts = [_as_text(_lookup(payload, path)) for path in paths]
    joined = " ".join(part for part in parts if part).strip()
    return joined or None


def _secure_url(url: str | None) -> str | None:
    if url and url.startswith("http://"):
        return "https://" + url[len("http://") :]
    return url


class ProfileNormalizer:
    """프로바이더 원본 프로필 → CanonicalProfile 변환기.

    상태가 없으며 여러 전략이 하나의 인스턴스를 공유합니다.
    """

    def __init__(
        self,
        field_maps: Mapping[OAuthProvider, ProfileFieldMap] = PROFILE_FIELD_MAPS,
    ) -> None:
        self._field_maps = field_maps

    def normalize(
        self,
        provider: OAuthProvider | None,
        raw_payload: Mapping[str, Any],
    ) -> CanonicalProfile:
        """원본 프로필을 정규화합니다.

        Args:
            provider: 프로필을 발급한 프로바이더
            raw_payload: userinfo 응답 또는 ID 토큰 클레임

        Returns:
            정규화된 프로필

        Raises:
            ProfileValidationError: provider/external_id 누락, 이메일 형식 오류
        """
        if provider is None:
            raise ProfileValidationError("provider is required")

        field_map = self._field_maps.get(provider)
        if field_map is None:
            raise ProfileValidationError(f"no field mapping for provider {provider}")

        external_id = _first_text(raw_payload, field_map.external_id)
        if external_id is None:
            raise ProfileValidationError("external id is missing")

        email = _first_text(raw_payload, field_map.email)
        if email is not None and not is_valid_email(email):
            raise ProfileValidationError("email has an invalid format")

        if field_map.name_parts:
            display_name = _joined_text(raw_payload, field_map.name_parts)
        else:
            display_name = _first_text(raw_payload, field_map.name)

        return CanonicalProfile(
            external_id=external_id,
            provider=provider,
            email=email,
            display_name=display_name,
            picture_url=_secure_url(_first_text(raw_payload, field_map.picture)),
            email_verified=_first_bool(raw_payload, field_map.email_verified),
            raw_payload=dict(raw_payload),
        )
