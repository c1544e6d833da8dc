"""OAuth Client Credentials."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class OAuthClientCredentials:
    """프로바이더 콘솔에 등록된 클라이언트 정보.

    client_secret은 repr에 노출하지 않습니다.
    """

    client_id: str
    redirect_uri: str | None = None
    client_secret: str | None = field(default=None, repr=False)
