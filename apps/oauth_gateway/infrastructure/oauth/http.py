"""Provider HTTP Helper.

전략들이 조합(composition)으로 공유하는 HTTP 호출, URL 인코딩, 에러 변환 헬퍼입니다.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from apps.oauth_gateway.application.oauth.exceptions import UpstreamAuthError
from apps.oauth_gateway.application.oauth.state import generate_state
from apps.oauth_gateway.domain.enums.provider import OAuthProvider
from apps.oauth_gateway.domain.value_objects.provider_tokens import ProviderTokenSet

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def build_url(base_url: str, params: Mapping[str, str | None]) -> str:
    """None 값을 제외하고 쿼리 문자열을 붙인 URL 생성."""
    query = urlencode({key: value for key, value in params.items() if value is not None})
    return f"{base_url}?{query}"


def resolve_state(state: str | None) -> str:
    """요청 state가 없으면 새로 생성."""
    return state or generate_state()


class ProviderHttpClient:
    """프로바이더 API 호출기.

    모든 호출은 timeout으로 제한되며, 실패는 UpstreamAuthError로 변환됩니다.
    에러 메시지에는 상태 코드만 담고 응답 본문은 담지 않습니다.
    """

    def __init__(
        self,
        provider: OAuthProvider,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            provider: 오류 메시지에 표시할 프로바이더
            timeout_seconds: 요청 타임아웃 (설정에서 주입)
            transport: 테스트용 httpx transport
        """
        self._provider = provider
        self._timeout = timeout_seconds
        self._transport = transport

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str | None],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """x-www-form-urlencoded POST 후 JSON 응답 반환."""
        form = {key: value for key, value in data.items() if value is not None}
        return await self._request("POST", url, data=form, headers=headers)

    async def get_json(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET 후 JSON 응답 반환."""
        return await self._request("GET", url, headers=headers, params=params)

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        provider = self._provider.value
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                payload = response.json()

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "OAuth API error",
                extra={"provider": provider, "status_code": status_code},
            )
            raise UpstreamAuthError(provider, f"API error: {status_code}") from e
        except httpx.TimeoutException as e:
            logger.warning("OAuth request timed out", extra={"provider": provider})
            raise UpstreamAuthError(provider, "request timed out") from e
        except httpx.HTTPError as e:
            logger.warning(
                "OAuth request failed",
                extra={"provider": provider, "error_type": type(e).__name__},
            )
            raise UpstreamAuthError(provider, "request failed") from e
        except ValueError as e:
            raise UpstreamAuthError(provider, "malformed response") from e

        if not isinstance(payload, dict):
            raise UpstreamAuthError(provider, "malformed response")
        return payload

    def parse_token_response(self, payload: Mapping[str, Any]) -> ProviderTokenSet:
        """토큰 엔드포인트 응답 → ProviderTokenSet.

        Raises:
            UpstreamAuthError: error 필드가 있거나 access_token이 없음
        """
        provider = self._provider.value
        if payload.get("error"):
            raise UpstreamAuthError(provider, "token error")

        access_token = payload.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise UpstreamAuthError(provider, "missing access_token")

        try:
            expires_in = int(payload.get("expires_in") or 0)
        except (TypeError, ValueError) as e:
            raise UpstreamAuthError(provider, "malformed expires_in") from e

        return ProviderTokenSet(
            access_token=access_token,
            expires_in=expires_in,
            token_type=payload.get("token_type") or "Bearer",
            refresh_token=payload.get("refresh_token") or None,
            scope=ProviderTokenSet.parse_scope(payload.get("scope")),
            id_token=payload.get("id_token") or None,
        )
