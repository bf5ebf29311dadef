"""Single-call access to the Kakao REST API.

Every gateway endpoint that talks to Kakao goes through ``call_kakao``: it
performs exactly one outbound request and turns the outcome into either the
parsed JSON body or one of the typed upstream errors.
"""

import logging
from typing import Any

import httpx

from message_gateway.adapter.client import http
from message_gateway.common.config import Settings
from message_gateway.common.errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/oauth/token"
TOKEN_INFO_PATH = "/v1/user/access_token_info"
FRIENDS_PATH = "/v1/api/talk/friends"
DEFAULT_SEND_PATH = "/v1/api/talk/friends/message/default/send"
LOGOUT_PATH = "/v1/user/logout"


def api_url(settings: Settings, path: str) -> str:
    return f"{settings.kakao_api_base_url.rstrip('/')}{path}"


def auth_url(settings: Settings, path: str) -> str:
    return f"{settings.kakao_auth_base_url.rstrip('/')}{path}"


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def call_kakao(
    settings: Settings,
    method: str,
    url: str,
    *,
    token: str | None = None,
    data: dict[str, str] | None = None,
) -> Any:
    headers: dict[str, str] = {}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    if data is not None:
        headers["Content-Type"] = "application/x-www-form-urlencoded"

    try:
        response = await http.request(
            method,
            url,
            headers=headers,
            data=data,
            timeout=settings.upstream_timeout_seconds,
        )
    except httpx.HTTPError as exc:
        logger.error("kakao_transport_failed", extra={"upstream": url})
        raise TransportError(str(exc) or type(exc).__name__) from exc

    body = _parse_body(response)
    if response.is_success:
        return body

    logger.warning(
        "kakao_upstream_error",
        extra={"upstream": url, "upstream_status": response.status_code},
    )
    raise UpstreamError(response.status_code, body)
