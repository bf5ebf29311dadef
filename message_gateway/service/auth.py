from typing import Any

from message_gateway.common.config import Settings
from message_gateway.service.kakao import (
    FRIENDS_PATH,
    LOGOUT_PATH,
    TOKEN_INFO_PATH,
    TOKEN_PATH,
    api_url,
    auth_url,
    call_kakao,
)


def build_token_form(settings: Settings, code: str) -> dict[str, str]:
    return {
        "grant_type": "authorization_code",
        "client_id": settings.kakao_client_id,
        "redirect_uri": settings.kakao_redirect_uri,
        "code": code,
        "client_secret": settings.kakao_client_secret,
    }


async def exchange_code(settings: Settings, code: str) -> Any:
    return await call_kakao(
        settings,
        "POST",
        auth_url(settings, TOKEN_PATH),
        data=build_token_form(settings, code),
    )


async def token_info(settings: Settings, token: str) -> Any:
    return await call_kakao(settings, "GET", api_url(settings, TOKEN_INFO_PATH), token=token)


async def list_friends(settings: Settings, token: str) -> Any:
    return await call_kakao(settings, "GET", api_url(settings, FRIENDS_PATH), token=token)


async def logout(settings: Settings, token: str) -> Any:
    return await call_kakao(settings, "POST", api_url(settings, LOGOUT_PATH), token=token)
