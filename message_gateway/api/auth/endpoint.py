import logging
from typing import Any

from fastapi import APIRouter, Depends

from message_gateway.api.auth.schema.request import TokenExchangeRequest, token_exchange_body
from message_gateway.api.deps import get_settings
from message_gateway.common.config import Settings
from message_gateway.common.errors import (
    GatewayError,
    TransportError,
    UpstreamError,
    ValidationError,
    failure_details,
)
from message_gateway.security.auth import require_access_token, require_bearer_token
from message_gateway.service import auth as kakao_auth

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/oauth/token")
async def oauth_token(
    request: TokenExchangeRequest = Depends(token_exchange_body),
    settings: Settings = Depends(get_settings),
) -> Any:
    if not request.code:
        raise ValidationError("Authorization code is required")

    try:
        return await kakao_auth.exchange_code(settings, request.code)
    except (UpstreamError, TransportError) as exc:
        logger.error("token_exchange_failed", extra={"upstream_status": exc.status_code})
        # A rejected code is the caller's problem; everything else is ours.
        status_code = exc.status_code if isinstance(exc, UpstreamError) and exc.status_code < 500 else 500
        raise GatewayError(
            "Failed to fetch access token",
            details=failure_details(exc),
            status_code=status_code,
        ) from exc


@router.get("/verify-token")
async def verify_token(
    token: str = Depends(require_access_token),
    settings: Settings = Depends(get_settings),
) -> Any:
    try:
        return await kakao_auth.token_info(settings, token)
    except (UpstreamError, TransportError) as exc:
        logger.error("verify_token_failed", extra={"upstream_status": exc.status_code})
        raise GatewayError(
            "Failed to verify token",
            details=failure_details(exc),
            status_code=exc.status_code,
        ) from exc


@router.get("/friends")
async def friends(
    token: str = Depends(require_bearer_token),
    settings: Settings = Depends(get_settings),
) -> Any:
    try:
        return await kakao_auth.list_friends(settings, token)
    except UpstreamError as exc:
        logger.error("friends_upstream_error", extra={"upstream_status": exc.status_code})
        if exc.status_code == 401:
            raise GatewayError(
                "Invalid or expired Kakao access token.", details=exc.body, status_code=401
            ) from exc
        raise GatewayError(
            "Kakao API returned an error.", details=exc.body, status_code=exc.status_code
        ) from exc
    except TransportError as exc:
        logger.error("friends_transport_error")
        raise GatewayError(
            "Internal server error occurred while fetching friends.", details=exc.error
        ) from exc


@router.post("/logout")
async def logout(
    token: str = Depends(require_access_token),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    try:
        body = await kakao_auth.logout(settings, token)
    except (UpstreamError, TransportError) as exc:
        logger.error("logout_failed", extra={"upstream_status": exc.status_code})
        raise GatewayError("Logout failed", details=failure_details(exc)) from exc

    upstream = body if isinstance(body, dict) else {}
    return {"message": "Successfully logged out", **upstream}
