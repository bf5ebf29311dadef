import json
import logging
from typing import Any

from message_gateway.common.config import Settings
from message_gateway.service.kakao import DEFAULT_SEND_PATH, api_url, call_kakao

logger = logging.getLogger(__name__)


def build_send_form(uuid: str, template_object: dict[str, Any]) -> dict[str, str]:
    return {
        "receiver_uuids": json.dumps([uuid]),
        "template_object": json.dumps(template_object, ensure_ascii=False),
    }


async def send_message(
    settings: Settings,
    token: str,
    uuid: str,
    template_object: dict[str, Any],
) -> Any:
    body = await call_kakao(
        settings,
        "POST",
        api_url(settings, DEFAULT_SEND_PATH),
        token=token,
        data=build_send_form(uuid, template_object),
    )
    logger.info("kakao_message_sent", extra={"upstream": DEFAULT_SEND_PATH})
    return body
