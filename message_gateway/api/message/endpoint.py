import logging

from fastapi import APIRouter, Depends

from message_gateway.api.deps import get_settings
from message_gateway.api.message.schema.request import SendMessageRequest, SendMessageResponse
from message_gateway.common.config import Settings
from message_gateway.common.errors import (
    GatewayError,
    TransportError,
    UpstreamError,
    ValidationError,
    failure_details,
)
from message_gateway.security.auth import require_bearer_token
from message_gateway.service.message.send import send_message
from message_gateway.service.message.template import build_template_object, parse_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/send-message", tags=["message"])


@router.post("", response_model=SendMessageResponse)
async def send(
    request: SendMessageRequest,
    token: str = Depends(require_bearer_token),
    settings: Settings = Depends(get_settings),
) -> SendMessageResponse:
    if not request.is_complete():
        raise ValidationError("Missing UUID, templateType, or templateData")

    template = parse_template(request.template_type, request.template_data)
    template_object = build_template_object(template)

    try:
        details = await send_message(settings, token, request.uuid, template_object)
    except (UpstreamError, TransportError) as exc:
        logger.error("send_message_failed", extra={"upstream_status": exc.status_code})
        raise GatewayError("Message sending failed", details=failure_details(exc)) from exc

    return SendMessageResponse(status="Message sent successfully", details=details)
