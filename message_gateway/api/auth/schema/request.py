import json

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from message_gateway.common.errors import ValidationError

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class TokenExchangeRequest(BaseModel):
    code: str | None = None


async def token_exchange_body(request: Request) -> TokenExchangeRequest:
    """Reads ``{code}`` from either a JSON or a form-encoded body."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(_FORM_TYPES):
            payload = dict(await request.form())
        else:
            raw = await request.body()
            payload = json.loads(raw) if raw else {}
        return TokenExchangeRequest.model_validate(payload)
    except (ValueError, PydanticValidationError) as exc:
        raise ValidationError("Invalid request body") from exc
