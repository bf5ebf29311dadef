"""Template objects for the Kakao "default" message API.

A request names its template with ``templateType`` and carries the fields in
``templateData``. The pair is parsed into one of the closed set of template
variants below, and each variant maps to exactly one Kakao template shape
(``text`` object or ``feed`` object).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from message_gateway.common.errors import ValidationError

BUTTON_TITLE = "자세히 보기"


class TemplateType(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class TextTemplateData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    url: str = Field(min_length=1)


class ImageTemplateData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    message: str = Field(min_length=1)
    image_url: str = Field(alias="imageUrl", min_length=1)
    url: str = Field(min_length=1)


TemplateData = TextTemplateData | ImageTemplateData

_VARIANTS: dict[TemplateType, type[BaseModel]] = {
    TemplateType.TEXT: TextTemplateData,
    TemplateType.IMAGE: ImageTemplateData,
}


def parse_template(template_type: str, template_data: dict[str, Any]) -> TemplateData:
    try:
        kind = TemplateType(template_type)
    except ValueError as exc:
        raise ValidationError("Invalid templateType") from exc

    try:
        return _VARIANTS[kind].model_validate(template_data)
    except PydanticValidationError as exc:
        raise ValidationError(f"Missing required fields for {kind.value} template") from exc


def _link(url: str) -> dict[str, str]:
    return {"web_url": url, "mobile_web_url": url}


def build_template_object(data: TemplateData) -> dict[str, Any]:
    match data:
        case TextTemplateData():
            return {
                "object_type": "text",
                "text": f"{data.title}\n\n{data.message}",
                "link": _link(data.url),
                "button_title": BUTTON_TITLE,
            }
        case ImageTemplateData():
            return {
                "object_type": "feed",
                "content": {
                    "title": data.title,
                    "description": data.message,
                    "image_url": data.image_url,
                    "link": _link(data.url),
                },
                "buttons": [{"title": BUTTON_TITLE, "link": _link(data.url)}],
            }
    raise TypeError(f"unsupported template data: {type(data).__name__}")
