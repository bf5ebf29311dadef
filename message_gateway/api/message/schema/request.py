from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uuid: str | None = None
    template_type: str | None = Field(default=None, alias="templateType")
    template_data: dict[str, Any] | None = Field(default=None, alias="templateData")

    def is_complete(self) -> bool:
        return bool(self.uuid and self.template_type and self.template_data)


class SendMessageResponse(BaseModel):
    status: str
    details: Any = None
