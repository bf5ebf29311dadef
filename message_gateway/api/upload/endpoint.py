import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse

from message_gateway.adapter.storage.s3 import S3ImageStore
from message_gateway.api.deps import get_image_store, get_settings
from message_gateway.api.upload.schema.response import UploadResponse
from message_gateway.common.config import Settings
from message_gateway.common.errors import ValidationError
from message_gateway.service.upload.image import MAX_IMAGE_BYTES, Rejected, upload_image, validate_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


@router.get("", response_class=PlainTextResponse)
async def upload_status() -> str:
    return "Upload endpoint is working"


@router.post("", response_model=UploadResponse, response_model_by_alias=True)
async def upload(
    image: UploadFile | None = File(default=None),
    settings: Settings = Depends(get_settings),
    store: S3ImageStore = Depends(get_image_store),
) -> UploadResponse:
    logger.info("upload_received")
    if image is None:
        raise ValidationError("Image file is required")

    # Chunked bodies skip the Content-Length guard; the spooled part size still applies.
    if image.size is not None and image.size > MAX_IMAGE_BYTES:
        raise ValidationError("File too large")

    # Caps the in-memory copy; the part itself is already spooled to disk.
    content = await image.read(MAX_IMAGE_BYTES + 1)
    verdict = validate_image(image.filename or "", image.content_type, len(content))
    if isinstance(verdict, Rejected):
        raise ValidationError(verdict.reason)

    image_url = await upload_image(store, settings, verdict.extension, image.content_type, content)
    return UploadResponse(image_url=image_url)
