import logging
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from message_gateway.adapter.storage.s3 import S3ImageStore
from message_gateway.common.config import Settings
from message_gateway.common.errors import GatewayError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024
RANDOM_UPPER_BOUND = 10**9
_ALLOWED_TYPES = re.compile(r"jpeg|jpg|png|gif")


@dataclass(frozen=True)
class Accepted:
    extension: str


@dataclass(frozen=True)
class Rejected:
    reason: str


def validate_image(filename: str, content_type: str | None, size: int) -> Accepted | Rejected:
    """Check size, MIME type and extension of an uploaded file.

    Both the MIME type and the (lowercased) extension must name one of the
    allowed image formats; passing only one of the two checks is a rejection.
    """
    if size > MAX_IMAGE_BYTES:
        return Rejected("File too large")

    extension = Path(filename or "").suffix
    mime_ok = bool(_ALLOWED_TYPES.search((content_type or "").lower()))
    ext_ok = bool(_ALLOWED_TYPES.search(extension.lower()))
    if not (mime_ok and ext_ok):
        return Rejected("Only images are allowed")
    return Accepted(extension)


def generate_storage_key(extension: str, now_ms: int | None = None, rand: int | None = None) -> str:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    if rand is None:
        rand = random.randint(0, RANDOM_UPPER_BOUND)
    return f"{now_ms}-{rand}{extension}"


def public_url(bucket: str, region: str, key: str) -> str:
    return f"https://{bucket}.s3.{region}.amazonaws.com/{key}"


async def upload_image(
    store: S3ImageStore,
    settings: Settings,
    extension: str,
    content_type: str,
    data: bytes,
) -> str:
    key = generate_storage_key(extension)
    try:
        await run_in_threadpool(store.put, key, data, content_type)
    except Exception as exc:  # noqa: BLE001
        logger.exception(
            "s3_upload_failed",
            extra={"key": key, "bucket": settings.aws_s3_bucket_name},
        )
        raise GatewayError("Image upload failed") from exc

    logger.info("s3_upload_complete", extra={"key": key, "bucket": settings.aws_s3_bucket_name})
    return public_url(settings.aws_s3_bucket_name, settings.aws_region, key)
