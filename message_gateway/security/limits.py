from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from message_gateway.service.upload.image import MAX_IMAGE_BYTES

# Room for multipart boundaries and part headers around the image bytes.
MULTIPART_OVERHEAD_BYTES = 64 * 1024
MAX_UPLOAD_BODY_BYTES = MAX_IMAGE_BYTES + MULTIPART_OVERHEAD_BYTES


class UploadSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects oversized uploads by ``Content-Length`` before the form is parsed."""

    async def dispatch(self, request: Request, call_next):
        if request.method != "POST" or request.url.path.rstrip("/") != "/upload":
            return await call_next(request)

        raw_length = request.headers.get("content-length")
        if raw_length is not None:
            try:
                length = int(raw_length)
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid Content-Length"})
            if length > MAX_UPLOAD_BODY_BYTES:
                return JSONResponse(status_code=400, content={"error": "File too large"})

        return await call_next(request)
