import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("message_gateway.errors")

_MISSING = object()


class GatewayError(Exception):
    """Error that renders as ``{"error": ..., "details": ...}`` with its status code."""

    status_code = 500

    def __init__(self, error: str, details: Any = _MISSING, status_code: int | None = None) -> None:
        super().__init__(error)
        self.error = error
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.details is not _MISSING:
            body["details"] = self.details
        return body


class ValidationError(GatewayError):
    status_code = 400


class AuthError(GatewayError):
    status_code = 401


class UpstreamError(GatewayError):
    """The upstream answered with a non-success status."""

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__("Upstream request failed", details=body, status_code=status_code)
        self.body = body


class TransportError(GatewayError):
    """The upstream could not be reached (connect error, timeout)."""

    status_code = 500


def failure_details(exc: UpstreamError | TransportError) -> Any:
    if isinstance(exc, UpstreamError):
        return exc.body
    return exc.error


async def _gateway_error_handler(_: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _request_validation_handler(request: Request, _: RequestValidationError) -> JSONResponse:
    logger.info("request_body_invalid", extra={"path": request.url.path})
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", extra={"path": request.url.path}, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "details": str(exc)},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return unhandled_error_response(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, _gateway_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
