import logging

from fastapi import FastAPI

from message_gateway.api.auth.endpoint import router as auth_router
from message_gateway.api.health.endpoint import router as health_router
from message_gateway.api.message.endpoint import router as message_router
from message_gateway.api.upload.endpoint import router as upload_router
from message_gateway.common.config import Settings, load_settings
from message_gateway.common.errors import install_error_handlers
from message_gateway.observability import RequestLoggingMiddleware, configure_logging
from message_gateway.security.cors import setup_cors
from message_gateway.security.limits import UploadSizeLimitMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    app = FastAPI(title="Message Gateway", version="0.1.0")
    app.state.settings = settings
    install_error_handlers(app)
    app.add_middleware(UploadSizeLimitMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    setup_cors(app, settings)

    app.include_router(health_router)
    app.include_router(upload_router)
    app.include_router(message_router)
    app.include_router(auth_router)
    logger.info("routers_mounted")
    return app


app = create_app()
