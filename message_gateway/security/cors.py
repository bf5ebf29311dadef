from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from message_gateway.common.config import Settings


def setup_cors(app: FastAPI, settings: Settings) -> None:
    # Requests without an Origin header (curl, mobile apps) are never touched.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
