from fastapi import Request

from message_gateway.adapter.storage.s3 import S3ImageStore
from message_gateway.common.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_image_store(request: Request) -> S3ImageStore:
    # Built on first upload so the other routes run without storage credentials.
    store = getattr(request.app.state, "image_store", None)
    if store is None:
        store = S3ImageStore(request.app.state.settings)
        request.app.state.image_store = store
    return store
