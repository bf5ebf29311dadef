import os
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

# Keep tests offline-safe and independent of a developer .env.
os.environ["LOG_JSON"] = "false"

from message_gateway.api.deps import get_image_store  # noqa: E402
from message_gateway.common.config import Settings  # noqa: E402
from message_gateway.main import create_app  # noqa: E402

TEST_SETTINGS = Settings(
    aws_region="ap-northeast-2",
    aws_access_key_id="test-access",
    aws_secret_access_key="test-secret",
    aws_s3_bucket_name="test-bucket",
    kakao_client_id="client-id",
    kakao_client_secret="client-secret",
    kakao_redirect_uri="http://localhost:5173/oauth",
    kakao_api_base_url="https://kapi.test",
    kakao_auth_base_url="https://kauth.test",
    cors_allowed_origins=("http://localhost:5173",),
    log_json=False,
)


@dataclass
class FakeImageStore:
    fail: bool = False
    puts: list[tuple[str, bytes, str]] = field(default_factory=list)

    def put(self, key: str, data: bytes, content_type: str) -> None:
        if self.fail:
            raise RuntimeError("AccessDenied: secret internal diagnostics")
        self.puts.append((key, data, content_type))


@dataclass
class FakeUpstream:
    """Stands in for the outbound HTTP adapter and records every call."""

    status_code: int = 200
    body: Any = field(default_factory=dict)
    error: Exception | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def __call__(self, method, url, *, headers=None, data=None, timeout=10.0):
        self.calls.append(
            {"method": method, "url": url, "headers": headers or {}, "data": data, "timeout": timeout}
        )
        if self.error is not None:
            raise self.error
        request = httpx.Request(method, url)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body, request=request)
        return httpx.Response(self.status_code, text=str(self.body), request=request)


@pytest.fixture
def settings() -> Settings:
    return TEST_SETTINGS


@pytest.fixture
def image_store() -> FakeImageStore:
    return FakeImageStore()


@pytest.fixture
def app(settings, image_store):
    application = create_app(settings)
    application.dependency_overrides[get_image_store] = lambda: image_store
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def upstream(monkeypatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr("message_gateway.adapter.client.http.request", fake)
    return fake
