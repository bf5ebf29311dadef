import httpx
import pytest

from message_gateway.common.errors import TransportError, UpstreamError
from message_gateway.service.kakao import call_kakao


@pytest.mark.asyncio
async def test_call_kakao_returns_json_and_applies_timeout(settings, upstream) -> None:
    upstream.body = {"ok": True}

    body = await call_kakao(settings, "GET", "https://kapi.test/x", token="t")

    assert body == {"ok": True}
    assert upstream.calls[0]["timeout"] == settings.upstream_timeout_seconds
    assert "Content-Type" not in upstream.calls[0]["headers"]


@pytest.mark.asyncio
async def test_call_kakao_raises_upstream_error_with_body(settings, upstream) -> None:
    upstream.status_code = 502
    upstream.body = "<html>bad gateway</html>"

    with pytest.raises(UpstreamError) as exc_info:
        await call_kakao(settings, "GET", "https://kapi.test/x")

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "<html>bad gateway</html>"


@pytest.mark.asyncio
async def test_call_kakao_wraps_transport_failures(settings, upstream) -> None:
    upstream.error = httpx.ConnectTimeout("connect timeout")

    with pytest.raises(TransportError) as exc_info:
        await call_kakao(settings, "POST", "https://kapi.test/x", data={"a": "b"})

    assert exc_info.value.status_code == 500
    assert exc_info.value.error == "connect timeout"
