"""Testes para HttpxTransport usando httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from whatsapp_cloud.connectors import HttpClientConfig, HttpxTransport
from whatsapp_cloud.errors import HttpError

URL = "https://graph.facebook.com/v13.0/123/messages"


def _transport(handler, config: HttpClientConfig | None = None) -> tuple[HttpxTransport, httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpxTransport(config, client=client), client


@pytest.mark.asyncio
async def test_request_sends_method_headers_and_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"messages": [{"id": "wamid.1"}]})

    transport, client = _transport(
        handler,
        HttpClientConfig(default_headers={"User-Agent": "whatsapp-cloud-client"}),
    )
    async with client:
        response = await transport.request(
            "POST",
            URL,
            headers={"Authorization": "Bearer tok"},
            content='{"a":1}',
        )

    assert response.json() == {"messages": [{"id": "wamid.1"}]}
    assert seen[0].method == "POST"
    assert seen[0].headers["Authorization"] == "Bearer tok"
    assert seen[0].headers["User-Agent"] == "whatsapp-cloud-client"
    assert seen[0].content == b'{"a":1}'


@pytest.mark.asyncio
async def test_non_2xx_raises_with_meta_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            401,
            json={"error": {"type": "OAuthException", "code": 190, "message": "expired"}},
        )

    transport, client = _transport(handler)
    async with client:
        with pytest.raises(HttpError) as exc_info:
            await transport.request("GET", URL, headers={})

    error = exc_info.value
    assert error.status_code == 401
    assert error.meta_error is not None
    assert error.meta_error.error_code == 190
    assert error.meta_error.is_permanent is True


@pytest.mark.asyncio
async def test_non_json_error_body_still_raises() -> None:
    transport, client = _transport(lambda request: httpx.Response(502, text="Bad Gateway"))
    async with client:
        with pytest.raises(HttpError) as exc_info:
            await transport.request("GET", URL, headers={})

    assert exc_info.value.status_code == 502
    assert exc_info.value.meta_error is None


@pytest.mark.asyncio
async def test_connection_error_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    transport, client = _transport(handler)
    async with client:
        with pytest.raises(HttpError, match="http_connection_error") as exc_info:
            await transport.request("GET", URL, headers={})

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
