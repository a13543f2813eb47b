"""Transporte HTTP padrão sobre httpx.

Sem retries: falhas de rede e respostas não-2xx sobem imediatamente
como HttpError. Timeout e cancelamento ficam a cargo da configuração
do transporte.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx

from whatsapp_cloud.config.logging import get_logger
from whatsapp_cloud.connectors.meta_errors import parse_meta_error
from whatsapp_cloud.connectors.meta_logging import log_meta_error, log_success
from whatsapp_cloud.errors import HttpError

logger = get_logger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpxTransport:
    """Implementação de `Transport` usando httpx.AsyncClient.

    Sem `client`, abre um AsyncClient por requisição. Com `client`, usa
    a instância injetada e não a fecha (ciclo de vida do chamador).
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: str | bytes | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **headers}
        endpoint = httpx.URL(url).path
        try:
            response = await self._send(method, url, merged_headers, content)
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "endpoint": endpoint, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

        if not response.is_success:
            meta_error = parse_meta_error(_safe_json(response))
            log_meta_error(meta_error, method, endpoint, response.status_code)
            raise HttpError(
                f"http_status_{response.status_code}",
                status_code=response.status_code,
                meta_error=meta_error,
            )

        log_success(method, endpoint, response.status_code)
        return response

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: str | bytes | None,
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method,
                url,
                headers=headers,
                content=content,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.request(
                method,
                url,
                headers=headers,
                content=content,
                timeout=self._config.timeout_seconds,
            )


def _safe_json(response: httpx.Response) -> object:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
