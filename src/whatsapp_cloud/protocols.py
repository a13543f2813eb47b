"""Contratos usados pelo cliente.

Permitem trocar o transporte HTTP (ex: por um fake em testes) e
registrar observadores de envio sem acoplar a implementações concretas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from whatsapp_cloud.types import MessageObject


class TransportResponse(Protocol):
    """Contrato mínimo de resposta HTTP (satisfeito por httpx.Response)."""

    @property
    def status_code(self) -> int: ...

    @property
    def content(self) -> bytes: ...

    def json(self) -> Any: ...


class Transport(Protocol):
    """Capacidade de executar uma requisição HTTP."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: str | bytes | None = None,
    ) -> TransportResponse: ...


class SentMessageObserver(Protocol):
    """Observador chamado após cada envio bem-sucedido."""

    def __call__(
        self,
        bot_id: str,
        to: str,
        message: MessageObject | dict[str, Any],
        envelope: dict[str, Any],
        message_id: str | None,
        response: Any,
    ) -> None: ...
