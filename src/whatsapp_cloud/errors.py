"""Exceções do cliente WhatsApp Cloud.

Hierarquia:
- WhatsAppClientError: base de todas as falhas do cliente
- InvalidArgumentError: argumento obrigatório ausente ou fora do domínio
- HttpError: falha de transporte ou resposta HTTP não-2xx
- MalformedResponseError: corpo de resposta que não é JSON válido
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whatsapp_cloud.connectors.meta_errors import WhatsAppApiError


class WhatsAppClientError(Exception):
    """Base para erros do cliente."""


class InvalidArgumentError(WhatsAppClientError, ValueError):
    """Argumento inválido detectado antes de qualquer chamada de rede."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"{field} must be specified")
        self.field = field


class HttpError(WhatsAppClientError):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        meta_error: WhatsAppApiError | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.meta_error = meta_error


class MalformedResponseError(HttpError):
    """Resposta não pôde ser decodificada como JSON."""
