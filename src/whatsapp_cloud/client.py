"""Fachada pública do cliente WhatsApp Cloud.

Cada operação valida os identificadores obrigatórios, monta URL, headers
e corpo, e delega ao transporte. Com `parsed=True` (padrão) toda resposta
é decodificada como JSON; com `parsed=False` a resposta do transporte é
devolvida intacta.

Uso:
    api = WhatsAppAPI(token, "v13.0")
    await api.send_message(bot_id, "5511999999999", Text(body="Olá"))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from whatsapp_cloud.config.logging import get_logger
from whatsapp_cloud.config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    get_whatsapp_settings,
)
from whatsapp_cloud.connectors.http_base import HttpClientConfig, HttpxTransport
from whatsapp_cloud.errors import MalformedResponseError
from whatsapp_cloud.payload_builders import build_envelope, build_read_payload, stringify
from whatsapp_cloud.validators import require, validate_qr_format

if TYPE_CHECKING:
    from whatsapp_cloud.config.settings import WhatsAppSettings
    from whatsapp_cloud.protocols import SentMessageObserver, Transport, TransportResponse
    from whatsapp_cloud.types import MessageObject

logger = get_logger(__name__)


class WhatsAppAPI:
    """Cliente assíncrono da WhatsApp Cloud API."""

    def __init__(
        self,
        token: str,
        api_version: str = GRAPH_API_VERSION,
        parsed: bool = True,
        transport: Transport | None = None,
        base_url: str = GRAPH_API_BASE_URL,
        bot_id: str | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            token: Token da API (temporário ou permanente)
            api_version: Versão da Graph API
            parsed: Decodifica respostas como JSON antes de retornar
            transport: Transporte HTTP; usa HttpxTransport se None
            base_url: URL base da Graph API
            bot_id: ID do número usado quando uma operação recebe bot_id vazio
        """
        require(token=token)
        self._token = token
        self.api_version = api_version
        self.parsed = parsed
        self._transport: Transport = transport or HttpxTransport()
        self._base_url = base_url.rstrip("/")
        self.bot_id = bot_id
        self._on_sent: SentMessageObserver | None = None

    @classmethod
    def from_settings(
        cls,
        settings: WhatsAppSettings | None = None,
        transport: Transport | None = None,
    ) -> WhatsAppAPI:
        """Cria cliente a partir de WhatsAppSettings (ou do ambiente)."""
        whatsapp = settings or get_whatsapp_settings()
        if transport is None:
            transport = HttpxTransport(
                HttpClientConfig(timeout_seconds=whatsapp.request_timeout_seconds)
            )
        return cls(
            whatsapp.access_token,
            api_version=whatsapp.api_version,
            parsed=whatsapp.parsed_responses,
            transport=transport,
            base_url=whatsapp.api_base_url,
            bot_id=whatsapp.phone_number_id or None,
        )

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self._base_url}/{self.api_version}"

    def log_sent_messages(self, callback: SentMessageObserver | None) -> WhatsAppAPI:
        """Registra o observador chamado após cada send_message bem-sucedido.

        Substitui o observador anterior; None desativa.
        """
        self._on_sent = callback
        return self

    async def send_message(
        self,
        bot_id: str | None,
        to: str,
        message: MessageObject | Mapping[str, Any],
        context: str | None = None,
    ) -> Any:
        """Envia uma mensagem.

        Args:
            bot_id: ID do número do bot; vazio usa o bot_id do cliente
            to: Telefone do destinatário
            message: Objeto de mensagem (whatsapp_cloud.types) ou dict com `_`
            context: message_id a ser respondido

        Returns:
            JSON da resposta (parsed) ou resposta do transporte

        Raises:
            InvalidArgumentError: bot_id, to ou message ausentes
            HttpError: Falha de rede ou resposta não-2xx
        """
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id, to=to, message=message)
        envelope = build_envelope(message, to, context)

        response = await self._transport.request(
            "POST",
            f"{self.api_endpoint}/{bot_id}/messages",
            headers=self._json_headers(),
            content=stringify(envelope),
        )
        result = self._handle_response(response)
        logger.debug(
            "whatsapp_message_sent",
            extra={"message_type": envelope["type"], "has_context": "context" in envelope},
        )

        if self._on_sent is not None:
            self._notify_sent(bot_id, to, message, envelope, response, result)
        return result

    async def mark_as_read(self, bot_id: str | None, message_id: str) -> Any:
        """Marca uma mensagem recebida como lida."""
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id, message_id=message_id)
        response = await self._transport.request(
            "POST",
            f"{self.api_endpoint}/{bot_id}/messages",
            headers=self._json_headers(),
            content=stringify(build_read_payload(message_id)),
        )
        return self._handle_response(response)

    async def get_media(self, media_id: str) -> Any:
        """Baixa o conteúdo de uma mídia recebida.

        Resolve o media_id para um link temporário e depois baixa o link.
        Se a primeira requisição falhar, a segunda não é feita.

        Returns:
            bytes (parsed) ou a resposta do transporte do download
        """
        require(media_id=media_id)
        lookup = await self._transport.request(
            "GET",
            f"{self.api_endpoint}/{media_id}",
            headers=self._json_headers(),
        )
        data = _decode_json(lookup)
        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise MalformedResponseError("media_url_missing", status_code=lookup.status_code)

        response = await self._transport.request(
            "GET",
            url,
            headers={**self._json_headers(), "Accept": "*/*"},
        )
        return response.content if self.parsed else response

    async def create_qr(self, bot_id: str | None, message: str, format: str = "png") -> Any:
        """Gera um QR code com mensagem pré-preenchida (format: png ou svg)."""
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id, message=message)
        qr_format = validate_qr_format(format)
        query = urlencode(
            {"generate_qr_image": str(qr_format), "prefilled_message": message}
        )
        response = await self._transport.request(
            "POST",
            f"{self._qr_endpoint(bot_id)}?{query}",
            headers=self._auth_headers(),
        )
        return self._handle_response(response)

    async def retrieve_qr(self, bot_id: str | None, qr_id: str | None = None) -> Any:
        """Busca um QR code, ou todos quando qr_id não é informado."""
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id)
        response = await self._transport.request(
            "GET",
            f"{self._qr_endpoint(bot_id)}/{qr_id or ''}",
            headers=self._auth_headers(),
        )
        return self._handle_response(response)

    async def update_qr(self, bot_id: str | None, qr_id: str, message: str) -> Any:
        """Troca a mensagem pré-preenchida de um QR code."""
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id, qr_id=qr_id, message=message)
        query = urlencode({"prefilled_message": message})
        response = await self._transport.request(
            "POST",
            f"{self._qr_endpoint(bot_id)}/{qr_id}?{query}",
            headers=self._auth_headers(),
        )
        return self._handle_response(response)

    async def delete_qr(self, bot_id: str | None, qr_id: str) -> Any:
        bot_id = self._resolve_bot_id(bot_id)
        require(bot_id=bot_id, qr_id=qr_id)
        response = await self._transport.request(
            "DELETE",
            f"{self._qr_endpoint(bot_id)}/{qr_id}",
            headers=self._auth_headers(),
        )
        return self._handle_response(response)

    def _resolve_bot_id(self, bot_id: str | None) -> str | None:
        return bot_id or self.bot_id

    def _qr_endpoint(self, bot_id: str) -> str:
        return f"{self.api_endpoint}/{bot_id}/message_qrdls"

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    def _json_headers(self) -> dict[str, str]:
        return {**self._auth_headers(), "Content-Type": "application/json"}

    def _handle_response(self, response: TransportResponse) -> Any:
        if not self.parsed:
            return response
        return _decode_json(response)

    def _notify_sent(
        self,
        bot_id: str,
        to: str,
        message: MessageObject | Mapping[str, Any],
        envelope: dict[str, Any],
        response: TransportResponse,
        result: Any,
    ) -> None:
        """Chama o observador; exceções dele são logadas e não sobem."""
        data = result if self.parsed else _peek_json(response)
        try:
            self._on_sent(bot_id, to, message, envelope, _extract_message_id(data), result)
        except Exception as exc:
            logger.warning(
                "sent_message_observer_failed",
                extra={"error_type": type(exc).__name__},
                exc_info=True,
            )


def _decode_json(response: TransportResponse) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        logger.error("Response JSON inválido", extra={"status_code": response.status_code})
        raise MalformedResponseError(
            "Response JSON inválido",
            status_code=response.status_code,
        ) from exc


def _peek_json(response: TransportResponse) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _extract_message_id(data: Any) -> str | None:
    """Lê messages[0].id da resposta de envio, se presente."""
    if not isinstance(data, dict):
        return None
    messages = data.get("messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return None
    return messages[0].get("id")
