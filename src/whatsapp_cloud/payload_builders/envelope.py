"""Serialização de objetos de mensagem no envelope da API.

O corpo de cada mensagem vai como JSON *string* no campo nomeado pelo
tipo (`{"type": "text", "text": "{\\"body\\":\\"oi\\"}"}`). Contacts é
a exceção de formato: o corpo é uma lista, não um objeto.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from whatsapp_cloud.constants import MESSAGING_PRODUCT
from whatsapp_cloud.errors import InvalidArgumentError
from whatsapp_cloud.types.base import MessageObject

# Chave do discriminante em objetos de mensagem passados como dict
DISCRIMINANT_KEY = "_"


def stringify(value: Any) -> str:
    """JSON compacto, sem escapar não-ASCII."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_base_payload(
    message_type: str,
    to: str,
    context: str | None = None,
) -> dict[str, Any]:
    """Campos comuns a todo envelope de mensagem."""
    payload: dict[str, Any] = {
        "messaging_product": MESSAGING_PRODUCT,
        "type": message_type,
        "to": to,
    }
    if context:
        payload["context"] = {"message_id": context}
    return payload


def build_envelope(
    message: MessageObject | Mapping[str, Any],
    to: str,
    context: str | None = None,
) -> dict[str, Any]:
    """Constrói o envelope completo para uma mensagem.

    Args:
        message: Objeto de mensagem tipado ou dict com o tipo em `_`
        to: Telefone/ID do destinatário
        context: message_id ao qual esta mensagem responde

    Returns:
        Envelope pronto para ser codificado como corpo da requisição.
        O objeto recebido nunca é modificado.

    Raises:
        InvalidArgumentError: Destinatário vazio, tipo ausente ou corpo vazio
    """
    if not to:
        raise InvalidArgumentError("to")

    message_type, body = _split_message(message)
    envelope = build_base_payload(message_type, to, context)
    envelope[message_type] = stringify(body)
    return envelope


def build_read_payload(message_id: str) -> dict[str, Any]:
    """Envelope de status que marca uma mensagem recebida como lida."""
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "status": "read",
        "message_id": message_id,
    }


def _split_message(
    message: MessageObject | Mapping[str, Any],
) -> tuple[str, Any]:
    if isinstance(message, MessageObject):
        return str(message.message_type), message.to_payload()
    if isinstance(message, Mapping):
        return _split_mapping(message)
    raise InvalidArgumentError(
        "message",
        f"unsupported message object: {type(message).__name__}",
    )


def _split_mapping(message: Mapping[str, Any]) -> tuple[str, Any]:
    copy = dict(message)
    message_type = copy.pop(DISCRIMINANT_KEY, None)
    if not message_type:
        raise InvalidArgumentError("message", "message object must carry its type in '_'")
    message_type = str(message_type)

    # Campo homônimo ao tipo carrega o corpo (lista, no caso de contacts)
    body = copy[message_type] if message_type in copy else copy
    if not body:
        raise InvalidArgumentError("message", f"{message_type} message has no content")
    return message_type, body
