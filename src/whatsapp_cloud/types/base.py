"""Base comum dos objetos de mensagem."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from whatsapp_cloud.constants import MessageType


class WhatsAppModel(BaseModel):
    """Modelo pydantic serializado sem campos nulos."""

    model_config = ConfigDict(extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class MessageObject(WhatsAppModel):
    """Variante de mensagem enviável pelo endpoint /messages.

    `message_type` é o discriminante: vira o campo `type` do envelope
    e a chave sob a qual o corpo retornado por `to_payload()` é aninhado.
    """

    message_type: ClassVar[MessageType]

    def to_payload(self) -> dict[str, Any] | list[dict[str, Any]]:
        return self.to_dict()
