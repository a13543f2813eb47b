"""Mensagem de texto."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types.base import MessageObject

MAX_TEXT_LENGTH = 4096


class Text(MessageObject):
    """Texto simples; `preview_url` habilita preview do primeiro link."""

    message_type: ClassVar[MessageType] = MessageType.TEXT

    body: str = Field(..., min_length=1, max_length=MAX_TEXT_LENGTH)
    preview_url: bool | None = None
