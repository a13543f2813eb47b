"""Mensagem de localização."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types.base import MessageObject


class Location(MessageObject):
    """Coordenadas com nome e endereço opcionais."""

    message_type: ClassVar[MessageType] = MessageType.LOCATION

    longitude: float = Field(..., ge=-180, le=180)
    latitude: float = Field(..., ge=-90, le=90)
    name: str | None = None
    address: str | None = None
