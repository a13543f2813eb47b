"""Enums e constantes da API Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT = "whatsapp"


class MessageType(StrEnum):
    """Tipos de mensagem aceitos pelo endpoint /messages."""

    TEXT = "text"
    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"
    LOCATION = "location"
    CONTACTS = "contacts"
    INTERACTIVE = "interactive"
    TEMPLATE = "template"


class InteractiveType(StrEnum):
    """Tipos de mensagens interativas suportadas."""

    BUTTON = "button"
    LIST = "list"
    PRODUCT = "product"
    PRODUCT_LIST = "product_list"
    CATALOG_MESSAGE = "catalog_message"


class QRFormat(StrEnum):
    """Formatos de imagem aceitos na geração de QR codes."""

    PNG = "png"
    SVG = "svg"
