"""Mensagens de mídia (audio, document, image, sticker, video).

Cada mídia é referenciada por `id` (upload prévio na Graph API) ou por
`link` público, nunca pelos dois.
"""

from __future__ import annotations

from typing import ClassVar, Self

from pydantic import Field, model_validator

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types.base import MessageObject

MAX_CAPTION_LENGTH = 1024


class _Media(MessageObject):
    id: str | None = None
    link: str | None = None

    @model_validator(mode="after")
    def _check_reference(self) -> Self:
        if bool(self.id) == bool(self.link):
            raise ValueError("media must have exactly one of id or link")
        return self


class _CaptionedMedia(_Media):
    caption: str | None = Field(None, max_length=MAX_CAPTION_LENGTH)


class Audio(_Media):
    message_type: ClassVar[MessageType] = MessageType.AUDIO


class Sticker(_Media):
    message_type: ClassVar[MessageType] = MessageType.STICKER


class Image(_CaptionedMedia):
    message_type: ClassVar[MessageType] = MessageType.IMAGE


class Video(_CaptionedMedia):
    message_type: ClassVar[MessageType] = MessageType.VIDEO


class Document(_CaptionedMedia):
    message_type: ClassVar[MessageType] = MessageType.DOCUMENT

    filename: str | None = None
