"""Mensagens interativas (botões, listas, catálogo e produtos)."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, Self

from pydantic import Field, model_validator

from whatsapp_cloud.constants import InteractiveType, MessageType
from whatsapp_cloud.types.base import MessageObject, WhatsAppModel
from whatsapp_cloud.types.media import Document, Image, Video

MAX_BUTTONS = 3
MAX_SECTIONS = 10
MAX_LIST_ROWS = 10
MAX_HEADER_TEXT_LENGTH = 60
MAX_BODY_TEXT_LENGTH = 1024
MAX_FOOTER_TEXT_LENGTH = 60


class Header(WhatsAppModel):
    """Cabeçalho: texto ou mídia (o campo preenchido segue `type`)."""

    type: Literal["text", "image", "video", "document"]
    text: str | None = Field(None, max_length=MAX_HEADER_TEXT_LENGTH)
    image: Image | None = None
    video: Video | None = None
    document: Document | None = None

    @model_validator(mode="after")
    def _check_content(self) -> Self:
        if getattr(self, self.type) is None:
            raise ValueError(f"header of type {self.type} must have {self.type}")
        return self


class Body(WhatsAppModel):
    text: str = Field(..., min_length=1, max_length=MAX_BODY_TEXT_LENGTH)


class Footer(WhatsAppModel):
    text: str = Field(..., min_length=1, max_length=MAX_FOOTER_TEXT_LENGTH)


class ReplyButton(WhatsAppModel):
    id: str = Field(..., min_length=1, max_length=256)
    title: str = Field(..., min_length=1, max_length=20)


class Row(WhatsAppModel):
    id: str = Field(..., min_length=1, max_length=200)
    title: str = Field(..., min_length=1, max_length=24)
    description: str | None = Field(None, max_length=72)


class Section(WhatsAppModel):
    title: str | None = Field(None, max_length=24)
    rows: list[Row] = Field(..., min_length=1)


class ProductSection(WhatsAppModel):
    title: str | None = Field(None, max_length=24)
    product_items: list[str] = Field(..., min_length=1)

    def to_dict(self) -> dict[str, Any]:
        section: dict[str, Any] = {
            "product_items": [
                {"product_retailer_id": retailer_id} for retailer_id in self.product_items
            ],
        }
        if self.title:
            section["title"] = self.title
        return section


class ActionButtons(WhatsAppModel):
    """Até 3 botões de resposta rápida."""

    interactive_type: ClassVar[InteractiveType] = InteractiveType.BUTTON

    buttons: list[ReplyButton] = Field(..., min_length=1, max_length=MAX_BUTTONS)

    @model_validator(mode="after")
    def _check_unique(self) -> Self:
        ids = [button.id for button in self.buttons]
        titles = [button.title for button in self.buttons]
        if len(set(ids)) != len(ids):
            raise ValueError("buttons ids must be unique")
        if len(set(titles)) != len(titles):
            raise ValueError("buttons titles must be unique")
        return self

    def to_payload(self) -> dict[str, Any]:
        return {
            "buttons": [{"type": "reply", "reply": button.to_dict()} for button in self.buttons],
        }


class ActionList(WhatsAppModel):
    """Lista de opções agrupadas em seções, aberta pelo botão `button`."""

    interactive_type: ClassVar[InteractiveType] = InteractiveType.LIST

    button: str = Field(..., min_length=1, max_length=20)
    sections: list[Section] = Field(..., min_length=1, max_length=MAX_SECTIONS)

    @model_validator(mode="after")
    def _check_sections(self) -> Self:
        if sum(len(section.rows) for section in self.sections) > MAX_LIST_ROWS:
            raise ValueError(f"list can't have more than {MAX_LIST_ROWS} rows in total")
        if len(self.sections) > 1 and not all(section.title for section in self.sections):
            raise ValueError("all sections must have a title when there's more than one")
        return self

    def to_payload(self) -> dict[str, Any]:
        return self.to_dict()


class ActionCatalog(WhatsAppModel):
    interactive_type: ClassVar[InteractiveType] = InteractiveType.CATALOG_MESSAGE

    thumbnail_product_retailer_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        action: dict[str, Any] = {"name": "catalog_message"}
        if self.thumbnail_product_retailer_id:
            action["parameters"] = {
                "thumbnail_product_retailer_id": self.thumbnail_product_retailer_id,
            }
        return action


class ActionProduct(WhatsAppModel):
    interactive_type: ClassVar[InteractiveType] = InteractiveType.PRODUCT

    catalog_id: str = Field(..., min_length=1)
    product_retailer_id: str = Field(..., min_length=1)

    def to_payload(self) -> dict[str, Any]:
        return self.to_dict()


class ActionProductList(WhatsAppModel):
    interactive_type: ClassVar[InteractiveType] = InteractiveType.PRODUCT_LIST

    catalog_id: str = Field(..., min_length=1)
    sections: list[ProductSection] = Field(..., min_length=1, max_length=MAX_SECTIONS)

    @model_validator(mode="after")
    def _check_sections(self) -> Self:
        if len(self.sections) > 1 and not all(section.title for section in self.sections):
            raise ValueError("all sections must have a title when there's more than one")
        return self

    def to_payload(self) -> dict[str, Any]:
        return {
            "catalog_id": self.catalog_id,
            "sections": [section.to_dict() for section in self.sections],
        }


Action = ActionButtons | ActionList | ActionCatalog | ActionProduct | ActionProductList


class Interactive(MessageObject):
    """Mensagem interativa.

    `body` é obrigatório para toda ação exceto produto único; lista de
    produtos exige `header` de texto.
    """

    message_type: ClassVar[MessageType] = MessageType.INTERACTIVE

    action: Action
    body: Body | None = None
    header: Header | None = None
    footer: Footer | None = None

    @model_validator(mode="after")
    def _check_parts(self) -> Self:
        if self.body is None and not isinstance(self.action, ActionProduct):
            raise ValueError("body is required for this interactive action")
        if isinstance(self.action, ActionProductList):
            if self.header is None or self.header.type != "text":
                raise ValueError("product list requires a text header")
        return self

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": str(self.action.interactive_type),
            "action": self.action.to_payload(),
        }
        for name, part in (("header", self.header), ("body", self.body), ("footer", self.footer)):
            if part is not None:
                payload[name] = part.to_dict()
        return payload
