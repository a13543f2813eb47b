"""Mensagem de template (modelos pré-aprovados pela Meta)."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Self

from pydantic import Field, field_validator, model_validator

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types.base import MessageObject, WhatsAppModel
from whatsapp_cloud.types.media import Document, Image, Video


class Language(WhatsAppModel):
    code: str = Field(..., min_length=1)
    policy: Literal["deterministic"] = "deterministic"


class Currency(WhatsAppModel):
    fallback_value: str
    code: str = Field(..., min_length=3, max_length=3)
    amount_1000: int


class DateTime(WhatsAppModel):
    fallback_value: str


class Parameter(WhatsAppModel):
    """Parâmetro de componente; o campo preenchido deve ser o nomeado por `type`."""

    type: Literal["text", "currency", "date_time", "image", "document", "video", "payload"]
    text: str | None = None
    currency: Currency | None = None
    date_time: DateTime | None = None
    image: Image | None = None
    document: Document | None = None
    video: Video | None = None
    payload: str | None = None

    @model_validator(mode="after")
    def _check_value(self) -> Self:
        if getattr(self, self.type) is None:
            raise ValueError(f"parameter of type {self.type} must have {self.type}")
        return self


class HeaderComponent(WhatsAppModel):
    type: Literal["header"] = "header"
    parameters: list[Parameter] = Field(..., min_length=1)


class BodyComponent(WhatsAppModel):
    type: Literal["body"] = "body"
    parameters: list[Parameter] = Field(..., min_length=1)


class ButtonComponent(WhatsAppModel):
    """Botão de template: `quick_reply` leva payload, `url` leva texto."""

    type: Literal["button"] = "button"
    sub_type: Literal["quick_reply", "url"]
    index: int = Field(..., ge=0, le=2)
    parameters: list[Parameter] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_parameters(self) -> Self:
        expected = "payload" if self.sub_type == "quick_reply" else "text"
        if any(parameter.type != expected for parameter in self.parameters):
            raise ValueError(f"{self.sub_type} buttons only accept {expected} parameters")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "sub_type": self.sub_type,
            "index": str(self.index),
            "parameters": [parameter.to_dict() for parameter in self.parameters],
        }


Component = Annotated[
    HeaderComponent | BodyComponent | ButtonComponent,
    Field(discriminator="type"),
]


class Template(MessageObject):
    message_type: ClassVar[MessageType] = MessageType.TEMPLATE

    name: str = Field(..., min_length=1)
    language: Language
    components: list[Component] = Field(default_factory=list)

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Language(code=value)
        return value

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "language": self.language.to_dict(),
        }
        if self.components:
            payload["components"] = [component.to_dict() for component in self.components]
        return payload
