"""Mensagem de contatos.

Única variante cujo corpo na API é uma lista (de contatos), e não um
objeto: `Contacts.to_payload()` retorna a lista diretamente.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import Field, model_validator

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types.base import MessageObject, WhatsAppModel


class Address(WhatsAppModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: str | None = None  # HOME | WORK


class Email(WhatsAppModel):
    email: str
    type: str | None = None


class Name(WhatsAppModel):
    """Nome do contato.

    A API exige `formatted_name` e pelo menos um dos demais campos.
    """

    formatted_name: str = Field(..., min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    middle_name: str | None = None
    suffix: str | None = None
    prefix: str | None = None

    @model_validator(mode="after")
    def _check_parts(self) -> Self:
        parts = (
            self.first_name,
            self.last_name,
            self.middle_name,
            self.suffix,
            self.prefix,
        )
        if not any(parts):
            raise ValueError("name must have at least one field besides formatted_name")
        return self


class Organization(WhatsAppModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class Phone(WhatsAppModel):
    phone: str
    type: str | None = None  # CELL | MAIN | IPHONE | HOME | WORK
    wa_id: str | None = None


class Url(WhatsAppModel):
    url: str
    type: str | None = None


class Contact(WhatsAppModel):
    """Um cartão de contato."""

    name: Name
    addresses: list[Address] | None = None
    birthday: str | None = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    emails: list[Email] | None = None
    org: Organization | None = None
    phones: list[Phone] | None = None
    urls: list[Url] | None = None


class Contacts(MessageObject):
    message_type: ClassVar[MessageType] = MessageType.CONTACTS

    contacts: list[Contact] = Field(..., min_length=1)

    def to_payload(self) -> list[dict[str, Any]]:
        return [contact.to_dict() for contact in self.contacts]
