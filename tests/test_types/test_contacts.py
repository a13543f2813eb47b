"""Testes para o tipo Contacts."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from whatsapp_cloud.types import Address, Contact, Contacts, Email, Name, Organization, Phone, Url


def _contact(**kwargs) -> Contact:
    return Contact(name=Name(formatted_name="Ana Souza", first_name="Ana"), **kwargs)


def test_payload_is_a_list_of_contacts() -> None:
    contacts = Contacts(
        contacts=[
            _contact(phones=[Phone(phone="+5511999999999", type="CELL", wa_id="5511999999999")]),
            _contact(emails=[Email(email="ana@example.com", type="WORK")]),
        ]
    )

    payload = contacts.to_payload()

    assert isinstance(payload, list)
    assert payload[0] == {
        "name": {"formatted_name": "Ana Souza", "first_name": "Ana"},
        "phones": [{"phone": "+5511999999999", "type": "CELL", "wa_id": "5511999999999"}],
    }
    assert payload[1]["emails"] == [{"email": "ana@example.com", "type": "WORK"}]


def test_full_contact_card() -> None:
    contact = _contact(
        addresses=[Address(street="Av. Paulista, 1000", city="São Paulo", zip="01310-100")],
        birthday="1990-05-17",
        org=Organization(company="Pyloto", title="CTO"),
        urls=[Url(url="https://pyloto.com.br", type="WORK")],
    )
    payload = Contacts(contacts=[contact]).to_payload()[0]
    assert payload["addresses"] == [
        {"street": "Av. Paulista, 1000", "city": "São Paulo", "zip": "01310-100"}
    ]
    assert payload["birthday"] == "1990-05-17"
    assert payload["org"] == {"company": "Pyloto", "title": "CTO"}


def test_requires_at_least_one_contact() -> None:
    with pytest.raises(ValidationError):
        Contacts(contacts=[])


def test_name_requires_a_part_besides_formatted_name() -> None:
    with pytest.raises(ValidationError, match="at least one field"):
        Name(formatted_name="Ana")


def test_birthday_format() -> None:
    with pytest.raises(ValidationError):
        _contact(birthday="17/05/1990")
