"""Testes para mensagens interativas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from whatsapp_cloud.types import (
    ActionButtons,
    ActionCatalog,
    ActionList,
    ActionProduct,
    ActionProductList,
    Body,
    Footer,
    Header,
    Image,
    Interactive,
    ProductSection,
    ReplyButton,
    Row,
    Section,
)


class TestButtons:
    def test_payload(self) -> None:
        interactive = Interactive(
            action=ActionButtons(
                buttons=[ReplyButton(id="sim", title="Sim"), ReplyButton(id="nao", title="Não")]
            ),
            body=Body(text="Confirma o horário?"),
            footer=Footer(text="Pyloto"),
        )

        assert interactive.to_payload() == {
            "type": "button",
            "action": {
                "buttons": [
                    {"type": "reply", "reply": {"id": "sim", "title": "Sim"}},
                    {"type": "reply", "reply": {"id": "nao", "title": "Não"}},
                ]
            },
            "body": {"text": "Confirma o horário?"},
            "footer": {"text": "Pyloto"},
        }

    def test_max_three_buttons(self) -> None:
        buttons = [ReplyButton(id=str(i), title=f"Opção {i}") for i in range(4)]
        with pytest.raises(ValidationError):
            ActionButtons(buttons=buttons)

    def test_unique_ids(self) -> None:
        with pytest.raises(ValidationError, match="ids must be unique"):
            ActionButtons(buttons=[ReplyButton(id="a", title="A"), ReplyButton(id="a", title="B")])

    def test_body_is_required(self) -> None:
        with pytest.raises(ValidationError, match="body is required"):
            Interactive(action=ActionButtons(buttons=[ReplyButton(id="a", title="A")]))


class TestList:
    def test_payload_with_image_header(self) -> None:
        interactive = Interactive(
            action=ActionList(
                button="Ver opções",
                sections=[Section(rows=[Row(id="r1", title="Manhã", description="9h às 12h")])],
            ),
            body=Body(text="Escolha um período"),
            header=Header(type="image", image=Image(link="https://example.com/h.png")),
        )

        payload = interactive.to_payload()

        assert payload["type"] == "list"
        assert payload["header"] == {"type": "image", "image": {"link": "https://example.com/h.png"}}
        assert payload["action"] == {
            "button": "Ver opções",
            "sections": [{"rows": [{"id": "r1", "title": "Manhã", "description": "9h às 12h"}]}],
        }

    def test_row_limit_across_sections(self) -> None:
        rows = [Row(id=str(i), title=f"Linha {i}") for i in range(6)]
        with pytest.raises(ValidationError, match="rows in total"):
            ActionList(
                button="Abrir",
                sections=[Section(title="A", rows=rows), Section(title="B", rows=rows)],
            )

    def test_titles_required_with_multiple_sections(self) -> None:
        with pytest.raises(ValidationError, match="must have a title"):
            ActionList(
                button="Abrir",
                sections=[
                    Section(rows=[Row(id="1", title="Um")]),
                    Section(title="B", rows=[Row(id="2", title="Dois")]),
                ],
            )

    def test_header_type_must_match_content(self) -> None:
        with pytest.raises(ValidationError, match="must have text"):
            Header(type="text")


class TestCatalogAndProducts:
    def test_catalog_message(self) -> None:
        interactive = Interactive(
            action=ActionCatalog(thumbnail_product_retailer_id="sku-1"),
            body=Body(text="Nosso catálogo"),
        )
        assert interactive.to_payload()["action"] == {
            "name": "catalog_message",
            "parameters": {"thumbnail_product_retailer_id": "sku-1"},
        }

    def test_single_product_does_not_need_body(self) -> None:
        interactive = Interactive(action=ActionProduct(catalog_id="cat", product_retailer_id="sku"))
        assert interactive.to_payload() == {
            "type": "product",
            "action": {"catalog_id": "cat", "product_retailer_id": "sku"},
        }

    def test_product_list_requires_text_header(self) -> None:
        action = ActionProductList(
            catalog_id="cat",
            sections=[ProductSection(title="Planos", product_items=["sku-1", "sku-2"])],
        )
        with pytest.raises(ValidationError, match="text header"):
            Interactive(action=action, body=Body(text="Planos"))

        interactive = Interactive(
            action=action,
            body=Body(text="Planos"),
            header=Header(type="text", text="Escolha"),
        )
        assert interactive.to_payload()["action"] == {
            "catalog_id": "cat",
            "sections": [
                {
                    "product_items": [
                        {"product_retailer_id": "sku-1"},
                        {"product_retailer_id": "sku-2"},
                    ],
                    "title": "Planos",
                }
            ],
        }
