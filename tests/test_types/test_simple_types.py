"""Testes para Text, Location e mídias."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from whatsapp_cloud.constants import MessageType
from whatsapp_cloud.types import Audio, Document, Image, Location, Sticker, Text, Video


class TestText:
    def test_payload_omits_unset_preview(self) -> None:
        assert Text(body="Olá").to_payload() == {"body": "Olá"}

    def test_payload_with_preview(self) -> None:
        payload = Text(body="https://pyloto.com.br", preview_url=True).to_payload()
        assert payload == {"body": "https://pyloto.com.br", "preview_url": True}

    def test_explicit_false_preview_is_sent(self) -> None:
        assert Text(body="x", preview_url=False).to_payload() == {"body": "x", "preview_url": False}

    def test_discriminant(self) -> None:
        assert Text.message_type == MessageType.TEXT
        assert "message_type" not in Text(body="x").to_payload()

    @pytest.mark.parametrize("body", ["", "x" * 4097])
    def test_rejects_invalid_body(self, body: str) -> None:
        with pytest.raises(ValidationError):
            Text(body=body)


class TestLocation:
    def test_payload(self) -> None:
        location = Location(longitude=-46.63, latitude=-23.55, name="Sé", address="Praça da Sé")
        assert location.to_payload() == {
            "longitude": -46.63,
            "latitude": -23.55,
            "name": "Sé",
            "address": "Praça da Sé",
        }

    @pytest.mark.parametrize(("longitude", "latitude"), [(181, 0), (0, -91)])
    def test_rejects_out_of_range(self, longitude: float, latitude: float) -> None:
        with pytest.raises(ValidationError):
            Location(longitude=longitude, latitude=latitude)


class TestMedia:
    def test_image_by_link_with_caption(self) -> None:
        image = Image(link="https://example.com/a.jpg", caption="foto")
        assert image.to_payload() == {"link": "https://example.com/a.jpg", "caption": "foto"}

    def test_document_by_id_with_filename(self) -> None:
        document = Document(id="media-1", filename="nota.pdf")
        assert document.to_payload() == {"id": "media-1", "filename": "nota.pdf"}

    @pytest.mark.parametrize("media_cls", [Audio, Document, Image, Sticker, Video])
    def test_requires_exactly_one_reference(self, media_cls: type) -> None:
        with pytest.raises(ValidationError, match="exactly one of id or link"):
            media_cls()
        with pytest.raises(ValidationError, match="exactly one of id or link"):
            media_cls(id="1", link="https://example.com/x")

    @pytest.mark.parametrize("media_cls", [Audio, Sticker])
    def test_audio_and_sticker_reject_caption(self, media_cls: type) -> None:
        with pytest.raises(ValidationError):
            media_cls(id="1", caption="não suportado")

    def test_filename_only_for_document(self) -> None:
        with pytest.raises(ValidationError):
            Video(id="1", filename="x.mp4")

    def test_discriminants(self) -> None:
        assert [cls.message_type for cls in (Audio, Document, Image, Sticker, Video)] == [
            "audio",
            "document",
            "image",
            "sticker",
            "video",
        ]
