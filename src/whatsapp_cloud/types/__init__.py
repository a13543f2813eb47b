"""Objetos de mensagem, um por tipo aceito pela API.

Puramente dados: validam o conteúdo na construção (pydantic) e sabem
gerar o próprio corpo via `to_payload()`. Nenhum IO aqui.
"""

from whatsapp_cloud.types.base import MessageObject
from whatsapp_cloud.types.contacts import (
    Address,
    Contact,
    Contacts,
    Email,
    Name,
    Organization,
    Phone,
    Url,
)
from whatsapp_cloud.types.interactive import (
    ActionButtons,
    ActionCatalog,
    ActionList,
    ActionProduct,
    ActionProductList,
    Body,
    Footer,
    Header,
    Interactive,
    ProductSection,
    ReplyButton,
    Row,
    Section,
)
from whatsapp_cloud.types.location import Location
from whatsapp_cloud.types.media import Audio, Document, Image, Sticker, Video
from whatsapp_cloud.types.template import (
    BodyComponent,
    ButtonComponent,
    Currency,
    DateTime,
    HeaderComponent,
    Language,
    Parameter,
    Template,
)
from whatsapp_cloud.types.text import Text

__all__ = [
    "ActionButtons",
    "ActionCatalog",
    "ActionList",
    "ActionProduct",
    "ActionProductList",
    "Address",
    "Audio",
    "Body",
    "BodyComponent",
    "ButtonComponent",
    "Contact",
    "Contacts",
    "Currency",
    "DateTime",
    "Document",
    "Email",
    "Footer",
    "Header",
    "HeaderComponent",
    "Image",
    "Interactive",
    "Language",
    "Location",
    "MessageObject",
    "Name",
    "Organization",
    "Parameter",
    "Phone",
    "ProductSection",
    "ReplyButton",
    "Row",
    "Section",
    "Sticker",
    "Template",
    "Text",
    "Url",
    "Video",
]
