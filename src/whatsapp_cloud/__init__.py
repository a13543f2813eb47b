"""Cliente assíncrono para a WhatsApp Cloud API (Meta Graph API).

Uso:
    from whatsapp_cloud import WhatsAppAPI
    from whatsapp_cloud.types import Text

    api = WhatsAppAPI(token)
    await api.send_message(bot_id, "5511999999999", Text(body="Olá"))
"""

import logging

from whatsapp_cloud.client import WhatsAppAPI
from whatsapp_cloud.connectors import HttpClientConfig, HttpxTransport, WhatsAppApiError
from whatsapp_cloud.errors import (
    HttpError,
    InvalidArgumentError,
    MalformedResponseError,
    WhatsAppClientError,
)

__all__ = [
    "HttpClientConfig",
    "HttpError",
    "HttpxTransport",
    "InvalidArgumentError",
    "MalformedResponseError",
    "WhatsAppAPI",
    "WhatsAppApiError",
    "WhatsAppClientError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
