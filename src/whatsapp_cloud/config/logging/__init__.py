"""Logging estruturado JSON para o cliente.

Uso:
    from whatsapp_cloud.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu_bot")
    logger = get_logger(__name__)

Os módulos do pacote logam via `get_logger(__name__)`, abaixo do logger
`whatsapp_cloud`. Sem `configure_logging` esse logger só tem um
NullHandler e os records seguem para os handlers da aplicação.
"""

from whatsapp_cloud.config.logging.config import (
    LIBRARY_LOGGER_NAME,
    configure_logging,
    get_logger,
)
from whatsapp_cloud.config.logging.filters import CorrelationIdFilter
from whatsapp_cloud.config.logging.formatters import (
    CLIENT_LOG_FIELDS,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "CLIENT_LOG_FIELDS",
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGER_NAME",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
