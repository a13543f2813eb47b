"""Configuração centralizada de logging do cliente."""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from whatsapp_cloud.config.logging.filters import CorrelationIdFilter
from whatsapp_cloud.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_cloud"

LIBRARY_LOGGER_NAME = "whatsapp_cloud"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Instala um único handler JSON no logger `whatsapp_cloud`.

    O logger raiz da aplicação não é tocado: os records do cliente
    deixam de propagar e saem só pelo handler JSON.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        stream: Destino do handler; stderr se None.

    Returns:
        O logger do pacote já configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(level_upper)
    library_logger.handlers = [handler]
    library_logger.propagate = False
    return library_logger


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
