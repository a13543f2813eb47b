"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from whatsapp_cloud.config.logging import get_logger

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = get_logger(__name__)


def log_meta_error(
    meta_error: WhatsAppApiError | None,
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga resposta de erro sem expor token ou conteúdo."""
    extra: dict[str, object] = {
        "method": method,
        "endpoint": endpoint,
        "status_code": status_code,
    }
    if meta_error is not None:
        extra.update(
            error_type=meta_error.error_type,
            error_code=meta_error.error_code,
            is_permanent=meta_error.is_permanent,
        )
    logger.warning("Erro da API Meta/WhatsApp", extra=extra)


def log_success(method: str, endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Requisição WhatsApp bem-sucedida",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
