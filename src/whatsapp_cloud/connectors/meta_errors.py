"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    is_permanent: bool  # True se repetir a requisição não adianta


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Erros permanentes: 400, 401, 403, 404, 413
    Erros transitórios: 429 (rate limit), 500+ (server errors)
    """
    if error_code in {400, 401, 403, 404, 413}:
        return True
    return error_type in {"OAuthException", "InvalidRequest"}


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Extrai o objeto `error` de um corpo de resposta da Graph API.

    Args:
        response_data: JSON decodificado da resposta

    Returns:
        WhatsAppApiError se houver erro, None caso contrário
    """
    if not isinstance(response_data, dict):
        return None

    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_type = error_obj.get("type", "unknown")
    error_code = error_obj.get("code", 0)

    return WhatsAppApiError(
        error_type=error_type,
        error_code=error_code,
        error_message=error_obj.get("message", "Erro desconhecido"),
        is_permanent=is_permanent_error(error_code, error_type),
    )
