"""Validação de argumentos das operações do cliente.

Falhas aqui acontecem antes de qualquer chamada de rede.
"""

from __future__ import annotations

from typing import Any

from whatsapp_cloud.constants import QRFormat
from whatsapp_cloud.errors import InvalidArgumentError


def require(**fields: Any) -> None:
    """Garante que cada argumento nomeado está preenchido.

    Raises:
        InvalidArgumentError: No primeiro argumento vazio, na ordem recebida
    """
    for name, value in fields.items():
        if not value:
            raise InvalidArgumentError(name)


def validate_qr_format(value: str) -> QRFormat:
    """Converte o formato de QR para o enum, rejeitando o que não for png/svg."""
    try:
        return QRFormat(value)
    except ValueError:
        allowed = ", ".join(f"'{fmt}'" for fmt in QRFormat)
        raise InvalidArgumentError("format", f"format must be one of {allowed}") from None
