"""Formatter JSON com campos padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Campos passados via `extra` pelo cliente e pelo transporte
CLIENT_LOG_FIELDS = (
    "method",
    "endpoint",
    "status_code",
    "message_type",
    "has_context",
    "error_type",
    "error_code",
    "is_permanent",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos de REQUIRED_LOG_FIELDS.

    Os campos de `extra` (ver CLIENT_LOG_FIELDS) entram no JSON como
    chaves de primeiro nível.

    Exemplo de output:
        {"asctime": "...", "level": "DEBUG", "logger": "whatsapp_cloud.client",
         "message": "whatsapp_message_sent", "correlation_id": "", "service": "meu_bot",
         "message_type": "text", "has_context": false}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
