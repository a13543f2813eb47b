"""Conector HTTP para a Graph API.

Responsabilidades:
- Transporte HTTP padrão (httpx)
- Parsing e logging de erros Meta sem PII
"""

from .http_base import HttpClientConfig, HttpxTransport
from .meta_errors import WhatsAppApiError, is_permanent_error, parse_meta_error

__all__ = [
    "HttpClientConfig",
    "HttpxTransport",
    "WhatsAppApiError",
    "is_permanent_error",
    "parse_meta_error",
]
