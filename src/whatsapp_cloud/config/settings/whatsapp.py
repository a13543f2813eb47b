"""Settings do cliente WhatsApp Cloud.

Carregadas de variáveis de ambiente; o cliente também pode ser
construído diretamente sem passar por aqui.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v13.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do cliente.

    Attributes:
        access_token: Token de acesso à Graph API (temporário ou permanente)
        phone_number_id: ID do número do bot; vira o bot_id padrão do cliente
        api_version: Versão da Graph API (ex: v13.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout aplicado pelo transporte HTTP
        parsed_responses: Decodifica respostas como JSON antes de retornar
    """

    access_token: str = ""
    phone_number_id: str = ""

    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    request_timeout_seconds: float = 30.0
    parsed_responses: bool = True

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if not self.api_version:
            errors.append("WHATSAPP_API_VERSION não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        parsed_responses=os.getenv("WHATSAPP_PARSED_RESPONSES", "true").lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings."""
    return _load_from_env()
