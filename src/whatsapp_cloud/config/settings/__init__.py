"""Agregador de settings do whatsapp_cloud.

Re-exporta settings e funções de carga a partir do ambiente.
"""

from __future__ import annotations

from whatsapp_cloud.config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "WhatsAppSettings",
    "get_whatsapp_settings",
]
