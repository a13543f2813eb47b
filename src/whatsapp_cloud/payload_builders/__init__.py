"""Construção dos envelopes enviados ao endpoint /messages."""

from whatsapp_cloud.payload_builders.envelope import (
    DISCRIMINANT_KEY,
    build_base_payload,
    build_envelope,
    build_read_payload,
    stringify,
)

__all__ = [
    "DISCRIMINANT_KEY",
    "build_base_payload",
    "build_envelope",
    "build_read_payload",
    "stringify",
]
