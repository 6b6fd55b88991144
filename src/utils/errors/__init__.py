"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InfrastructureError,
    LedgerStoreError,
    SinkUnavailableError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
    "LedgerStoreError",
    "SinkUnavailableError",
]
