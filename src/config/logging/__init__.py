"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="kofi_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("event_relayed", extra={"event_kind": "donation"})

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Nunca logar token de verificação, email ou transação.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, SecretFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "SecretFieldFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
