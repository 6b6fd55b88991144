"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: kofi_relay)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "*****"

# Campos do payload Ko-fi que nunca podem sair em log
SECRET_FIELDS = frozenset(
    {
        "verification_token",
        "email",
        "kofi_transaction_id",
        "shipping",
        "token",
        "authorization",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretFieldFilter(logging.Filter):
    """Mascara campos sensíveis passados por engano via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in SECRET_FIELDS:
            if getattr(record, field_name, None) is not None:
                setattr(record, field_name, REDACTED)
        return True
