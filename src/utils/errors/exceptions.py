"""Exceções compartilhadas entre camadas."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida (fatal para o request)."""


class InfrastructureError(RuntimeError):
    """Base para falhas de IO com serviços externos."""


class SinkUnavailableError(InfrastructureError):
    """Timeout ou falha de conexão ao chamar o webhook Discord."""


class LedgerStoreError(InfrastructureError):
    """Falha ao ler ou gravar o ledger persistido."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

