"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios.
"""

from __future__ import annotations

import copy

from app.domain.ledger import Ledger
from app.protocols.ledger_store import LedgerStoreProtocol


class MemoryLedgerStore(LedgerStoreProtocol):
    """Ledger em memória com a mesma semântica get/put do gist."""

    def __init__(self, initial: Ledger | None = None) -> None:
        self._ledger = copy.deepcopy(initial) if initial is not None else Ledger()
        self.save_count = 0

    async def load(self) -> Ledger:
        """Retorna cópia do ledger atual."""
        return copy.deepcopy(self._ledger)

    async def save(self, ledger: Ledger) -> None:
        """Substitui o ledger inteiro."""
        self._ledger = copy.deepcopy(ledger)
        self.save_count += 1

    @property
    def snapshot(self) -> Ledger:
        """Ledger atual (apenas para testes)."""
        return copy.deepcopy(self._ledger)
