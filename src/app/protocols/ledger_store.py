"""Protocolo do store de ledger (documento único, get/put inteiro)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.ledger import Ledger


class LedgerStoreProtocol(ABC):
    """Contrato do store do ledger.

    Sem versionamento: `save` sobrescreve o documento inteiro.
    """

    @abstractmethod
    async def load(self) -> Ledger:
        """Carrega o ledger.

        Documento ausente ou ilegível resulta em ledger vazio.

        Raises:
            LedgerStoreError: Falha de IO com o store.
        """

    @abstractmethod
    async def save(self, ledger: Ledger) -> None:
        """Grava o ledger inteiro.

        Raises:
            LedgerStoreError: Falha de IO com o store.
        """
