"""Implementações concretas do store de ledger."""

from .gist_ledger_store import GistLedgerStore
from .memory_stores import MemoryLedgerStore

__all__ = ["GistLedgerStore", "MemoryLedgerStore"]
