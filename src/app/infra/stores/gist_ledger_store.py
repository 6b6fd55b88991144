"""Store do ledger em um arquivo de GitHub Gist."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.ledger import Ledger
from app.protocols.ledger_store import LedgerStoreProtocol

if TYPE_CHECKING:
    from api.connectors.github.gist_client import GistClient

logger = logging.getLogger(__name__)


class GistLedgerStore(LedgerStoreProtocol):
    """Lê/grava o ledger inteiro como JSON no arquivo do gist."""

    def __init__(self, client: GistClient, gist_id: str, filename: str) -> None:
        self._client = client
        self._gist_id = gist_id
        self._filename = filename

    async def load(self) -> Ledger:
        """Carrega o ledger; arquivo ausente ou ilegível vira ledger vazio."""
        content = await self._client.get_file_content(self._gist_id, self._filename)
        if not content:
            logger.info("ledger_file_missing", extra={"component": "gist_ledger_store"})
            return Ledger()

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("ledger_file_unparseable", extra={"component": "gist_ledger_store"})
            return Ledger()

        if isinstance(data, list):
            logger.info("ledger_legacy_format", extra={"component": "gist_ledger_store"})
        return Ledger.from_dict(data)

    async def save(self, ledger: Ledger) -> None:
        """Grava o documento inteiro (último a gravar vence)."""
        updated_at = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
        await self._client.update_file(
            self._gist_id,
            self._filename,
            json.dumps(ledger.to_dict(), ensure_ascii=False),
            description=f"Last updated at {updated_at}",
        )
