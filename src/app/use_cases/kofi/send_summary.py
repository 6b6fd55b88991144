"""Use case: resumo do ledger enviado ao Discord.

Leitura do store e entrega são ambas fatais para o request.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.payload_builders.discord import build_summary_message

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.ledger_store import LedgerStoreProtocol
    from app.protocols.models import DeliveryResult
    from app.services.fallback_dispatcher import FallbackDispatcher

logger = logging.getLogger(__name__)


class SendSummaryUseCase:
    """Lê o ledger (sem reducer) e entrega o resumo."""

    def __init__(
        self,
        ledger_store: LedgerStoreProtocol,
        dispatcher: FallbackDispatcher,
        sink_url: str,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ledger_store = ledger_store
        self._dispatcher = dispatcher
        self._sink_url = sink_url
        self._clock = clock or (lambda: datetime.now(UTC))

    async def execute(self) -> DeliveryResult:
        """Carrega o ledger e entrega o resumo.

        Raises:
            LedgerStoreError: Falha ao ler o ledger.
        """
        ledger = await self._ledger_store.load()
        message = build_summary_message(ledger, now=self._clock())
        result = await self._dispatcher.deliver(self._sink_url, message)
        logger.info(
            "summary_sent" if result.success else "summary_failed",
            extra={
                "component": "send_summary",
                "active_subscriptions": ledger.total_active_subscriptions,
                "format": result.format,
                "used_fallback": result.used_fallback,
                "status_code": result.status_code,
            },
        )
        return result
