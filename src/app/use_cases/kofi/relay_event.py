"""Use case: relay de um evento Ko-fi para o Discord + atualização do ledger.

Fluxo (sequencial, um request):
    classify -> route -> render -> deliver
    load ledger -> reduce -> save ledger

Entrega e persistência são independentes: falha numa não pula a outra.
Falha de persistência é logada e não altera o resultado da entrega.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.payload_builders.discord import build_event_message
from app.observability import get_correlation_id
from app.services.event_classifier import classify_event
from app.services.ledger_reducer import reduce_ledger
from app.services.webhook_router import route_event
from utils.errors import LedgerStoreError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.kofi_event import EventKind, KofiEvent
    from app.protocols.ledger_store import LedgerStoreProtocol
    from app.protocols.models import DeliveryResult
    from app.services.fallback_dispatcher import FallbackDispatcher
    from app.services.webhook_router import WebhookSinks

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resultado do relay de um evento."""

    kind: EventKind
    delivery: DeliveryResult
    persisted: bool

    @property
    def success(self) -> bool:
        return self.delivery.success


class RelayKofiEventUseCase:
    """Orquestra classificação, entrega e persistência de um evento."""

    def __init__(
        self,
        dispatcher: FallbackDispatcher,
        sinks: WebhookSinks,
        profile_url: str,
        ledger_store: LedgerStoreProtocol | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._sinks = sinks
        self._profile_url = profile_url
        self._ledger_store = ledger_store
        self._clock = clock or (lambda: datetime.now(UTC))

    async def execute(self, event: KofiEvent) -> RelayResult:
        """Executa o relay.

        Raises:
            ConfigurationError: Sink padrão ausente (antes de qualquer IO).
        """
        kind = classify_event(event)
        sink_url = route_event(kind, self._sinks)
        now = self._clock()

        message = build_event_message(event, kind, self._profile_url, now=now)
        delivery = await self._dispatcher.deliver(sink_url, message)
        logger.info(
            "event_relayed" if delivery.success else "event_relay_failed",
            extra={
                "component": "relay_kofi_event",
                "correlation_id": get_correlation_id(),
                "message_id": event.message_id,
                "event_kind": str(kind),
                "format": delivery.format,
                "used_fallback": delivery.used_fallback,
                "status_code": delivery.status_code,
            },
        )

        persisted = await self._persist(event, kind, now)
        return RelayResult(kind=kind, delivery=delivery, persisted=persisted)

    async def _persist(self, event: KofiEvent, kind: EventKind, now: datetime) -> bool:
        if self._ledger_store is None:
            return False
        try:
            ledger = await self._ledger_store.load()
            await self._ledger_store.save(reduce_ledger(ledger, event, kind, now=now))
        except LedgerStoreError as exc:
            logger.error(
                "ledger_update_failed",
                extra={
                    "component": "relay_kofi_event",
                    "correlation_id": get_correlation_id(),
                    "message_id": event.message_id,
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
            return False

        logger.info(
            "ledger_updated",
            extra={
                "component": "relay_kofi_event",
                "message_id": event.message_id,
                "event_kind": str(kind),
            },
        )
        return True
