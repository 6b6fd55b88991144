"""Reducer do ledger de apoiadores.

`reduce_ledger` é puro: recebe o ledger atual, o evento classificado e
retorna uma cópia profunda com a alteração aplicada. O ledger de entrada
nunca é mutado.

Cancelamento resolve o tier pelo payload recebido (tier_name/type/Default),
não pelo registro salvo da assinatura. Se o Ko-fi enviar um tier diferente
do original, o contador errado é decrementado (ver DESIGN.md).
"""

from __future__ import annotations

import copy
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.domain.kofi_event import EventKind
from app.domain.ledger import (
    CancellationRecord,
    DonorRecord,
    RefundRecord,
    SubscriptionRecord,
)

if TYPE_CHECKING:
    from app.domain.kofi_event import KofiEvent
    from app.domain.ledger import Ledger

# Janela fixa de renovação mensal do Ko-fi
SUBSCRIPTION_PERIOD = timedelta(days=30)


def reduce_ledger(
    ledger: Ledger,
    event: KofiEvent,
    kind: EventKind,
    now: datetime | None = None,
) -> Ledger:
    """Aplica o evento ao ledger e retorna o novo ledger.

    Args:
        ledger: Ledger atual (não é alterado)
        event: Evento Ko-fi sanitizado
        kind: Classificação do evento
        now: Relógio injetável (padrão: agora em UTC)

    Returns:
        Novo ledger com o evento aplicado.
    """
    current = now or datetime.now(UTC)
    updated = copy.deepcopy(ledger)
    timestamp = event.timestamp or current.isoformat()
    tier = event.tier_label

    if kind is EventKind.DONATION:
        updated.donors.append(
            DonorRecord(
                from_name=event.from_name,
                amount=event.amount,
                currency=event.currency,
                message=event.message,
                message_id=event.message_id,
                timestamp=timestamp,
            )
        )
    elif kind in (EventKind.SUBSCRIPTION_START, EventKind.SUBSCRIPTION_RENEWAL):
        updated.subscriptions[event.from_name] = SubscriptionRecord(
            tier=tier,
            tier_name=event.tier_name,
            amount=event.amount,
            currency=event.currency,
            starts_at=current.isoformat(),
            ends_at=(current + SUBSCRIPTION_PERIOD).isoformat(),
            message_id=event.message_id,
        )
        # Só o início incrementa o contador do tier
        if kind is EventKind.SUBSCRIPTION_START:
            updated.tier_counts[tier] = updated.tier_counts.get(tier, 0) + 1
    elif kind is EventKind.CANCELLATION:
        updated.subscriptions.pop(event.from_name, None)
        updated.tier_counts[tier] = max(0, updated.tier_counts.get(tier, 0) - 1)
        updated.cancellations.append(
            CancellationRecord(
                from_name=event.from_name,
                tier=tier,
                message_id=event.message_id,
                timestamp=timestamp,
            )
        )
    elif kind is EventKind.REFUND:
        updated.refunds.append(
            RefundRecord(
                from_name=event.from_name,
                amount=event.amount,
                currency=event.currency,
                message_id=event.message_id,
                timestamp=timestamp,
            )
        )

    return updated
