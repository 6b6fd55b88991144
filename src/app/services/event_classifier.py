"""Classificação de eventos Ko-fi.

Função pura e total: todo payload resulta em exatamente um EventKind.
Ordem de decisão (primeiro match vence):

1. type contém "cancel"  -> CANCELLATION
2. type contém "refund"  -> REFUND
3. assinatura + primeiro pagamento -> SUBSCRIPTION_START
4. assinatura             -> SUBSCRIPTION_RENEWAL
5. demais                 -> DONATION
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.kofi_event import EventKind

if TYPE_CHECKING:
    from app.domain.kofi_event import KofiEvent


def classify_event(event: KofiEvent) -> EventKind:
    """Mapeia o evento para um EventKind (nunca falha)."""
    raw_type = (event.type or "").lower()

    if "cancel" in raw_type:
        return EventKind.CANCELLATION
    if "refund" in raw_type:
        return EventKind.REFUND
    if event.is_subscription_payment and event.is_first_subscription_payment:
        return EventKind.SUBSCRIPTION_START
    if event.is_subscription_payment:
        return EventKind.SUBSCRIPTION_RENEWAL
    return EventKind.DONATION
