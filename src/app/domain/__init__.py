"""Domínio: evento Ko-fi e ledger de apoiadores."""

from app.domain.kofi_event import ALERT_KINDS, SUBSCRIPTION_KINDS, EventKind, KofiEvent
from app.domain.ledger import (
    CancellationRecord,
    DonorRecord,
    Ledger,
    RefundRecord,
    SubscriptionRecord,
)

__all__ = [
    "ALERT_KINDS",
    "SUBSCRIPTION_KINDS",
    "CancellationRecord",
    "DonorRecord",
    "EventKind",
    "KofiEvent",
    "Ledger",
    "RefundRecord",
    "SubscriptionRecord",
]
