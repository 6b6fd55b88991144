"""Serviços de aplicação: classificação, reducer, roteamento e entrega."""

from app.services.event_classifier import classify_event
from app.services.fallback_dispatcher import FallbackDispatcher
from app.services.ledger_reducer import SUBSCRIPTION_PERIOD, reduce_ledger
from app.services.webhook_router import WebhookSinks, route_event

__all__ = [
    "SUBSCRIPTION_PERIOD",
    "FallbackDispatcher",
    "WebhookSinks",
    "classify_event",
    "reduce_ledger",
    "route_event",
]
