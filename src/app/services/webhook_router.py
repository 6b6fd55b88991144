"""Seleção do webhook Discord (sink) por tipo de evento."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.kofi_event import ALERT_KINDS, SUBSCRIPTION_KINDS, EventKind
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from config.settings import DiscordSettings


@dataclass(frozen=True, slots=True)
class WebhookSinks:
    """Sinks configurados. Apenas `default` é obrigatório."""

    default: str
    subscriptions: str | None = None
    donations: str | None = None
    alerts: str | None = None

    @classmethod
    def from_settings(cls, settings: DiscordSettings) -> WebhookSinks:
        return cls(
            default=settings.default_webhook_url,
            subscriptions=settings.subscriptions_webhook_url or None,
            donations=settings.donations_webhook_url or None,
            alerts=settings.alerts_webhook_url or None,
        )


def route_event(kind: EventKind, sinks: WebhookSinks) -> str:
    """Retorna a URL do sink para o tipo de evento.

    Raises:
        ConfigurationError: Se o sink padrão não estiver configurado.
    """
    if not sinks.default:
        raise ConfigurationError("Invalid Webhook URL.")

    if kind in SUBSCRIPTION_KINDS:
        return sinks.subscriptions or sinks.default
    if kind is EventKind.DONATION:
        return sinks.donations or sinks.default
    if kind in ALERT_KINDS:
        return sinks.alerts or sinks.default
    return sinks.default
