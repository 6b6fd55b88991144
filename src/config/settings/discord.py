"""Settings específicas de Discord.

Webhooks de destino (sinks) para notificações e resumo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 10.0


def is_valid_webhook_url(url: str | None) -> bool:
    """Retorna True se a URL é absoluta e http(s)."""
    if not url:
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações dos webhooks Discord.

    Attributes:
        default_webhook_url: Sink padrão (obrigatório)
        subscriptions_webhook_url: Sink para início/renovação de assinatura
        donations_webhook_url: Sink para doações avulsas
        alerts_webhook_url: Sink para cancelamentos e reembolsos
        summary_webhook_url: Sink do resumo periódico
        request_timeout_seconds: Timeout das chamadas HTTP ao Discord
    """

    default_webhook_url: str = ""
    subscriptions_webhook_url: str = ""
    donations_webhook_url: str = ""
    alerts_webhook_url: str = ""
    summary_webhook_url: str = ""
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def resolved_summary_webhook_url(self) -> str:
        """Sink do resumo, caindo para o sink padrão."""
        return self.summary_webhook_url or self.default_webhook_url

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord."""
        errors: list[str] = []

        if not is_valid_webhook_url(self.default_webhook_url):
            errors.append("WEBHOOK_URL ausente ou inválido")

        optional = {
            "WEBHOOK_SUBSCRIPTIONS": self.subscriptions_webhook_url,
            "WEBHOOK_DONATIONS": self.donations_webhook_url,
            "WEBHOOK_ALERTS": self.alerts_webhook_url,
            "WEBHOOK_SUMMARY": self.summary_webhook_url,
        }
        for name, url in optional.items():
            if url and not is_valid_webhook_url(url):
                errors.append(f"{name} inválido")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        default_webhook_url=os.getenv("WEBHOOK_URL", ""),
        subscriptions_webhook_url=os.getenv("WEBHOOK_SUBSCRIPTIONS", ""),
        donations_webhook_url=os.getenv("WEBHOOK_DONATIONS", ""),
        alerts_webhook_url=os.getenv("WEBHOOK_ALERTS", ""),
        summary_webhook_url=os.getenv("WEBHOOK_SUMMARY", ""),
        request_timeout_seconds=float(
            os.getenv(
                "DISCORD_REQUEST_TIMEOUT_SECONDS",
                str(DEFAULT_REQUEST_TIMEOUT_SECONDS),
            )
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
