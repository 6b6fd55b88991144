"""Factories do composition root.

Cada factory recebe as settings explicitamente; nenhum componente
lê variáveis de ambiente por conta própria.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord import create_discord_webhook_client
from api.connectors.github import create_gist_client
from app.infra.stores import GistLedgerStore
from app.services.fallback_dispatcher import FallbackDispatcher
from app.services.webhook_router import WebhookSinks
from app.use_cases.kofi import RelayKofiEventUseCase, SendSummaryUseCase
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.protocols.ledger_store import LedgerStoreProtocol
    from config.settings import DiscordSettings, GistSettings, KofiSettings


def create_fallback_dispatcher(discord: DiscordSettings) -> FallbackDispatcher:
    """Dispatcher sobre o cliente de webhook Discord."""
    return FallbackDispatcher(create_discord_webhook_client(discord))


def create_ledger_store(gist: GistSettings) -> LedgerStoreProtocol:
    """Store do ledger no gist.

    Raises:
        ConfigurationError: Token ausente ou gist id não resolvido.
    """
    if not gist.is_configured:
        raise ConfigurationError("GIST_TOKEN and (GIST_URL or GIST_ID) are required")
    gist_id = gist.resolved_gist_id
    if gist_id is None:
        raise ConfigurationError("Invalid GIST_ID or GIST_URL")
    return GistLedgerStore(create_gist_client(gist), gist_id, gist.filename)


def create_relay_use_case(
    discord: DiscordSettings,
    kofi: KofiSettings,
    gist: GistSettings,
) -> RelayKofiEventUseCase:
    """Use case do webhook; o ledger é opcional neste caminho."""
    ledger_store = create_ledger_store(gist) if gist.is_configured else None
    return RelayKofiEventUseCase(
        dispatcher=create_fallback_dispatcher(discord),
        sinks=WebhookSinks.from_settings(discord),
        profile_url=kofi.profile_url,
        ledger_store=ledger_store,
    )


def create_summary_use_case(
    discord: DiscordSettings,
    gist: GistSettings,
) -> SendSummaryUseCase:
    """Use case do resumo; ledger obrigatório."""
    return SendSummaryUseCase(
        ledger_store=create_ledger_store(gist),
        dispatcher=create_fallback_dispatcher(discord),
        sink_url=discord.resolved_summary_webhook_url,
    )
