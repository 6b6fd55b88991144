"""Agregador de settings do Ko-fi Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Discord (sinks)
from config.settings.discord import (
    DiscordSettings,
    get_discord_settings,
    is_valid_webhook_url,
)

# Ledger store
from config.settings.gist import (
    GITHUB_API_BASE_URL,
    GITHUB_API_VERSION,
    GistSettings,
    extract_gist_id,
    get_gist_settings,
)

# Ko-fi
from config.settings.kofi import (
    KOFI_BASE_URL,
    KofiSettings,
    get_kofi_settings,
)

# Resumo
from config.settings.summary import (
    SummarySettings,
    get_summary_settings,
)

__all__ = [
    # Constants
    "GITHUB_API_BASE_URL",
    "GITHUB_API_VERSION",
    "KOFI_BASE_URL",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    "GistSettings",
    "KofiSettings",
    "SummarySettings",
    "extract_gist_id",
    "get_base_settings",
    "get_discord_settings",
    "get_gist_settings",
    "get_kofi_settings",
    "get_summary_settings",
    "is_valid_webhook_url",
]
