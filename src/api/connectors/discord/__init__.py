"""Conector Discord: envio para webhooks."""

from .http_client import DiscordWebhookClient, create_discord_webhook_client

__all__ = ["DiscordWebhookClient", "create_discord_webhook_client"]
