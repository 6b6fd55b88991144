"""Cliente HTTP para webhooks Discord.

Faz um único POST por chamada. Timeouts e falhas de conexão viram
`SinkUnavailableError`; qualquer status HTTP é devolvido ao chamador,
que decide sobre o fallback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClient, HttpClientConfig
from app.protocols.models import SinkResponse
from utils.errors import SinkUnavailableError

if TYPE_CHECKING:
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)


class DiscordWebhookClient(HttpClient):
    """Sink de mensagens via webhook Discord."""

    async def post(self, url: str, body: dict[str, Any]) -> SinkResponse:
        """Envia o corpo JSON ao webhook.

        Raises:
            SinkUnavailableError: Timeout ou erro de conexão.
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    url,
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as exc:
            logger.warning("discord_webhook_timeout", extra={"component": "discord_client"})
            raise SinkUnavailableError("Discord webhook timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "discord_webhook_connection_error",
                extra={"component": "discord_client", "error_type": type(exc).__name__},
            )
            raise SinkUnavailableError("Discord webhook connection failed") from exc

        logger.debug(
            "discord_webhook_response",
            extra={"component": "discord_client", "status_code": response.status_code},
        )
        return SinkResponse(status_code=response.status_code, text=response.text)


def create_discord_webhook_client(
    settings: DiscordSettings | None = None,
) -> DiscordWebhookClient:
    """Factory com timeout vindo das settings."""
    from config.settings import get_discord_settings

    discord = settings or get_discord_settings()
    return DiscordWebhookClient(
        HttpClientConfig(timeout_seconds=discord.request_timeout_seconds)
    )
