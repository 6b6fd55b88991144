"""Entrega com fallback único: formato rico -> formato legado.

1. Envia a mensagem rica (com os query params de components v2).
2. 2xx: entregue.
3. Rejeição de validação (400): reenvia UMA vez a legada, na mesma URL
   sem query string.
4. Qualquer outra falha, ou falha do fallback: resultado com erro
   contendo status e corpo do sink.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from app.protocols.models import DeliveryResult
from config.logging import log_fallback
from utils.errors import SinkUnavailableError

if TYPE_CHECKING:
    from app.protocols.message_sink import MessageSinkProtocol
    from app.protocols.models import MessagePair, SinkResponse

logger = logging.getLogger(__name__)

_COMPONENT = "fallback_dispatcher"

# Status com que o Discord rejeita o formato da mensagem
VALIDATION_REJECTION_STATUSES = frozenset({400})


def with_query_params(url: str, params: dict[str, str]) -> str:
    """Adiciona/sobrescreve query params preservando os existentes."""
    return str(httpx.URL(url).copy_merge_params(params))


def strip_query(url: str) -> str:
    """Remove toda a query string da URL."""
    return str(httpx.URL(url).copy_with(query=None))


def _failure_message(response: SinkResponse) -> str:
    return f"Discord webhook failed: {response.status_code} {response.text}".strip()


class FallbackDispatcher:
    """Entrega um `MessagePair` a um sink com no máximo um fallback."""

    def __init__(self, sink: MessageSinkProtocol) -> None:
        self._sink = sink

    async def deliver(self, url: str, message: MessagePair) -> DeliveryResult:
        """Entrega rica com fallback legado em rejeição de validação."""
        rich_url = with_query_params(url, message.rich.query_params)
        try:
            response = await self._sink.post(rich_url, message.rich.body)
        except SinkUnavailableError as exc:
            return DeliveryResult(success=False, format="rich", error_message=str(exc))

        if response.ok:
            return DeliveryResult(success=True, format="rich", status_code=response.status_code)

        if response.status_code not in VALIDATION_REJECTION_STATUSES:
            logger.warning(
                "delivery_failed",
                extra={"component": _COMPONENT, "format": "rich", "status_code": response.status_code},
            )
            return DeliveryResult(
                success=False,
                format="rich",
                status_code=response.status_code,
                error_message=_failure_message(response),
            )

        log_fallback(logger, _COMPONENT, reason="rich_rejected", status_code=response.status_code)
        return await self._deliver_legacy(url, message)

    async def _deliver_legacy(self, url: str, message: MessagePair) -> DeliveryResult:
        try:
            response = await self._sink.post(strip_query(url), message.legacy.body)
        except SinkUnavailableError as exc:
            return DeliveryResult(
                success=False,
                format="legacy",
                used_fallback=True,
                error_message=str(exc),
            )

        if response.ok:
            return DeliveryResult(
                success=True,
                format="legacy",
                used_fallback=True,
                status_code=response.status_code,
            )

        logger.warning(
            "delivery_failed",
            extra={"component": _COMPONENT, "format": "legacy", "status_code": response.status_code},
        )
        return DeliveryResult(
            success=False,
            format="legacy",
            used_fallback=True,
            status_code=response.status_code,
            error_message=_failure_message(response),
        )
