"""Protocolo do sink de mensagens (webhook Discord)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import SinkResponse


class MessageSinkProtocol(Protocol):
    """Contrato mínimo: POST de um corpo JSON numa URL.

    Deve levantar `SinkUnavailableError` em timeout/falha de conexão e
    retornar a resposta (qualquer status) nos demais casos.
    """

    async def post(self, url: str, body: dict[str, Any]) -> SinkResponse: ...
