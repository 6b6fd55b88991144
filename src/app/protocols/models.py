"""DTOs trocados entre renderização, entrega e rotas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

# Parâmetros exigidos pelo Discord para aceitar mensagens com components v2
RICH_QUERY_PARAMS: dict[str, str] = {"wait": "true", "with_components": "true"}


@dataclass(frozen=True, slots=True)
class RichMessage:
    """Representação rica (components v2)."""

    body: dict[str, Any]
    query_params: dict[str, str] = field(default_factory=lambda: dict(RICH_QUERY_PARAMS))
    format: Literal["rich"] = "rich"


@dataclass(frozen=True, slots=True)
class LegacyMessage:
    """Representação legada (embeds), usada quando a rica é rejeitada."""

    body: dict[str, Any]
    format: Literal["legacy"] = "legacy"


RenderedMessage = RichMessage | LegacyMessage


@dataclass(frozen=True, slots=True)
class MessagePair:
    """Par rica/legada gerado a partir da mesma entrada."""

    rich: RichMessage
    legacy: LegacyMessage


@dataclass(frozen=True, slots=True)
class SinkResponse:
    """Resposta bruta do sink."""

    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Resultado da entrega com fallback.

    Atributos:
        success: Mensagem aceita pelo sink
        format: Formato aceito (rich|legacy) ou o último tentado
        used_fallback: True se o formato legado foi enviado
        status_code: Último status HTTP recebido (None em timeout/conexão)
        error_message: Mensagem de erro (status + corpo do sink)
    """

    success: bool
    format: Literal["rich", "legacy"]
    used_fallback: bool = False
    status_code: int | None = None
    error_message: str | None = None
