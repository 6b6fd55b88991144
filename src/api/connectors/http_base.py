"""Base HTTP compartilhada pelos conectores (Discord, GitHub)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    Sem retries: a única repetição permitida é o fallback rico -> legado.
    """

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples com timeout limitado.

    `transport` permite injetar `httpx.MockTransport` nos testes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            headers=self._config.default_headers,
            transport=self._transport,
        )
