"""Cliente da API de Gists do GitHub (leitura e escrita de um arquivo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from api.connectors.http_base import HttpClient, HttpClientConfig
from config.settings.gist import GITHUB_API_BASE_URL, GITHUB_API_VERSION
from utils.errors import LedgerStoreError

if TYPE_CHECKING:
    from config.settings import GistSettings

logger = logging.getLogger(__name__)


class GistClient(HttpClient):
    """Lê e atualiza arquivos de um gist."""

    def __init__(
        self,
        token: str,
        config: HttpClientConfig | None = None,
        api_base_url: str = GITHUB_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        base_config = config or HttpClientConfig()
        base_config.default_headers = {
            **base_config.default_headers,
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        super().__init__(base_config, transport=transport)
        self._api_base_url = api_base_url.rstrip("/")

    def _gist_url(self, gist_id: str) -> str:
        return f"{self._api_base_url}/gists/{gist_id}"

    async def get_file_content(self, gist_id: str, filename: str) -> str | None:
        """Retorna o conteúdo do arquivo (None se o arquivo não existir).

        Raises:
            LedgerStoreError: Gist inexistente, status inesperado ou falha de IO.
        """
        try:
            async with self._client() as client:
                response = await client.get(self._gist_url(gist_id))
        except httpx.HTTPError as exc:
            raise LedgerStoreError(f"Gist read failed: {type(exc).__name__}") from exc

        if response.status_code == 404:
            raise LedgerStoreError("Gist not found.", status_code=404)
        if response.status_code != 200:
            raise LedgerStoreError(
                f"Gist read failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            files = response.json().get("files") or {}
        except ValueError as exc:
            raise LedgerStoreError("Gist response is not JSON") from exc

        entry = files.get(filename)
        if not isinstance(entry, dict):
            return None
        if entry.get("truncated"):
            return await self._get_raw_content(entry.get("raw_url"))
        return entry.get("content")

    async def _get_raw_content(self, raw_url: str | None) -> str:
        """Conteúdo completo de um arquivo truncado pela API (> ~1 MB).

        Raises:
            LedgerStoreError: Sem raw_url, status inesperado ou falha de IO.
        """
        if not raw_url:
            raise LedgerStoreError("Gist file truncated and raw_url missing")
        try:
            async with self._client() as client:
                response = await client.get(raw_url)
        except httpx.HTTPError as exc:
            raise LedgerStoreError(f"Gist raw read failed: {type(exc).__name__}") from exc

        if response.status_code != 200:
            raise LedgerStoreError(
                f"Gist raw read failed: {response.status_code}",
                status_code=response.status_code,
            )
        logger.info("gist_raw_content_fetched", extra={"component": "gist_client"})
        return response.text

    async def update_file(
        self,
        gist_id: str,
        filename: str,
        content: str,
        description: str,
    ) -> None:
        """Sobrescreve o arquivo do gist.

        Raises:
            LedgerStoreError: Status diferente de 200 ou falha de IO.
        """
        payload = {
            "description": description,
            "files": {filename: {"content": content}},
        }
        try:
            async with self._client() as client:
                response = await client.patch(self._gist_url(gist_id), json=payload)
        except httpx.HTTPError as exc:
            raise LedgerStoreError(f"Update gist failed: {type(exc).__name__}") from exc

        if response.status_code != 200:
            raise LedgerStoreError(
                f"Update gist failed: {response.status_code}",
                status_code=response.status_code,
            )
        logger.info("gist_updated", extra={"component": "gist_client"})


def create_gist_client(settings: GistSettings) -> GistClient:
    """Factory a partir das settings do store."""
    return GistClient(
        token=settings.token,
        config=HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
        api_base_url=settings.api_base_url,
    )
