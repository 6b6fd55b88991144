"""Settings do ledger persistido em GitHub Gist."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache

GITHUB_API_BASE_URL: str = "https://api.github.com"
GITHUB_API_VERSION: str = "2022-11-28"
DEFAULT_GIST_FILENAME: str = "kofi.json"

_HEX_ID = re.compile(r"^[a-f0-9]+$", re.IGNORECASE)
_GIST_URL_PATTERNS = (
    re.compile(r"gist\.githubusercontent\.com/[^/]+/([a-f0-9]+)/raw", re.IGNORECASE),
    re.compile(r"gist\.github\.com/[^/]+/([a-f0-9]+)", re.IGNORECASE),
    re.compile(r"/([a-f0-9]+)/raw/", re.IGNORECASE),
)


def extract_gist_id(gist_url: str | None = None, gist_id: str | None = None) -> str | None:
    """Resolve o ID do gist a partir do ID explícito ou da URL.

    Args:
        gist_url: URL do gist (raw ou página)
        gist_id: ID explícito (hexadecimal), tem precedência

    Returns:
        ID do gist ou None se nenhum formato reconhecido.
    """
    if gist_id and _HEX_ID.match(gist_id):
        return gist_id
    if gist_url:
        for pattern in _GIST_URL_PATTERNS:
            match = pattern.search(gist_url)
            if match:
                return match.group(1)
    return None


@dataclass(frozen=True)
class GistSettings:
    """Configurações do store de ledger.

    Attributes:
        gist_url: URL do gist (raw ou página)
        gist_id: ID explícito do gist
        token: Token GitHub com escopo gist
        filename: Arquivo do gist que guarda o ledger
        api_base_url: URL base da API GitHub
        request_timeout_seconds: Timeout das chamadas HTTP ao GitHub
    """

    gist_url: str = ""
    gist_id: str = ""
    token: str = ""
    filename: str = DEFAULT_GIST_FILENAME
    api_base_url: str = GITHUB_API_BASE_URL
    request_timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        """True quando há token e alguma referência ao gist."""
        return bool(self.token and (self.gist_url or self.gist_id))

    @property
    def resolved_gist_id(self) -> str | None:
        """ID do gist resolvido (None se inválido)."""
        return extract_gist_id(self.gist_url, self.gist_id)

    def validate(self) -> list[str]:
        """Valida configurações do store.

        Store é opcional no webhook; só valida quando configurado.
        """
        errors: list[str] = []
        if not self.is_configured:
            return errors
        if self.resolved_gist_id is None:
            errors.append("GIST_ID ou GIST_URL inválido")
        if self.request_timeout_seconds <= 0:
            errors.append("GIST_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> GistSettings:
    """Carrega GistSettings de variáveis de ambiente."""
    return GistSettings(
        gist_url=os.getenv("GIST_URL", ""),
        gist_id=os.getenv("GIST_ID", ""),
        token=os.getenv("GIST_TOKEN", ""),
        filename=os.getenv("GIST_FILENAME", DEFAULT_GIST_FILENAME),
        api_base_url=os.getenv("GITHUB_API_BASE_URL", GITHUB_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("GIST_REQUEST_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_gist_settings() -> GistSettings:
    """Retorna instância cacheada de GistSettings."""
    return _load_from_env()
