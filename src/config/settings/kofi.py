"""Settings específicas de Ko-fi.

Token de verificação do webhook e perfil público do criador.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

KOFI_BASE_URL: str = "https://ko-fi.com"


@dataclass(frozen=True)
class KofiSettings:
    """Configurações da integração Ko-fi.

    Attributes:
        verification_token: Token compartilhado enviado pelo Ko-fi em cada evento
        username: Handle público do criador (usado no link do perfil)
    """

    verification_token: str = ""
    username: str = ""

    @property
    def profile_url(self) -> str:
        """Link do perfil quando configurado, senão link genérico do Ko-fi."""
        if self.username:
            return f"{KOFI_BASE_URL}/{self.username}"
        return KOFI_BASE_URL

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Ko-fi."""
        errors: list[str] = []
        if not self.verification_token:
            errors.append("KOFI_TOKEN não configurado")
        return errors


def _load_from_env() -> KofiSettings:
    """Carrega KofiSettings de variáveis de ambiente."""
    return KofiSettings(
        verification_token=os.getenv("KOFI_TOKEN", ""),
        username=os.getenv("KOFI_USERNAME", "").strip(),
    )


@lru_cache(maxsize=1)
def get_kofi_settings() -> KofiSettings:
    """Retorna instância cacheada de KofiSettings."""
    return _load_from_env()
