"""Settings do endpoint de resumo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SummarySettings:
    """Credenciais aceitas pelo endpoint de resumo.

    Attributes:
        summary_token: Token estático (query, body ou header x-summary-token)
        cron_secret: Segredo do job agendado (Authorization: Bearer ...)
    """

    summary_token: str = ""
    cron_secret: str = ""

    def validate(self) -> list[str]:
        """Ao menos uma credencial deve existir."""
        if not self.summary_token and not self.cron_secret:
            return ["SUMMARY_TOKEN ou CRON_SECRET não configurado"]
        return []


def _load_from_env() -> SummarySettings:
    """Carrega SummarySettings de variáveis de ambiente."""
    return SummarySettings(
        summary_token=os.getenv("SUMMARY_TOKEN", ""),
        cron_secret=os.getenv("CRON_SECRET", ""),
    )


@lru_cache(maxsize=1)
def get_summary_settings() -> SummarySettings:
    """Retorna instância cacheada de SummarySettings."""
    return _load_from_env()
