"""Formatters de logging estruturado (JSON)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# Mapeamento de nomes de campos para formato padrão
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases.kofi",
         "message": "event_relayed", "correlation_id": "abc", "service": "kofi_relay"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
