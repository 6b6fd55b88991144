"""Bootstrap da aplicação: inicialização e validação de settings.

Uso:
    from app.bootstrap import initialize_app

    initialize_app()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_discord_settings,
    get_gist_settings,
    get_kofi_settings,
    get_summary_settings,
)

SERVICE_NAME = "kofi_relay"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Erros de todas as settings, prefixados pelo domínio."""
    errors: list[str] = []
    errors.extend(f"base: {e}" for e in get_base_settings().validate())
    errors.extend(f"discord: {e}" for e in get_discord_settings().validate())
    errors.extend(f"kofi: {e}" for e in get_kofi_settings().validate())
    errors.extend(f"gist: {e}" for e in get_gist_settings().validate())
    return errors


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido. Em `development` só alerta.
    O resumo valida suas credenciais por request (não bloqueia o webhook).
    """
    base = get_base_settings()
    errors = collect_settings_errors()
    summary_errors = get_summary_settings().validate()

    if summary_errors:
        logger.info(
            "summary_endpoint_disabled",
            extra={"component": "bootstrap", "errors": summary_errors},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
