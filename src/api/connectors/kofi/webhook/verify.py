"""Verificação do token Ko-fi e sanitização do payload.

Deve rodar antes de qualquer log, envio ou persistência do payload.
"""

from __future__ import annotations

from typing import Any

from .receive import TokenMismatchError

REDACTION_MARKER = "*****"
REDACTED_FIELDS = ("verification_token", "email", "kofi_transaction_id")


def verify_and_sanitize(payload: dict[str, Any], expected_token: str) -> dict[str, Any]:
    """Confere o token e redige campos sensíveis in place.

    Args:
        payload: Payload Ko-fi parseado (alterado in place)
        expected_token: Token configurado (KOFI_TOKEN)

    Raises:
        TokenMismatchError: Token ausente ou diferente do esperado.

    Returns:
        O mesmo dict, já sanitizado.
    """
    if not expected_token or payload.get("verification_token") != expected_token:
        raise TokenMismatchError("Ko-fi token does not match.")

    for field_name in REDACTED_FIELDS:
        payload[field_name] = REDACTION_MARKER
    payload["shipping"] = None
    return payload
