"""Parse do webhook Ko-fi (campo `data` com JSON, sem PII em logs)."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs

DATA_FIELD = "data"


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidPayloadError(WebhookRequestError):
    """Campo `data` presente mas não é JSON de objeto."""


class TokenMismatchError(WebhookRequestError):
    """Token de verificação não confere com o configurado."""


def extract_data_field(raw_body: bytes, content_type: str | None) -> Any | None:
    """Extrai o campo `data` do corpo (form-urlencoded ou JSON).

    Args:
        raw_body: Corpo bruto do request
        content_type: Header Content-Type

    Returns:
        String JSON, objeto, ou None se o campo não existir.
    """
    if not raw_body:
        return None

    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type == "application/json":
        try:
            body = json.loads(raw_body)
        except json.JSONDecodeError as exc:
            raise InvalidPayloadError("invalid_json") from exc
        if not isinstance(body, dict):
            return None
        return body.get(DATA_FIELD) or None

    fields = parse_qs(raw_body.decode("utf-8", errors="replace"), keep_blank_values=True)
    values = fields.get(DATA_FIELD)
    if not values or not values[0]:
        return None
    return values[0]


def parse_kofi_payload(data: Any) -> dict[str, Any]:
    """Converte o campo `data` em dict.

    Raises:
        InvalidPayloadError: JSON inválido ou não-objeto.
    """
    if isinstance(data, dict):
        return data
    if not isinstance(data, str | bytes):
        raise InvalidPayloadError("payload_not_object")

    try:
        payload = json.loads(data)
    except json.JSONDecodeError as exc:
        raise InvalidPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload_not_object")
    return payload
