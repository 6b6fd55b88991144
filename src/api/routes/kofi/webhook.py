"""Endpoint do webhook Ko-fi.

- POST /api/kofi: evento Ko-fi em form-urlencoded (campo `data` com JSON)
- Demais métodos: 405

Ordem de validação:
1. Método
2. Configuração (WEBHOOK_URL válido, KOFI_TOKEN presente)
3. Campo `data` ausente -> 200 (health-check do Ko-fi)
4. JSON do payload
5. Token de verificação + sanitização (antes de qualquer log do payload)
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.connectors.kofi.webhook import (
    InvalidPayloadError,
    TokenMismatchError,
    extract_data_field,
    parse_kofi_payload,
    verify_and_sanitize,
)
from api.routes.responses import ALL_METHODS, error_response, success_response
from app.bootstrap.dependencies import create_relay_use_case
from app.domain.kofi_event import KofiEvent
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import (
    get_discord_settings,
    get_gist_settings,
    get_kofi_settings,
    is_valid_webhook_url,
)
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("", methods=ALL_METHODS, response_model=None)
async def receive_kofi_webhook(request: Request) -> JSONResponse:
    """Recebe um evento Ko-fi, notifica o Discord e atualiza o ledger."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        return await _handle_webhook(request)
    finally:
        reset_correlation_id(token)


async def _handle_webhook(request: Request) -> JSONResponse:
    if request.method != "POST":
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")

    discord_settings = get_discord_settings()
    if not is_valid_webhook_url(discord_settings.default_webhook_url):
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid Webhook URL.")

    kofi_settings = get_kofi_settings()
    if not kofi_settings.verification_token:
        return error_response(status.HTTP_400_BAD_REQUEST, "Ko-fi token required.")

    raw_body = await request.body()
    try:
        data = extract_data_field(raw_body, request.headers.get("content-type"))
        if data is None:
            return success_response(message="Hello world.")
        payload = parse_kofi_payload(data)
    except InvalidPayloadError as exc:
        logger.warning(
            "kofi_payload_invalid",
            extra={"channel": "kofi", "correlation_id": get_correlation_id(), "error": str(exc)},
        )
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid payload.")

    try:
        verify_and_sanitize(payload, kofi_settings.verification_token)
    except TokenMismatchError as exc:
        logger.warning(
            "kofi_token_mismatch",
            extra={"channel": "kofi", "correlation_id": get_correlation_id()},
        )
        return error_response(status.HTTP_403_FORBIDDEN, str(exc))

    event = KofiEvent.from_dict(payload)
    logger.info(
        "kofi_webhook_received",
        extra={
            "channel": "kofi",
            "correlation_id": get_correlation_id(),
            "message_id": event.message_id,
            "type": event.type,
        },
    )

    try:
        use_case = create_relay_use_case(
            discord_settings,
            kofi_settings,
            get_gist_settings(),
        )
        result = await use_case.execute(event)
    except ConfigurationError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    if not result.success:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            result.delivery.error_message or "Discord webhook failed",
        )

    logger.info(
        "kofi_webhook_processed",
        extra={"channel": "kofi", "message_id": event.message_id, "persisted": result.persisted},
    )
    return success_response(event_kind=str(result.kind), persisted=result.persisted)
