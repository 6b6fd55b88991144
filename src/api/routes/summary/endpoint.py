"""Endpoint do resumo periódico (job agendado ou disparo manual).

- GET|POST /api/summary
- Auth: SUMMARY_TOKEN (query `token`, body `token` ou header
  `x-summary-token`) ou `Authorization: Bearer <CRON_SECRET>`.
"""

from __future__ import annotations

import hmac
import json
import logging
from urllib.parse import parse_qs

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.routes.responses import ALL_METHODS, error_response, success_response
from app.bootstrap.dependencies import create_summary_use_case
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import (
    get_discord_settings,
    get_gist_settings,
    get_summary_settings,
    is_valid_webhook_url,
)
from utils.errors import ConfigurationError, LedgerStoreError

logger = logging.getLogger(__name__)

router = APIRouter()

SUMMARY_TOKEN_HEADER = "x-summary-token"


def _matches(candidate: str | None, secret: str) -> bool:
    if not candidate or not secret:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))


def _token_from_body(raw_body: bytes, content_type: str | None) -> str | None:
    """Campo `token` do corpo (JSON ou form). Corpo inválido = sem token."""
    if not raw_body:
        return None
    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type == "application/json":
        try:
            body = json.loads(raw_body)
        except json.JSONDecodeError:
            return None
        token = body.get("token") if isinstance(body, dict) else None
        return token if isinstance(token, str) else None
    values = parse_qs(raw_body.decode("utf-8", errors="replace")).get("token")
    return values[0] if values else None


async def is_authorized(request: Request, summary_token: str, cron_secret: str) -> bool:
    """Aceita Bearer CRON_SECRET ou SUMMARY_TOKEN em query/body/header."""
    authorization = request.headers.get("authorization")
    if cron_secret and authorization is not None:
        scheme, _, credentials = authorization.partition(" ")
        if scheme == "Bearer" and _matches(credentials, cron_secret):
            return True

    if not summary_token:
        return False

    candidates = [
        request.query_params.get("token"),
        request.headers.get(SUMMARY_TOKEN_HEADER),
    ]
    if request.method == "POST":
        candidates.append(
            _token_from_body(await request.body(), request.headers.get("content-type"))
        )
    return any(_matches(candidate, summary_token) for candidate in candidates)


@router.api_route("", methods=ALL_METHODS, response_model=None)
async def send_summary(request: Request) -> JSONResponse:
    """Envia o resumo do ledger ao webhook de resumo."""
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        return await _handle_summary(request)
    finally:
        reset_correlation_id(token)


async def _handle_summary(request: Request) -> JSONResponse:
    if request.method not in ("GET", "POST"):
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "Method not allowed")

    summary_settings = get_summary_settings()
    config_errors = summary_settings.validate()
    if config_errors:
        return error_response(status.HTTP_400_BAD_REQUEST, config_errors[0])

    authorized = await is_authorized(
        request,
        summary_settings.summary_token,
        summary_settings.cron_secret,
    )
    if not authorized:
        logger.warning(
            "summary_unauthorized",
            extra={"component": "summary", "correlation_id": get_correlation_id()},
        )
        return error_response(status.HTTP_401_UNAUTHORIZED, "Invalid token")

    gist_settings = get_gist_settings()
    if not gist_settings.is_configured:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "GIST_TOKEN and (GIST_URL or GIST_ID) are required for summary",
        )

    discord_settings = get_discord_settings()
    if not is_valid_webhook_url(discord_settings.resolved_summary_webhook_url):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid WEBHOOK_SUMMARY or WEBHOOK_URL",
        )

    try:
        use_case = create_summary_use_case(discord_settings, gist_settings)
        result = await use_case.execute()
    except ConfigurationError as exc:
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    except LedgerStoreError as exc:
        logger.error(
            "summary_ledger_read_failed",
            extra={"component": "summary", "error": str(exc), "status_code": exc.status_code},
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    if not result.success:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            result.error_message or "Failed to send summary",
        )
    return success_response(message="Summary sent")
