"""Testes para o endpoint de resumo."""

from __future__ import annotations

import json

import pytest
from starlette.requests import Request

from api.routes.summary import endpoint as summary_router
from app.domain.ledger import Ledger
from app.infra.stores import MemoryLedgerStore
from app.protocols.ledger_store import LedgerStoreProtocol
from app.services.fallback_dispatcher import FallbackDispatcher
from app.use_cases.kofi import SendSummaryUseCase
from config.settings import DiscordSettings, GistSettings, SummarySettings
from tests.fakes.fake_sink import FakeSink
from utils.errors import LedgerStoreError

WEBHOOK_URL = "https://discord.test/api/webhooks/1/abc"
SUMMARY_URL = "https://discord.test/api/webhooks/2/summary"


def _build_request(
    *,
    method: str = "GET",
    query_string: str = "",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": "/api/summary",
        "raw_path": b"/api/summary",
        "query_string": query_string.encode("utf-8"),
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _payload(response) -> dict[str, object]:  # noqa: ANN001
    return json.loads(response.body.decode("utf-8"))


class UnreadableLedgerStore(LedgerStoreProtocol):
    async def load(self) -> Ledger:
        raise LedgerStoreError("Gist not found.", status_code=404)

    async def save(self, ledger: Ledger) -> None:
        raise AssertionError("summary never writes the ledger")


@pytest.fixture
def summary_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    env: dict[str, object] = {
        "sink": FakeSink(204),
        "store": MemoryLedgerStore(Ledger(tier_counts={"Gold": 1})),
        "sink_url": None,
    }

    def _create_summary_use_case(discord, gist):  # noqa: ANN001, ANN202
        env["sink_url"] = discord.resolved_summary_webhook_url
        return SendSummaryUseCase(
            ledger_store=env["store"],
            dispatcher=FallbackDispatcher(env["sink"]),
            sink_url=discord.resolved_summary_webhook_url,
        )

    monkeypatch.setattr(
        summary_router,
        "get_summary_settings",
        lambda: SummarySettings(summary_token="sum-token", cron_secret="cron-secret"),
    )
    monkeypatch.setattr(
        summary_router,
        "get_gist_settings",
        lambda: GistSettings(token="ghp_x", gist_id="abc123"),
    )
    monkeypatch.setattr(
        summary_router,
        "get_discord_settings",
        lambda: DiscordSettings(default_webhook_url=WEBHOOK_URL, summary_webhook_url=SUMMARY_URL),
    )
    monkeypatch.setattr(summary_router, "create_summary_use_case", _create_summary_use_case)
    return env


@pytest.mark.asyncio
async def test_other_methods_are_405(summary_env: dict[str, object]) -> None:
    response = await summary_router.send_summary(_build_request(method="DELETE"))
    assert response.status_code == 405


@pytest.mark.asyncio
async def test_missing_credentials_config_is_400(
    summary_env: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(summary_router, "get_summary_settings", lambda: SummarySettings())
    response = await summary_router.send_summary(_build_request(query_string="token=x"))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_wrong_token_is_401_without_delivery(summary_env: dict[str, object]) -> None:
    response = await summary_router.send_summary(_build_request(query_string="token=nope"))

    assert response.status_code == 401
    assert _payload(response) == {"success": False, "error": "Invalid token"}
    assert summary_env["sink"].calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "request_kwargs",
    [
        {"query_string": "token=sum-token"},
        {"headers": {"x-summary-token": "sum-token"}},
        {"headers": {"authorization": "Bearer cron-secret"}},
        {
            "method": "POST",
            "body": b'{"token": "sum-token"}',
            "headers": {"content-type": "application/json"},
        },
        {
            "method": "POST",
            "body": b"token=sum-token",
            "headers": {"content-type": "application/x-www-form-urlencoded"},
        },
    ],
)
async def test_accepted_credentials_send_summary(
    summary_env: dict[str, object], request_kwargs: dict[str, object]
) -> None:
    response = await summary_router.send_summary(_build_request(**request_kwargs))

    assert response.status_code == 200
    assert _payload(response) == {"success": True, "message": "Summary sent"}
    assert summary_env["sink_url"] == SUMMARY_URL
    assert summary_env["sink"].calls[0][0].startswith(SUMMARY_URL)


@pytest.mark.asyncio
async def test_bearer_with_summary_token_is_rejected(summary_env: dict[str, object]) -> None:
    request = _build_request(headers={"authorization": "Bearer sum-token"})
    response = await summary_router.send_summary(request)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_gist_not_configured_is_400(
    summary_env: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(summary_router, "get_gist_settings", lambda: GistSettings())
    response = await summary_router.send_summary(_build_request(query_string="token=sum-token"))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_invalid_summary_sink_is_400(
    summary_env: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(summary_router, "get_discord_settings", lambda: DiscordSettings())
    response = await summary_router.send_summary(_build_request(query_string="token=sum-token"))
    assert response.status_code == 400
    assert _payload(response)["error"] == "Invalid WEBHOOK_SUMMARY or WEBHOOK_URL"


@pytest.mark.asyncio
async def test_store_failure_is_500(summary_env: dict[str, object]) -> None:
    summary_env["store"] = UnreadableLedgerStore()
    response = await summary_router.send_summary(_build_request(query_string="token=sum-token"))

    assert response.status_code == 500
    assert _payload(response)["error"] == "Gist not found."
    assert summary_env["sink"].calls == []


@pytest.mark.asyncio
async def test_delivery_failure_is_500(summary_env: dict[str, object]) -> None:
    summary_env["sink"] = FakeSink(503, text="unavailable")
    response = await summary_router.send_summary(_build_request(query_string="token=sum-token"))

    assert response.status_code == 500
    assert _payload(response)["error"] == "Discord webhook failed: 503 unavailable"
