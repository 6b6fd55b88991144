"""Testes para o endpoint do webhook Ko-fi."""

from __future__ import annotations

import json
from urllib.parse import urlencode

import pytest
from starlette.requests import Request

from api.routes.kofi import webhook
from app.infra.stores import MemoryLedgerStore
from app.services.fallback_dispatcher import FallbackDispatcher
from app.services.webhook_router import WebhookSinks
from app.use_cases.kofi import RelayKofiEventUseCase
from config.settings import DiscordSettings, GistSettings, KofiSettings
from tests.fakes.fake_sink import FakeSink

WEBHOOK_URL = "https://discord.test/api/webhooks/1/abc"
FORM = "application/x-www-form-urlencoded"


def _build_request(
    *,
    method: str = "POST",
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = headers or {"content-type": FORM}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "path": "/api/kofi",
        "raw_path": b"/api/kofi",
        "query_string": b"",
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


def _form_body(payload: dict[str, object]) -> bytes:
    return urlencode({"data": json.dumps(payload)}).encode("utf-8")


def _payload(response) -> dict[str, object]:  # noqa: ANN001
    return json.loads(response.body.decode("utf-8"))


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch) -> tuple[FakeSink, MemoryLedgerStore]:
    sink = FakeSink(204)
    store = MemoryLedgerStore()

    def _create_relay_use_case(discord, kofi, gist):  # noqa: ANN001, ANN202
        return RelayKofiEventUseCase(
            dispatcher=FallbackDispatcher(sink),
            sinks=WebhookSinks.from_settings(discord),
            profile_url=kofi.profile_url,
            ledger_store=store,
        )

    monkeypatch.setattr(
        webhook, "get_discord_settings", lambda: DiscordSettings(default_webhook_url=WEBHOOK_URL)
    )
    monkeypatch.setattr(
        webhook, "get_kofi_settings", lambda: KofiSettings(verification_token="kofi-secret")
    )
    monkeypatch.setattr(webhook, "get_gist_settings", lambda: GistSettings())
    monkeypatch.setattr(webhook, "create_relay_use_case", _create_relay_use_case)
    return sink, store


@pytest.mark.asyncio
async def test_non_post_is_405(relay_env: tuple[FakeSink, MemoryLedgerStore]) -> None:
    response = await webhook.receive_kofi_webhook(_build_request(method="GET"))
    assert response.status_code == 405
    assert _payload(response) == {"success": False, "error": "Method not allowed"}


@pytest.mark.asyncio
async def test_invalid_webhook_url_is_400(
    relay_env: tuple[FakeSink, MemoryLedgerStore], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(webhook, "get_discord_settings", lambda: DiscordSettings())
    response = await webhook.receive_kofi_webhook(_build_request())
    assert response.status_code == 400
    assert _payload(response)["error"] == "Invalid Webhook URL."


@pytest.mark.asyncio
async def test_missing_kofi_token_is_400(
    relay_env: tuple[FakeSink, MemoryLedgerStore], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(webhook, "get_kofi_settings", lambda: KofiSettings())
    response = await webhook.receive_kofi_webhook(_build_request())
    assert response.status_code == 400
    assert _payload(response)["error"] == "Ko-fi token required."


@pytest.mark.asyncio
async def test_missing_data_field_is_hello_world(
    relay_env: tuple[FakeSink, MemoryLedgerStore],
) -> None:
    sink, store = relay_env
    response = await webhook.receive_kofi_webhook(_build_request(body=b"foo=bar"))

    assert response.status_code == 200
    assert _payload(response) == {"success": True, "message": "Hello world."}
    assert sink.calls == []
    assert store.save_count == 0


@pytest.mark.asyncio
async def test_invalid_json_is_400(relay_env: tuple[FakeSink, MemoryLedgerStore]) -> None:
    body = urlencode({"data": "{not json"}).encode("utf-8")
    response = await webhook.receive_kofi_webhook(_build_request(body=body))
    assert response.status_code == 400
    assert _payload(response)["error"] == "Invalid payload."


@pytest.mark.asyncio
async def test_token_mismatch_is_403_without_side_effects(
    relay_env: tuple[FakeSink, MemoryLedgerStore], kofi_payload: dict[str, object]
) -> None:
    sink, store = relay_env
    kofi_payload["verification_token"] = "wrong"

    response = await webhook.receive_kofi_webhook(_build_request(body=_form_body(kofi_payload)))

    assert response.status_code == 403
    assert _payload(response)["error"] == "Ko-fi token does not match."
    assert sink.calls == []
    assert store.save_count == 0


@pytest.mark.asyncio
async def test_valid_event_is_relayed_and_sanitized(
    relay_env: tuple[FakeSink, MemoryLedgerStore], kofi_payload: dict[str, object]
) -> None:
    sink, store = relay_env

    response = await webhook.receive_kofi_webhook(_build_request(body=_form_body(kofi_payload)))

    assert response.status_code == 200
    assert _payload(response) == {"success": True, "event_kind": "donation", "persisted": True}
    assert len(sink.calls) == 1
    sent = json.dumps(sink.calls[0][1])
    assert "alice@example.com" not in sent
    assert "kofi-secret" not in sent
    assert store.snapshot.donors[0].from_name == "Alice"


@pytest.mark.asyncio
async def test_json_body_is_accepted(
    relay_env: tuple[FakeSink, MemoryLedgerStore], kofi_payload: dict[str, object]
) -> None:
    body = json.dumps({"data": kofi_payload}).encode("utf-8")
    request = _build_request(body=body, headers={"content-type": "application/json"})

    response = await webhook.receive_kofi_webhook(request)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_delivery_failure_is_500(
    relay_env: tuple[FakeSink, MemoryLedgerStore],
    kofi_payload: dict[str, object],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    failing = FakeSink(400, 400, text="Invalid Form Body")

    def _create_relay_use_case(discord, kofi, gist):  # noqa: ANN001, ANN202
        return RelayKofiEventUseCase(
            dispatcher=FallbackDispatcher(failing),
            sinks=WebhookSinks.from_settings(discord),
            profile_url=kofi.profile_url,
        )

    monkeypatch.setattr(webhook, "create_relay_use_case", _create_relay_use_case)

    response = await webhook.receive_kofi_webhook(_build_request(body=_form_body(kofi_payload)))

    assert response.status_code == 500
    assert _payload(response) == {
        "success": False,
        "error": "Discord webhook failed: 400 Invalid Form Body",
    }
    assert len(failing.calls) == 2
