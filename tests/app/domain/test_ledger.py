"""Testes para o agregado Ledger e sua serialização."""

from __future__ import annotations

import pytest

from app.domain.kofi_event import KofiEvent
from app.domain.ledger import DonorRecord, Ledger, SubscriptionRecord


def test_from_dict_reads_persisted_document() -> None:
    document = {
        "subscriptions": {
            "Alice": {
                "tier": "Gold",
                "tier_name": "Gold",
                "amount": "5.00",
                "currency": "USD",
                "starts_at": "2026-10-01T00:00:00+00:00",
                "ends_at": "2026-10-31T00:00:00+00:00",
                "message_id": "m1",
            }
        },
        "donors": [{"from_name": "Bob", "amount": "3", "currency": "EUR", "message_id": "m2"}],
        "cancellations": [],
        "refunds": [],
        "tierCounts": {"Gold": 1, "Silver": 0},
    }

    ledger = Ledger.from_dict(document)

    assert ledger.subscriptions["Alice"].ends_at == "2026-10-31T00:00:00+00:00"
    assert ledger.donors[0].from_name == "Bob"
    assert ledger.donors[0].message == ""
    assert ledger.tier_counts == {"Gold": 1, "Silver": 0}
    assert ledger.to_dict()["tierCounts"] == {"Gold": 1, "Silver": 0}


def test_legacy_list_document_becomes_empty_ledger() -> None:
    ledger = Ledger.from_dict([{"message_id": "old"}])
    assert ledger == Ledger()


def test_negative_counts_are_clamped() -> None:
    ledger = Ledger.from_dict({"tierCounts": {"Gold": -2, "Silver": 3, "Bad": "x"}})
    assert ledger.tier_counts == {"Gold": 0, "Silver": 3}


def test_active_tier_counts_skip_zero() -> None:
    ledger = Ledger(tier_counts={"Gold": 2, "Silver": 0, "Bronze": 1})
    assert ledger.active_tier_counts == [("Gold", 2), ("Bronze", 1)]
    assert ledger.total_active_subscriptions == 3


def test_to_dict_uses_persisted_keys() -> None:
    ledger = Ledger(
        subscriptions={
            "Alice": SubscriptionRecord(
                tier="Gold",
                tier_name=None,
                amount="5.00",
                currency="USD",
                starts_at="s",
                ends_at="e",
                message_id="m1",
            )
        },
        donors=[DonorRecord("Bob", "3", "EUR", "hi", "m2", "t")],
    )
    document = ledger.to_dict()
    assert set(document) == {"subscriptions", "donors", "cancellations", "refunds", "tierCounts"}
    assert document["subscriptions"]["Alice"]["tier"] == "Gold"
    assert ledger.subscriptions["Alice"].display_tier == "Gold"


class TestKofiEvent:
    def test_flags_accept_bool_and_string(self) -> None:
        event = KofiEvent.from_dict(
            {"is_subscription_payment": "true", "is_first_subscription_payment": 1}
        )
        assert event.is_subscription_payment is True
        assert event.is_first_subscription_payment is False

    def test_null_message_is_absent(self) -> None:
        assert not KofiEvent.from_dict({"message": "null"}).has_message
        assert not KofiEvent.from_dict({"message": None}).has_message
        assert KofiEvent.from_dict({"message": "hey"}).has_message

    def test_tier_label_fallbacks(self) -> None:
        assert KofiEvent.from_dict({"tier_name": "Gold", "type": "Subscription"}).tier_label == "Gold"
        assert KofiEvent.from_dict({"type": "Subscription"}).tier_label == "Subscription"
        assert KofiEvent.from_dict({}).tier_label == "Default"

    def test_display_amount(self) -> None:
        assert KofiEvent.from_dict({"amount": "5.00", "currency": "USD"}).display_amount == "5.00 USD"


@pytest.mark.parametrize(
    "document",
    [
        {"subscriptions": ["Alice"]},
        {"tierCounts": ["Gold"]},
        {"donors": {"Bob": {}}},
        {"cancellations": "Carol", "refunds": 3},
    ],
)
def test_wrong_section_shapes_become_empty(document: dict[str, object]) -> None:
    assert Ledger.from_dict(document) == Ledger()


def test_wrong_section_keeps_the_valid_ones() -> None:
    ledger = Ledger.from_dict(
        {"subscriptions": ["Alice"], "donors": [{"from_name": "Bob"}], "tierCounts": {"Gold": 1}}
    )
    assert ledger.subscriptions == {}
    assert ledger.donors[0].from_name == "Bob"
    assert ledger.tier_counts == {"Gold": 1}


def test_non_finite_and_boolean_counts_are_dropped() -> None:
    ledger = Ledger.from_dict(
        {"tierCounts": {"Gold": float("inf"), "Silver": float("nan"), "Bronze": True, "Platinum": 2.0}}
    )
    assert ledger.tier_counts == {"Platinum": 2}
