"""Testes para classify_event."""

from __future__ import annotations

import pytest

from app.domain.kofi_event import EventKind, KofiEvent
from app.services.event_classifier import classify_event


def _event(**overrides: object) -> KofiEvent:
    data: dict[str, object] = {"type": "Donation", "from_name": "Alice"}
    data.update(overrides)
    return KofiEvent.from_dict(data)


class TestClassifyEvent:
    """Ordem de decisão: cancel, refund, start, renewal, donation."""

    @pytest.mark.parametrize("raw_type", ["Cancellation", "CANCELLED", "subscription cancel"])
    def test_cancel_wins_over_subscription_flags(self, raw_type: str) -> None:
        event = _event(
            type=raw_type,
            is_subscription_payment=True,
            is_first_subscription_payment=True,
        )
        assert classify_event(event) is EventKind.CANCELLATION

    def test_refund_type(self) -> None:
        assert classify_event(_event(type="Refund")) is EventKind.REFUND

    def test_refund_with_subscription_flags(self) -> None:
        event = _event(type="Subscription Refunded", is_subscription_payment=True)
        assert classify_event(event) is EventKind.REFUND

    def test_cancel_checked_before_refund(self) -> None:
        assert classify_event(_event(type="refund-cancel")) is EventKind.CANCELLATION

    def test_first_subscription_payment_is_start(self) -> None:
        event = _event(
            type="Subscription",
            is_subscription_payment=True,
            is_first_subscription_payment=True,
        )
        assert classify_event(event) is EventKind.SUBSCRIPTION_START

    def test_subscription_payment_without_first_flag_is_renewal(self) -> None:
        event = _event(
            type="Subscription",
            is_subscription_payment=True,
            is_first_subscription_payment=False,
        )
        assert classify_event(event) is EventKind.SUBSCRIPTION_RENEWAL

    def test_absent_first_flag_behaves_as_false(self) -> None:
        event = _event(type="Subscription", is_subscription_payment=True)
        assert classify_event(event) is EventKind.SUBSCRIPTION_RENEWAL

    def test_first_flag_alone_is_donation(self) -> None:
        event = _event(type="Donation", is_first_subscription_payment=True)
        assert classify_event(event) is EventKind.DONATION

    @pytest.mark.parametrize("raw_type", ["Donation", "Shop Order", "Commission", ""])
    def test_everything_else_is_donation(self, raw_type: str) -> None:
        assert classify_event(_event(type=raw_type)) is EventKind.DONATION

    def test_empty_payload_still_classified(self) -> None:
        assert classify_event(KofiEvent.from_dict({})) is EventKind.DONATION
