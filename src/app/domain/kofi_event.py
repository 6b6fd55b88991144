"""Evento inbound do Ko-fi e sua classificação canônica.

O payload do Ko-fi chega como JSON dentro do campo `data` do form.
Depois da verificação do token e da sanitização, é convertido para
`KofiEvent`, que trafega pelo classificador, renderizador e reducer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class EventKind(StrEnum):
    """Tipos canônicos de evento (classificação total, padrão DONATION)."""

    DONATION = "donation"
    SUBSCRIPTION_START = "subscription_start"
    SUBSCRIPTION_RENEWAL = "subscription_renewal"
    CANCELLATION = "cancellation"
    REFUND = "refund"

    def __str__(self) -> str:
        return self.value


SUBSCRIPTION_KINDS: frozenset[EventKind] = frozenset({
    EventKind.SUBSCRIPTION_START,
    EventKind.SUBSCRIPTION_RENEWAL,
})

ALERT_KINDS: frozenset[EventKind] = frozenset({
    EventKind.CANCELLATION,
    EventKind.REFUND,
})


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_optional_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _as_flag(value: Any) -> bool:
    """Flags ausentes ou não-booleanas valem False."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return value is True


@dataclass(slots=True)
class KofiEvent:
    """Evento Ko-fi já sanitizado.

    Atributos:
        message_id: ID do evento no Ko-fi
        from_name: Nome público do apoiador
        message: Mensagem livre (pode ser vazia ou "null")
        amount: Valor como enviado pelo Ko-fi (ex: "5.00")
        currency: Código da moeda (ex: "USD")
        type: Tipo bruto (ex: "Donation", "Subscription", "Shop Order")
        tier_name: Nome do tier de assinatura (opcional)
        is_subscription_payment: Pagamento de assinatura
        is_first_subscription_payment: Primeiro pagamento da assinatura
        timestamp: Data/hora ISO do evento (opcional)
        url: Link do evento no Ko-fi (opcional)
        is_public: Apoiador marcou como público
        verification_token, email, kofi_transaction_id, shipping:
            campos sensíveis, sempre redigidos antes da construção
    """

    message_id: str = ""
    from_name: str = ""
    message: str = ""
    amount: str = ""
    currency: str = ""
    type: str = ""
    tier_name: str | None = None
    is_subscription_payment: bool = False
    is_first_subscription_payment: bool = False
    timestamp: str | None = None
    url: str | None = None
    is_public: bool = True
    verification_token: str = ""
    email: str | None = None
    kofi_transaction_id: str | None = None
    shipping: Any = None

    @property
    def has_message(self) -> bool:
        """Ko-fi envia a string "null" quando não há mensagem."""
        return bool(self.message) and self.message != "null"

    @property
    def tier_label(self) -> str:
        """Rótulo do tier: tier_name, senão type, senão "Default"."""
        return self.tier_name or self.type or "Default"

    @property
    def display_amount(self) -> str:
        return f"{self.amount} {self.currency}".strip()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KofiEvent:
        """Constrói evento a partir do payload (já sanitizado)."""
        return cls(
            message_id=_as_text(data.get("message_id")),
            from_name=_as_text(data.get("from_name")),
            message=_as_text(data.get("message")),
            amount=_as_text(data.get("amount")),
            currency=_as_text(data.get("currency")),
            type=_as_text(data.get("type")),
            tier_name=_as_optional_text(data.get("tier_name")),
            is_subscription_payment=_as_flag(data.get("is_subscription_payment")),
            is_first_subscription_payment=_as_flag(
                data.get("is_first_subscription_payment")
            ),
            timestamp=_as_optional_text(data.get("timestamp")),
            url=_as_optional_text(data.get("url")),
            is_public=data.get("is_public") is not False,
            verification_token=_as_text(data.get("verification_token")),
            email=_as_optional_text(data.get("email")),
            kofi_transaction_id=_as_optional_text(data.get("kofi_transaction_id")),
            shipping=data.get("shipping"),
        )
