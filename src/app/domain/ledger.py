"""Ledger persistido de apoiadores (documento único).

Estrutura do JSON gravado no gist:

    {
      "subscriptions": {"<nome>": {...}},
      "donors": [...],
      "cancellations": [...],
      "refunds": [...],
      "tierCounts": {"<tier>": 1}
    }

Carregado inteiro no início do request, alterado uma vez pelo reducer
e gravado inteiro de volta (último a gravar vence).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _section(data: dict[str, Any], key: str, kind: type) -> Any:
    """Seção do documento; ausente ou com formato errado vira vazia."""
    value = data.get(key)
    return value if isinstance(value, kind) else kind()


def _is_count(value: Any) -> bool:
    """Contagem numérica e finita (bool não conta)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


@dataclass(slots=True)
class SubscriptionRecord:
    """Assinatura ativa de um apoiador (no máximo uma por nome)."""

    tier: str
    tier_name: str | None
    amount: str
    currency: str
    starts_at: str
    ends_at: str
    message_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "tier": self.tier,
            "tier_name": self.tier_name,
            "amount": self.amount,
            "currency": self.currency,
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "message_id": self.message_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubscriptionRecord:
        return cls(
            tier=str(data.get("tier") or "Default"),
            tier_name=data.get("tier_name"),
            amount=str(data.get("amount", "")),
            currency=str(data.get("currency", "")),
            starts_at=str(data.get("starts_at", "")),
            ends_at=str(data.get("ends_at", "")),
            message_id=str(data.get("message_id", "")),
        )

    @property
    def display_tier(self) -> str:
        return self.tier_name or self.tier


@dataclass(frozen=True, slots=True)
class DonorRecord:
    """Doação avulsa (append-only)."""

    from_name: str
    amount: str
    currency: str
    message: str
    message_id: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "from_name": self.from_name,
            "amount": self.amount,
            "currency": self.currency,
            "message": self.message,
            "message_id": self.message_id,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DonorRecord:
        return cls(
            from_name=str(data.get("from_name", "")),
            amount=str(data.get("amount", "")),
            currency=str(data.get("currency", "")),
            message=str(data.get("message") or ""),
            message_id=str(data.get("message_id", "")),
            timestamp=str(data.get("timestamp", "")),
        )


@dataclass(frozen=True, slots=True)
class CancellationRecord:
    """Assinatura removida (append-only)."""

    from_name: str
    tier: str
    message_id: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "from_name": self.from_name,
            "tier": self.tier,
            "message_id": self.message_id,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CancellationRecord:
        return cls(
            from_name=str(data.get("from_name", "")),
            tier=str(data.get("tier", "")),
            message_id=str(data.get("message_id", "")),
            timestamp=str(data.get("timestamp", "")),
        )


@dataclass(frozen=True, slots=True)
class RefundRecord:
    """Reembolso pendente (append-only)."""

    from_name: str
    amount: str
    currency: str
    message_id: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "from_name": self.from_name,
            "amount": self.amount,
            "currency": self.currency,
            "message_id": self.message_id,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RefundRecord:
        return cls(
            from_name=str(data.get("from_name", "")),
            amount=str(data.get("amount", "")),
            currency=str(data.get("currency", "")),
            message_id=str(data.get("message_id", "")),
            timestamp=str(data.get("timestamp", "")),
        )


@dataclass(slots=True)
class Ledger:
    """Agregado de estado dos apoiadores."""

    subscriptions: dict[str, SubscriptionRecord] = field(default_factory=dict)
    donors: list[DonorRecord] = field(default_factory=list)
    cancellations: list[CancellationRecord] = field(default_factory=list)
    refunds: list[RefundRecord] = field(default_factory=list)
    tier_counts: dict[str, int] = field(default_factory=dict)

    @property
    def active_tier_counts(self) -> list[tuple[str, int]]:
        """Tiers com contagem positiva, na ordem de inserção."""
        return [(tier, count) for tier, count in self.tier_counts.items() if count > 0]

    @property
    def total_active_subscriptions(self) -> int:
        return sum(count for _, count in self.active_tier_counts)

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato do documento persistido."""
        return {
            "subscriptions": {
                name: record.to_dict() for name, record in self.subscriptions.items()
            },
            "donors": [donor.to_dict() for donor in self.donors],
            "cancellations": [c.to_dict() for c in self.cancellations],
            "refunds": [r.to_dict() for r in self.refunds],
            "tierCounts": dict(self.tier_counts),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Ledger:
        """Deserializa documento persistido.

        Documentos no formato antigo (lista de payloads) ou inválidos
        resultam em ledger vazio.
        """
        if not isinstance(data, dict):
            return cls()

        subscriptions = _section(data, "subscriptions", dict)
        tier_counts = _section(data, "tierCounts", dict)
        return cls(
            subscriptions={
                str(name): SubscriptionRecord.from_dict(entry)
                for name, entry in subscriptions.items()
                if isinstance(entry, dict)
            },
            donors=[
                DonorRecord.from_dict(d)
                for d in _section(data, "donors", list)
                if isinstance(d, dict)
            ],
            cancellations=[
                CancellationRecord.from_dict(c)
                for c in _section(data, "cancellations", list)
                if isinstance(c, dict)
            ],
            refunds=[
                RefundRecord.from_dict(r)
                for r in _section(data, "refunds", list)
                if isinstance(r, dict)
            ],
            tier_counts={
                str(tier): max(0, int(count))
                for tier, count in tier_counts.items()
                if _is_count(count)
            },
        )
