"""Renderização do resumo periódico do ledger (rica e legada).

Limites:
- Rica: 15 assinaturas, 10 doações, 5 cancelamentos, todos os reembolsos.
- Legada: 10 assinaturas, 5 doações (sem cancelamentos/reembolsos).

Listas vazias são omitidas.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.formatting import (
    COMPONENT_CONTAINER,
    DEFAULT_COLOR,
    IS_COMPONENTS_V2,
    KOFI_IMG,
    format_time_until,
    header_section,
    text_display,
)
from app.protocols.models import LegacyMessage, MessagePair, RichMessage

if TYPE_CHECKING:
    from app.domain.ledger import Ledger

SUMMARY_TITLE = "📊 Ko-fi summary"

RICH_MAX_SUBSCRIPTIONS = 15
RICH_MAX_DONORS = 10
RICH_MAX_CANCELLATIONS = 5
LEGACY_MAX_SUBSCRIPTIONS = 10
LEGACY_MAX_DONORS = 5


def _tier_lines(ledger: Ledger, bullet: str) -> list[str]:
    lines = [f"**Active subscriptions:** {ledger.total_active_subscriptions}"]
    lines.extend(f"{bullet}{tier}: {count}" for tier, count in ledger.active_tier_counts)
    return lines


def build_rich_summary(ledger: Ledger, now: datetime | None = None) -> RichMessage:
    """Resumo components v2 com todas as seções."""
    current = now or datetime.now(UTC)
    lines = [f"## {SUMMARY_TITLE}", "---"]
    lines.extend(_tier_lines(ledger, "  • "))

    subscriptions = list(ledger.subscriptions.items())
    if subscriptions:
        lines.append("")
        lines.append("**By user (time remaining):**")
        for name, record in subscriptions[:RICH_MAX_SUBSCRIPTIONS]:
            remaining = format_time_until(record.ends_at, current)
            lines.append(f"  • {name} ({record.display_tier}) → {remaining}")
        if len(subscriptions) > RICH_MAX_SUBSCRIPTIONS:
            lines.append(f"  ... and {len(subscriptions) - RICH_MAX_SUBSCRIPTIONS} more")

    donors = list(reversed(ledger.donors[-RICH_MAX_DONORS:]))
    if donors:
        lines.append("")
        lines.append("**Latest donations (one-time):**")
        lines.extend(f"  • {d.from_name}: {d.amount} {d.currency}" for d in donors)

    cancellations = list(reversed(ledger.cancellations[-RICH_MAX_CANCELLATIONS:]))
    if cancellations:
        lines.append("")
        lines.append("**Recent cancellations:**")
        lines.extend(f"  • {c.from_name} ({c.tier})" for c in cancellations)

    if ledger.refunds:
        lines.append("")
        lines.append("**⚠️ Pending refunds:**")
        lines.extend(f"  • {r.from_name}: {r.amount} {r.currency}" for r in ledger.refunds)

    body: dict[str, Any] = {
        "flags": IS_COMPONENTS_V2,
        "components": [
            {
                "type": COMPONENT_CONTAINER,
                "components": [
                    header_section("Supporters summary"),
                    text_display("\n".join(lines)),
                ],
            }
        ],
    }
    return RichMessage(body=body)


def build_legacy_summary(ledger: Ledger, now: datetime | None = None) -> LegacyMessage:
    """Resumo em embed: contagens, assinaturas e últimas doações."""
    current = now or datetime.now(UTC)
    lines = _tier_lines(ledger, "• ")

    subscriptions = list(ledger.subscriptions.items())
    if subscriptions:
        lines.append("\n**By user:**")
        for name, record in subscriptions[:LEGACY_MAX_SUBSCRIPTIONS]:
            remaining = format_time_until(record.ends_at, current)
            lines.append(f"• {name} ({record.display_tier}) → {remaining}")

    donors = list(reversed(ledger.donors[-LEGACY_MAX_DONORS:]))
    if donors:
        lines.append("\n**Latest donations:**")
        lines.extend(f"• {d.from_name}: {d.amount} {d.currency}" for d in donors)

    embed = {
        "title": SUMMARY_TITLE,
        "description": "\n".join(lines) or "No data yet.",
        "color": DEFAULT_COLOR,
        "thumbnail": {"url": KOFI_IMG},
        "timestamp": current.isoformat(),
    }
    return LegacyMessage(body={"embeds": [embed]})


def build_summary_message(ledger: Ledger, now: datetime | None = None) -> MessagePair:
    """Gera o par rica/legada do resumo."""
    current = now or datetime.now(UTC)
    return MessagePair(
        rich=build_rich_summary(ledger, current),
        legacy=build_legacy_summary(ledger, current),
    )
