"""Renderização da notificação de evento Ko-fi (rica e legada)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.formatting import (
    COMPONENT_CONTAINER,
    COMPONENT_SEPARATOR,
    IS_COMPONENTS_V2,
    KOFI_IMG,
    header_section,
    text_display,
    tier_color,
)
from app.domain.kofi_event import EventKind
from app.protocols.models import LegacyMessage, MessagePair, RichMessage

if TYPE_CHECKING:
    from app.domain.kofi_event import KofiEvent

FOOTER_TEXT = "Thank you for supporting us!"

# Título e subtítulo por tipo de evento
EVENT_TEMPLATES: dict[EventKind, tuple[str, str]] = {
    EventKind.DONATION: (
        "New supporter on Ko-fi ☕",
        "Someone just bought us a coffee!",
    ),
    EventKind.SUBSCRIPTION_START: (
        "New subscriber on Ko-fi 🎉",
        "A new membership just started.",
    ),
    EventKind.SUBSCRIPTION_RENEWAL: (
        "Subscription renewed on Ko-fi 🔁",
        "A supporter renewed their membership.",
    ),
    EventKind.CANCELLATION: (
        "Subscription cancelled on Ko-fi ⚠️",
        "A membership was cancelled.",
    ),
    EventKind.REFUND: (
        "Refund on Ko-fi 💸",
        "A payment was refunded.",
    ),
}


def _field_pairs(event: KofiEvent) -> list[tuple[str, str, bool]]:
    """Campos (nome, valor, inline) comuns às duas representações."""
    fields = [
        ("From", event.from_name, True),
        ("Type", event.type, True),
        ("Amount", event.display_amount, True),
    ]
    if event.tier_name:
        fields.append(("Tier", event.tier_name, True))
    if event.has_message:
        fields.append(("Message", event.message, False))
    return fields


def build_rich_event(event: KofiEvent, kind: EventKind, profile_url: str) -> RichMessage:
    """Mensagem components v2 para o evento."""
    title, subtitle = EVENT_TEMPLATES[kind]
    lines = [f"**{name}:** {value}" for name, value, _ in _field_pairs(event)]
    lines.append("")
    lines.append(f"[Open Ko-fi page]({profile_url})")

    body: dict[str, Any] = {
        "flags": IS_COMPONENTS_V2,
        "components": [
            {
                "type": COMPONENT_CONTAINER,
                "accent_color": tier_color(event.tier_name),
                "components": [
                    header_section(f"## {title}", subtitle),
                    {"type": COMPONENT_SEPARATOR},
                    text_display("\n".join(lines)),
                ],
            }
        ],
    }
    return RichMessage(body=body)


def build_legacy_event(
    event: KofiEvent,
    kind: EventKind,
    profile_url: str,
    now: datetime | None = None,
) -> LegacyMessage:
    """Embed simples (título + campos) com cor pelo tier."""
    title, _ = EVENT_TEMPLATES[kind]
    embed = {
        "author": {"name": "Ko-fi", "icon_url": KOFI_IMG},
        "thumbnail": {"url": KOFI_IMG},
        "title": title,
        "url": profile_url,
        "color": tier_color(event.tier_name),
        "fields": [
            {"name": name, "value": value, "inline": inline}
            for name, value, inline in _field_pairs(event)
        ],
        "footer": {"text": FOOTER_TEXT, "icon_url": KOFI_IMG},
        "timestamp": (now or datetime.now(UTC)).isoformat(),
    }
    return LegacyMessage(body={"embeds": [embed]})


def build_event_message(
    event: KofiEvent,
    kind: EventKind,
    profile_url: str,
    now: datetime | None = None,
) -> MessagePair:
    """Gera o par rica/legada para a notificação do evento."""
    return MessagePair(
        rich=build_rich_event(event, kind, profile_url),
        legacy=build_legacy_event(event, kind, profile_url, now=now),
    )
