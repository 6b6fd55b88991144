"""Constantes e helpers de formatação das mensagens Discord."""

from __future__ import annotations

from datetime import UTC, datetime

KOFI_IMG = "https://storage.ko-fi.com/cdn/brandasset/v2/kofi_symbol.png"

# Flag de mensagem "components v2" do Discord
IS_COMPONENTS_V2 = 1 << 15

# Tipos de componente (components v2)
COMPONENT_CONTAINER = 17
COMPONENT_SECTION = 9
COMPONENT_TEXT_DISPLAY = 10
COMPONENT_THUMBNAIL = 11
COMPONENT_SEPARATOR = 14

DEFAULT_COLOR = 0x9B59B6
TIER_COLORS: dict[str, int] = {
    "Bronze": 0xCD7F32,
    "Silver": 0x797979,
    "Gold": 0xFFC530,
    "Platinum": 0x2ED5FF,
}

EXPIRED_LABEL = "Expired"
UNKNOWN_LABEL = "Unknown"

_MINUTE_MS = 60 * 1000
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS


def tier_color(tier: str | None) -> int:
    """Cor do embed pelo tier (tier desconhecido/ausente -> cor padrão)."""
    if tier is None:
        return DEFAULT_COLOR
    return TIER_COLORS.get(tier, DEFAULT_COLOR)


def parse_timestamp(value: str) -> datetime | None:
    """Parse de ISO 8601 (aceita sufixo Z). Sem fuso assume UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def format_time_until(ends_at: str, now: datetime | None = None) -> str:
    """Tempo restante até a expiração em formato curto.

    Exemplos: "1d 1h", "5h", "45min", "Expired".
    """
    end = parse_timestamp(ends_at)
    if end is None:
        return UNKNOWN_LABEL

    current = now or datetime.now(UTC)
    remaining_ms = int((end - current).total_seconds() * 1000)
    if remaining_ms <= 0:
        return EXPIRED_LABEL

    days = remaining_ms // _DAY_MS
    hours = (remaining_ms % _DAY_MS) // _HOUR_MS
    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h"
    return f"{remaining_ms // _MINUTE_MS}min"


def text_display(content: str) -> dict[str, object]:
    return {"type": COMPONENT_TEXT_DISPLAY, "content": content}


def header_section(title: str, subtitle: str | None = None) -> dict[str, object]:
    """Seção de cabeçalho com o logo do Ko-fi como thumbnail."""
    texts = [text_display(title)]
    if subtitle:
        texts.append(text_display(subtitle))
    return {
        "type": COMPONENT_SECTION,
        "components": texts,
        "accessory": {"type": COMPONENT_THUMBNAIL, "media": {"url": KOFI_IMG}},
    }
