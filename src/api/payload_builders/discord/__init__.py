"""Builders de mensagens Discord (components v2 e embeds legados)."""

from api.payload_builders.discord.event import build_event_message
from api.payload_builders.discord.formatting import format_time_until, tier_color
from api.payload_builders.discord.summary import build_summary_message

__all__ = [
    "build_event_message",
    "build_summary_message",
    "format_time_until",
    "tier_color",
]
