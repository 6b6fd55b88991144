"""Protocolos e contratos do core da aplicação."""

from .ledger_store import LedgerStoreProtocol
from .message_sink import MessageSinkProtocol
from .models import (
    RICH_QUERY_PARAMS,
    DeliveryResult,
    LegacyMessage,
    MessagePair,
    RenderedMessage,
    RichMessage,
    SinkResponse,
)

__all__ = [
    "RICH_QUERY_PARAMS",
    "DeliveryResult",
    "LedgerStoreProtocol",
    "LegacyMessage",
    "MessagePair",
    "MessageSinkProtocol",
    "RenderedMessage",
    "RichMessage",
    "SinkResponse",
]
