"""Use cases Ko-fi: relay de evento e resumo."""

from .relay_event import RelayKofiEventUseCase, RelayResult
from .send_summary import SendSummaryUseCase

__all__ = ["RelayKofiEventUseCase", "RelayResult", "SendSummaryUseCase"]
