"""Webhook Ko-fi: parsing, verificação de token e sanitização."""

from .receive import (
    InvalidPayloadError,
    TokenMismatchError,
    WebhookRequestError,
    extract_data_field,
    parse_kofi_payload,
)
from .verify import REDACTION_MARKER, verify_and_sanitize

__all__ = [
    "REDACTION_MARKER",
    "InvalidPayloadError",
    "TokenMismatchError",
    "WebhookRequestError",
    "extract_data_field",
    "parse_kofi_payload",
    "verify_and_sanitize",
]
