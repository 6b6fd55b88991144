"""Testes do parse do webhook Ko-fi."""

from __future__ import annotations

import json
from urllib.parse import urlencode

import pytest

from api.connectors.kofi.webhook import (
    InvalidPayloadError,
    extract_data_field,
    parse_kofi_payload,
)

FORM = "application/x-www-form-urlencoded"


class TestExtractDataField:
    def test_form_body(self) -> None:
        raw = urlencode({"data": '{"type": "Donation"}'}).encode()
        assert extract_data_field(raw, FORM) == '{"type": "Donation"}'

    def test_form_without_data_field(self) -> None:
        assert extract_data_field(b"other=1", FORM) is None

    def test_empty_body(self) -> None:
        assert extract_data_field(b"", FORM) is None
        assert extract_data_field(b"", None) is None

    def test_json_body_with_object(self) -> None:
        raw = json.dumps({"data": {"type": "Donation"}}).encode()
        assert extract_data_field(raw, "application/json; charset=utf-8") == {"type": "Donation"}

    def test_json_body_without_data(self) -> None:
        assert extract_data_field(b"{}", "application/json") is None

    def test_invalid_json_body(self) -> None:
        with pytest.raises(InvalidPayloadError):
            extract_data_field(b"{oops", "application/json")


class TestParseKofiPayload:
    def test_string_payload(self) -> None:
        assert parse_kofi_payload('{"amount": "5.00"}') == {"amount": "5.00"}

    def test_dict_passthrough(self) -> None:
        payload = {"amount": "5.00"}
        assert parse_kofi_payload(payload) is payload

    @pytest.mark.parametrize("data", ["not json", "[1, 2]", "3", 42])
    def test_rejects_non_object(self, data: object) -> None:
        with pytest.raises(InvalidPayloadError):
            parse_kofi_payload(data)
