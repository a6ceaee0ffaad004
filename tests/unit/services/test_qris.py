"""Tests for the QRIS payload builder."""

from decimal import Decimal

import pytest

from quickpos.core.services.qris import (
    build_qris_payload,
    crc16_ccitt,
    format_amount,
    tlv,
)


def _fields(payload: str) -> dict[str, str]:
    """Split a top-level TLV string into {tag: value}."""
    fields = {}
    pos = 0
    while pos < len(payload):
        tag = payload[pos : pos + 2]
        length = int(payload[pos + 2 : pos + 4])
        fields[tag] = payload[pos + 4 : pos + 4 + length]
        pos += 4 + length
    return fields


class TestTLV:
    def test_encodes_length(self):
        assert tlv("53", "360") == "5303360"

    def test_too_long(self):
        with pytest.raises(ValueError):
            tlv("59", "x" * 100)


class TestCRC:
    def test_known_check_value(self):
        """CRC-16/CCITT-FALSE check value for "123456789"."""
        assert crc16_ccitt("123456789") == "29B1"


class TestFormatAmount:
    def test_whole(self):
        assert format_amount(Decimal("50000")) == "50000"

    def test_fraction(self):
        assert format_amount(Decimal("12.6")) == "12.60"


class TestPayload:
    def test_fields(self, merchant):
        payload = build_qris_payload(Decimal("50000"), "pay_1", merchant)
        fields = _fields(payload)

        assert fields["00"] == "01"
        assert fields["01"] == "12"
        assert fields["53"] == "360"
        assert fields["54"] == "50000"
        assert fields["58"] == "ID"
        assert fields["59"] == "QuickPOS Store"
        assert fields["60"] == "Jakarta Selatan"
        assert fields["61"] == "12340"
        assert "ID.CO.QRIS.WWW" in fields["26"]
        assert fields["62"] == "0505pay_1"

    def test_checksum_covers_payload(self, merchant):
        payload = build_qris_payload(Decimal("12.60"), "pay_7", merchant)
        body, checksum = payload[:-4], payload[-4:]
        assert body.endswith("6304")
        assert checksum == crc16_ccitt(body)

    def test_deterministic(self, merchant):
        a = build_qris_payload(Decimal("10"), "pay_1", merchant)
        b = build_qris_payload(Decimal("10"), "pay_1", merchant)
        assert a == b

    def test_nonce_changes_code(self, merchant):
        a = build_qris_payload(Decimal("10"), "pay_1", merchant)
        b = build_qris_payload(Decimal("10"), "pay_2", merchant)
        assert a != b
