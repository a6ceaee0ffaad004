"""
QRIS payload builder.

Produces the EMV-style tag/length/value string shown as a QR code. The
payload is a display artifact only; nothing in the core parses it back.
"""

from dataclasses import dataclass
from decimal import Decimal

from quickpos.core.money import to_money

QRIS_GLOBAL_ID = "ID.CO.QRIS.WWW"


@dataclass(frozen=True)
class QRISMerchant:
    """Merchant data embedded in every payload."""

    merchant_id: str
    name: str
    city: str
    postal_code: str
    category_code: str = "5411"
    country: str = "ID"
    currency: str = "360"  # ISO 4217 numeric, IDR


def tlv(tag: str, value: str) -> str:
    """Encode one field as tag + two-digit length + value."""
    if len(value) > 99:
        raise ValueError(f"QRIS field {tag} too long: {len(value)}")
    return f"{tag}{len(value):02d}{value}"


def crc16_ccitt(data: str) -> str:
    """CRC-16/CCITT-FALSE as four uppercase hex digits."""
    crc = 0xFFFF
    for byte in data.encode("utf-8"):
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return f"{crc:04X}"


def format_amount(amount: Decimal) -> str:
    """Whole amounts without decimals, others with two places."""
    value = to_money(amount)
    if value == value.to_integral_value():
        return str(int(value))
    return f"{value:.2f}"


def build_qris_payload(amount: Decimal, nonce: str, merchant: QRISMerchant) -> str:
    """Dynamic QRIS payload for `amount`. Same inputs always give the same string."""
    merchant_account = (
        tlv("00", QRIS_GLOBAL_ID)
        + tlv("01", merchant.merchant_id)
        + tlv("02", nonce[:15])
    )
    merchant_info = (
        tlv("00", QRIS_GLOBAL_ID)
        + tlv("02", merchant.merchant_id)
        + tlv("03", "UMI")
    )

    payload = (
        tlv("00", "01")  # payload format indicator
        + tlv("01", "12")  # dynamic, single use
        + tlv("26", merchant_account)
        + tlv("51", merchant_info)
        + tlv("52", merchant.category_code)
        + tlv("53", merchant.currency)
        + tlv("54", format_amount(amount))
        + tlv("58", merchant.country)
        + tlv("59", merchant.name[:25])
        + tlv("60", merchant.city[:15])
        + tlv("61", merchant.postal_code[:10])
        + tlv("62", tlv("05", nonce[:25]))
        + "6304"
    )
    return payload + crc16_ccitt(payload)
