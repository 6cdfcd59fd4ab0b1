"""Indonesian presentation helpers for outbound rental messages.

All formatting rules are explicit so output does not depend on the host
locale: thousands are grouped with ".", the decimal separator is ",", and
month names come from a fixed table.
"""
import re
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType

TRANSMISSION_LABELS = MappingProxyType({
    "manual": "Manual",
    "automatic": "Otomatis",
})

FUEL_TYPE_LABELS = MappingProxyType({
    "gasoline": "Bensin",
    "diesel": "Solar",
    "electric": "Listrik",
    "hybrid": "Hybrid",
})

MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)

COUNTRY_CODE = "62"

# Fraction digits kept when rendering currency, matching standard id-ID number formatting
_MAX_FRACTION = Decimal("0.001")


def _enum_value(value) -> str:
    return getattr(value, "value", value)


def format_transmission(transmission) -> str:
    return TRANSMISSION_LABELS[_enum_value(transmission)]


def format_fuel_type(fuel_type) -> str:
    key = _enum_value(fuel_type)
    return FUEL_TYPE_LABELS.get(key, key)


def format_indonesian_date(value: date) -> str:
    """'1 Maret 2024': day not zero-padded, Indonesian month name."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def format_rupiah(amount) -> str:
    """Format an amount as 'Rp 1.500.000,5'.

    Up to three fraction digits are kept (rounded half up) and trailing zeros
    are dropped, so whole amounts render without a decimal part.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    value = value.quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    number = f"{grouped},{fraction}" if fraction else grouped
    return f"Rp {sign}{number}"


def normalize_whatsapp_number(raw: str) -> str:
    """Reduce a phone number to digits with the Indonesian country code.

    '0812-3456-7890' -> '6281234567890', '81234567890' -> '6281234567890',
    numbers already starting with 62 are kept as they are.
    """
    digits = re.sub(r"[^0-9]", "", raw)
    if digits.startswith("0"):
        return COUNTRY_CODE + digits[1:]
    if not digits.startswith(COUNTRY_CODE):
        return COUNTRY_CODE + digits
    return digits
