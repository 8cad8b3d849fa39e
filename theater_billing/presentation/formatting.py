"""Currency formatting for rendered statements."""
from __future__ import annotations

from decimal import Decimal

from theater_billing.config import SETTINGS, Settings


def to_major_units(minor_units: int, settings: Settings = SETTINGS) -> Decimal:
    return Decimal(minor_units) / Decimal(settings.minor_units_per_major)


def format_currency(value: Decimal, settings: Settings = SETTINGS) -> str:
    """Render e.g. Decimal("1730") as "R$ 1.730,00"."""
    negative = value < 0
    plain = f"{abs(value):,.2f}"
    whole, _, cents = plain.partition(".")
    whole = whole.replace(",", settings.thousands_separator)
    text = f"{settings.currency_symbol} {whole}{settings.decimal_separator}{cents}"
    return f"-{text}" if negative else text


def format_minor_units(minor_units: int, settings: Settings = SETTINGS) -> str:
    return format_currency(to_major_units(minor_units, settings), settings)
