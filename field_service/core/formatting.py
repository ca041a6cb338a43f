"""Locale-aware display helpers for dates, prices and time windows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from field_service.core.exceptions import ValidationException

DATE_FORMAT: Final = "%Y-%m-%d"
TIME_FORMAT: Final = "%H:%M:%S"

_MONTH_ABBREVIATIONS: Final[dict[str, tuple[str, ...]]] = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "id": ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"),
}


@dataclass(slots=True, frozen=True)
class CurrencyFormat:
    """How amounts in one currency are rendered."""

    symbol: str
    thousands_separator: str
    decimal_separator: str
    places: int


_CURRENCIES: Final[dict[str, CurrencyFormat]] = {
    "IDR": CurrencyFormat(symbol="Rp. ", thousands_separator=".", decimal_separator=",", places=0),
    "USD": CurrencyFormat(symbol="$", thousands_separator=",", decimal_separator=".", places=2),
}


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, rejecting anything else."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ValidationException(
            f"Invalid date '{value}', expected YYYY-MM-DD",
            details={"date": value},
        ) from exc


def format_month_label(value: date, locale: str) -> str:
    """Render ``value`` as ``"DD Mon"`` using the month names of ``locale``."""
    months = _MONTH_ABBREVIATIONS.get(locale)
    if months is None:
        raise ValueError(f"Unsupported locale: {locale}")
    return f"{value.day:02d} {months[value.month - 1]}"


def format_currency(amount: Decimal | int | float, currency: str) -> str:
    """Render ``amount`` with the symbol and separators of ``currency``."""
    fmt = _CURRENCIES.get(currency.upper())
    if fmt is None:
        raise ValueError(f"Unsupported currency: {currency}")

    quantum = Decimal(1).scaleb(-fmt.places)
    quantized = Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    whole, _, fraction = f"{abs(quantized):.{fmt.places}f}".partition(".")

    groups: list[str] = []
    while whole:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    rendered = fmt.thousands_separator.join(groups)
    if fmt.places:
        rendered = f"{rendered}{fmt.decimal_separator}{fraction}"
    return f"{sign}{fmt.symbol}{rendered}"


def format_time_window(start: time, end: time) -> str:
    return f"{start.strftime(TIME_FORMAT)} - {end.strftime(TIME_FORMAT)}"
