"""Amount parsing and rendering shared by every formatter."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping

import structlog

from pricing_display.core.config import DEFAULT_CONFIG, DisplayConfig
from pricing_display.core.exceptions import UnknownCurrencyError

logger = structlog.get_logger(__name__)

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "INR": "₹",
        "JPY": "¥",
        "CNY": "¥",
        "KRW": "₩",
        "AUD": "A$",
        "CAD": "C$",
        "NZD": "NZ$",
        "SGD": "S$",
        "HKD": "HK$",
        "CHF": "CHF",
        "SEK": "kr",
        "NOK": "kr",
        "DKK": "kr",
        "PLN": "zł",
        "BRL": "R$",
        "MXN": "MX$",
        "ZAR": "R",
        "AED": "د.إ",
        "SAR": "﷼",
        "ILS": "₪",
        "TRY": "₺",
        "RUB": "₽",
        "UAH": "₴",
        "NGN": "₦",
        "IDR": "Rp",
        "MYR": "RM",
        "PHP": "₱",
        "THB": "฿",
        "VND": "₫",
        "KWD": "KD",
        "BHD": "BD",
    }
)

# ISO 4217 minor units for currencies that do not use two decimals.
CURRENCY_PRECISION: Mapping[str, int] = MappingProxyType(
    {
        "JPY": 0,
        "KRW": 0,
        "VND": 0,
        "IDR": 0,
        "KWD": 3,
        "BHD": 3,
    }
)

_ZERO = Decimal(0)


def parse_decimal(value: str | int | float | Decimal | None) -> Decimal:
    """Parse an upstream amount into a :class:`Decimal`.

    Missing, empty, unparseable and non-finite values all become ``0``.
    """
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else _ZERO
    text = str(value).strip()
    if not text:
        return _ZERO
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        logger.warning("unparseable_decimal", value=text)
        return _ZERO
    if not parsed.is_finite():
        logger.warning("non_finite_decimal", value=text)
        return _ZERO
    return parsed


def currency_symbol(code: str) -> str:
    """Return the conventional symbol for an ISO currency code.

    Raises:
        UnknownCurrencyError: If *code* has no registered symbol.
    """
    try:
        return CURRENCY_SYMBOLS[code.strip().upper()]
    except KeyError:
        raise UnknownCurrencyError(code) from None


def display_symbol(code: str | None) -> str:
    """Like :func:`currency_symbol` but falls back to the raw code."""
    if not code:
        return ""
    try:
        return currency_symbol(code)
    except UnknownCurrencyError:
        logger.debug("currency_symbol_fallback", currency=code)
        return code


def currency_precision(code: str | None, default: int = 2) -> int:
    if not code:
        return default
    return CURRENCY_PRECISION.get(code.strip().upper(), default)


def format_amount(
    value: str | int | float | Decimal | None,
    precision: int | None = None,
    *,
    config: DisplayConfig | None = None,
) -> str:
    """Render an amount for display.

    Rounds half-up to *precision* decimal places (the config default when
    omitted), trims trailing zeros and, if the config asks for it, groups
    thousands with commas. ``"2.50"`` renders as ``"2.5"`` and ``"1234.567"``
    as ``"1,234.57"``.
    """
    cfg = config or DEFAULT_CONFIG
    places = cfg.default_precision if precision is None else precision
    amount = parse_decimal(value)
    try:
        rounded = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits for the decimal context; show the value unrounded.
        rounded = amount
    if rounded.is_zero():
        rounded = abs(rounded)
    text = format(rounded, ",f" if cfg.group_thousands else "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
