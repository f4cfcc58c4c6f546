# bonuscalc/core/money.py
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from bonuscalc.core.config import settings

NOT_AVAILABLE = "N/A"

# Суммы от 1e16 и выше считаем мусором (и не даём Decimal переполниться)
MAX_AMOUNT_EXPONENT = 15


def to_amount(raw) -> Decimal:
    """
    Приводит ввод к неотрицательной сумме.
    None, "", мусор, NaN/inf, отрицательные и запредельно большие -> 0.
    """
    if raw is None or isinstance(raw, bool):
        return Decimal("0")
    if isinstance(raw, str):
        raw = raw.strip().replace(",", "")
        if not raw:
            return Decimal("0")
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not value.is_finite() or value < 0:
        return Decimal("0")
    if value and value.adjusted() > MAX_AMOUNT_EXPONENT:
        return Decimal("0")
    return value


def is_blank(raw) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def format_currency(value, symbol: str | None = None) -> str:
    """$150,000 — без копеек, округление half-up. Не число -> N/A."""
    if isinstance(value, bool) or value is None:
        return NOT_AVAILABLE
    if isinstance(value, float) and not math.isfinite(value):
        return NOT_AVAILABLE
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return NOT_AVAILABLE
    if not amount.is_finite():
        return NOT_AVAILABLE

    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    rounded = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.0f}"


def format_wan(value) -> str:
    """120000 -> 12萬, 1200000 -> 120萬, 150000 -> 15萬, 125000 -> 12.5萬"""
    wan = Decimal(str(value)) / 10000
    text = format(wan.normalize(), "f")
    return f"{text}萬"
