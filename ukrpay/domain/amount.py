"""Amount field formatting for the NBU payload"""

import math
from decimal import Decimal
from typing import Optional

from ukrpay.domain.models import Amount

# Number-to-text switches to exponent notation outside 1e-7 < |x| < 1e21
_MAX_PLAIN_POINT = 21
_MIN_PLAIN_POINT = -6


def has_amount(amount: Optional[Amount]) -> bool:
    """
    True when the amount should appear in the payload.

    Zero and NaN count as absent: the payer then enters the amount in the
    banking app, same as when no amount was given at all.
    """
    if amount is None:
        return False
    if isinstance(amount, Decimal):
        # Comparisons on a signalling NaN raise, so check before comparing
        if amount.is_nan():
            return False
    elif amount != amount:  # NaN
        return False
    return amount != 0


def _float_text(amount: float) -> str:
    """Shortest round-trip digits, laid out plain or in exponent form like a JS number"""
    if amount == 0:
        return "0"

    sign = "-" if amount < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(amount))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)

    # Decimal point position relative to the first digit
    point = len(digits) + exponent

    if len(digits) <= point <= _MAX_PLAIN_POINT:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= _MAX_PLAIN_POINT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_PLAIN_POINT < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"

    return sign + text


def format_amount(amount: Amount) -> str:
    """
    Render an amount in plain number-to-text form, without fixed-point padding.

    Examples:
        150 -> "150", 150.0 -> "150", 150.5 -> "150.5", 1e21 -> "1e+21",
        Decimal("150.50") -> "150.5"
    """
    if isinstance(amount, Decimal):
        if not amount.is_finite():
            return str(amount)
        return format(amount.normalize(), "f")

    if isinstance(amount, float):
        if math.isinf(amount):
            return "Infinity" if amount > 0 else "-Infinity"
        return _float_text(amount)

    return str(amount)


def amount_field(amount: Optional[Amount], currency: str) -> str:
    """Payload field 8: currency code immediately followed by the amount, or empty"""
    if not has_amount(amount):
        return ""
    return f"{currency}{format_amount(amount)}"
