# PURPOSE: Currency and percentage formatting for result cards.
# CONTEXT: Amounts are rounded half-up with Decimal so the same input always renders
#          the same way, whatever the platform's float formatting does.

from decimal import Decimal, ROUND_HALF_UP
import math


def _group_indian(digits: str) -> str:
    """Group an integer digit string the Indian way: 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(amount) -> str:
    """
    Format a rupee amount with no decimals, e.g. 100000 -> '₹1,00,000', -2500 -> '-₹2,500'.

    returns:
    - str – 'n/a' for NaN or non-numeric input.
    """
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "n/a"
    if math.isnan(value) or math.isinf(value):
        return "n/a"
    rounded = Decimal(str(abs(value))).quantize(Decimal("1"), ROUND_HALF_UP)
    sign = "-" if value < 0 and rounded != 0 else ""
    return f"{sign}₹{_group_indian(str(int(rounded)))}"


def format_pct(value, places: int = 0) -> str:
    """Format a percentage already expressed in percent units: 42.4 -> '42%'."""
    q = Decimal(1).scaleb(-places) if places else Decimal("1")
    d = Decimal(str(float(value))).quantize(q, ROUND_HALF_UP)
    return f"{d}%"


def format_ratio(ratio: float) -> str:
    """Format a fraction as a whole percent: 0.125 -> '13%'."""
    return format_pct(ratio * 100)
