"""Currency helpers"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal('0.01')


def to_decimal(text):
    """Amount rounded half-up to cents, zero when it does not parse"""
    try:
        return Decimal(text).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        return Decimal('0')


def format_currency(amount):
    """'$ 12.34' for a non-zero amount, '' otherwise"""
    if not amount:
        return ''
    return f"$ {Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)}"
