"""Money formatting and validation utilities"""

import math


def is_valid_amount(amount: object) -> bool:
    """True for finite, strictly positive numbers. Rejects bools, strings, NaN and infinities."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    return math.isfinite(amount) and amount > 0


def format_money(amount: float) -> str:
    """Render an amount as dollars, dropping cents for whole values"""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or not math.isfinite(amount):
        return f"${amount}"
    if float(amount).is_integer():
        return f"${int(amount)}"
    return f"${amount:.2f}"
