"""Wallet - the real resource every payment method draws from"""

import logging
import math

from proxy_shop.domain.exceptions import InvalidBalanceError
from proxy_shop.utils.money import format_money, is_valid_amount


class Wallet:
    """
    Holds the simulated money balance.

    The balance never goes negative: a debit larger than the balance is
    rejected, not clamped. Rejections are reported through the return value
    and a log line rather than raised.
    """

    def __init__(self, initial_balance: float):
        if isinstance(initial_balance, bool) or not isinstance(initial_balance, (int, float)):
            raise InvalidBalanceError(f"Wallet balance must be a number, got {initial_balance!r}")
        if not math.isfinite(initial_balance):
            raise InvalidBalanceError(f"Wallet balance must be finite, got {initial_balance!r}")
        if initial_balance < 0:
            raise InvalidBalanceError("Wallet cannot have negative money")
        self._balance = initial_balance

    @property
    def balance(self) -> float:
        return self._balance

    def debit(self, amount: float) -> bool:
        """Take money out of the wallet. Returns False and leaves the balance untouched on rejection."""
        if not is_valid_amount(amount):
            logging.warning(
                f"Amount must be a positive number, got {amount!r}",
                extra={"step": "wallet_debit", "outcome": "invalid_amount"},
            )
            return False

        if amount > self._balance:
            logging.warning(
                f"Not enough money! You have {format_money(self._balance)}, need {format_money(amount)}",
                extra={"step": "wallet_debit", "outcome": "insufficient_funds", "shortfall": amount - self._balance},
            )
            return False

        self._balance -= amount
        logging.info(
            f"Took {format_money(amount)} from wallet. Left: {format_money(self._balance)}",
            extra={"step": "wallet_debit", "outcome": "debited", "balance": self._balance},
        )
        return True
