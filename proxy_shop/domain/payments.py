"""Payment methods: cash goes straight to the wallet, the credit card is a PIN-gated proxy"""

import logging
from typing import Optional

from proxy_shop.domain.exceptions import InvalidPinError, WalletRequiredError
from proxy_shop.domain.models import CardState
from proxy_shop.domain.wallet import Wallet
from proxy_shop.utils.money import format_money, is_valid_amount

MIN_PIN_LENGTH = 4
LARGE_PURCHASE_THRESHOLD = 100


class CashPayment:
    """Direct, unguarded access to the wallet"""

    def __init__(self, wallet: Wallet):
        if wallet is None:
            raise WalletRequiredError("Wallet is required for cash payments")
        self.wallet = wallet

    def pay(self, amount: float) -> bool:
        logging.info(f"Paying {format_money(amount)} with cash...", extra={"step": "cash_pay"})
        return self.wallet.debit(amount)


class CreditCardPayment:
    """
    Proxy in front of the wallet.

    Starts LOCKED. A correct PIN unlocks the card and it stays unlocked across
    purchases until lock() is called or a wrong PIN is entered; any failed PIN
    attempt re-locks the card.

    pay() checks, in order:
    - amount must be a finite positive number (no state change, no debit)
    - card must be unlocked (no debit)
    - amounts above the large purchase threshold get an advisory warning
    then delegates to Wallet.debit and returns its result unchanged.
    """

    def __init__(self, wallet: Wallet, pin: str, large_purchase_threshold: float = LARGE_PURCHASE_THRESHOLD):
        if wallet is None:
            raise WalletRequiredError("Wallet is required for credit card payments")
        if not isinstance(pin, str) or len(pin) < MIN_PIN_LENGTH:
            raise InvalidPinError(f"PIN must be at least {MIN_PIN_LENGTH} characters")
        self.wallet = wallet
        self._pin = pin
        self.large_purchase_threshold = large_purchase_threshold
        self._state = CardState.LOCKED

    @property
    def state(self) -> CardState:
        return self._state

    @property
    def is_unlocked(self) -> bool:
        return self._state is CardState.UNLOCKED

    def enter_pin(self, candidate: Optional[str]) -> bool:
        """Check a PIN attempt. Empty input is just another wrong PIN."""
        if candidate == self._pin:
            self._state = CardState.UNLOCKED
            logging.info("PIN correct! Card unlocked", extra={"step": "card_pin", "outcome": "unlocked"})
            return True

        self._state = CardState.LOCKED
        logging.warning("Wrong PIN! Card locked", extra={"step": "card_pin", "outcome": "locked"})
        return False

    def lock(self) -> None:
        self._state = CardState.LOCKED
        logging.info("Card locked!", extra={"step": "card_lock"})

    def pay(self, amount: float) -> bool:
        if not is_valid_amount(amount):
            logging.warning(
                f"Payment amount must be a positive number, got {amount!r}",
                extra={"step": "card_pay", "outcome": "invalid_amount"},
            )
            return False

        logging.info(f"Paying {format_money(amount)} with credit card...", extra={"step": "card_pay"})

        if not self.is_unlocked:
            logging.warning("Card is locked! Enter PIN first", extra={"step": "card_pay", "outcome": "locked"})
            return False

        if amount > self.large_purchase_threshold:
            logging.warning(
                "Big purchase! Extra security check...",
                extra={"step": "card_pay", "outcome": "large_purchase", "amount": amount},
            )

        return self.wallet.debit(amount)
