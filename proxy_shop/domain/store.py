"""Store - sells items against any payment method"""

import logging
from typing import Optional

from proxy_shop.domain.models import Payment
from proxy_shop.utils.money import format_money, is_valid_amount


class Store:
    """Runs a single purchase. Knows nothing about which payment method it was handed."""

    def sell(self, payment: Optional[Payment], item_name: str, price: float) -> bool:
        """
        Charge `price` for `item_name` through `payment`.

        Returns False without charging when the payment method is missing,
        the item name is blank or the price is not a finite positive number.
        Never raises.
        """
        if payment is None:
            logging.error("Payment method is required", extra={"step": "store_sell", "outcome": "invalid"})
            return False
        if not isinstance(item_name, str) or not item_name.strip():
            logging.error("Item name cannot be empty", extra={"step": "store_sell", "outcome": "invalid"})
            return False
        if not is_valid_amount(price):
            logging.error(
                f"Price must be a positive number, got {price!r}",
                extra={"step": "store_sell", "outcome": "invalid", "item": item_name},
            )
            return False

        logging.info(f"Buying {item_name} for {format_money(price)}", extra={"step": "store_sell", "item": item_name})

        try:
            paid = payment.pay(price)
        except Exception as e:
            logging.exception(f"Unexpected payment error: {e}", extra={"step": "store_sell", "item": item_name})
            paid = False

        if paid:
            logging.info(f"Thank you! Enjoy your {item_name}", extra={"step": "store_sell", "outcome": "sold"})
            return True

        logging.warning(f"Payment failed! Cannot buy {item_name}", extra={"step": "store_sell", "outcome": "failed"})
        return False
