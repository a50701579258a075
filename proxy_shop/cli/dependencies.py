"""Wiring of the objects one shopping session works with"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from proxy_shop.config import settings
from proxy_shop.domain.models import CatalogItem
from proxy_shop.domain.payments import CashPayment, CreditCardPayment
from proxy_shop.domain.store import Store
from proxy_shop.domain.wallet import Wallet


@dataclass
class ShopSession:
    """Everything the shell needs: one wallet shared by both payment methods"""

    wallet: Wallet
    cash: CashPayment
    card: CreditCardPayment
    store: Store
    card_pin: str
    catalog: List[CatalogItem] = field(default_factory=list)


def build_session(
    initial_balance: Optional[float] = None,
    pin: Optional[str] = None,
    catalog: Optional[Sequence[CatalogItem]] = None,
    large_purchase_threshold: Optional[float] = None,
) -> ShopSession:
    """
    Provide a fresh session, falling back to settings for anything not given.

    Raises ShopException subclasses on invalid balance or PIN.
    """
    wallet = Wallet(settings.initial_balance if initial_balance is None else initial_balance)
    card_pin = settings.card_pin if pin is None else pin
    card = CreditCardPayment(
        wallet,
        card_pin,
        large_purchase_threshold=(
            settings.large_purchase_threshold if large_purchase_threshold is None else large_purchase_threshold
        ),
    )
    return ShopSession(
        wallet=wallet,
        cash=CashPayment(wallet),
        card=card,
        store=Store(),
        card_pin=card_pin,
        catalog=list(settings.catalog if catalog is None else catalog),
    )
