"""Domain models - pure Python dataclasses representing shop entities"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, runtime_checkable

from proxy_shop.domain.exceptions import InvalidCatalogError
from proxy_shop.utils.money import is_valid_amount


class CardState(str, Enum):
    """Access state of a credit card"""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


@runtime_checkable
class Payment(Protocol):
    """Anything the store can charge"""

    def pay(self, amount: float) -> bool:
        ...


@dataclass(frozen=True)
class CatalogItem:
    """Item on the store shelf"""

    name: str
    price: float

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidCatalogError("Catalog item name cannot be empty")
        if not is_valid_amount(self.price):
            raise InvalidCatalogError(f"Price of {self.name} must be a positive number, got {self.price!r}")


DEFAULT_CATALOG: List[CatalogItem] = [
    CatalogItem("Coffee", 5),
    CatalogItem("Sandwich", 12),
    CatalogItem("Headphones", 45),
    CatalogItem("T-Shirt", 25),
    CatalogItem("Book", 15),
    CatalogItem("Laptop", 299),
    CatalogItem("Phone", 199),
]
