"""Domain-specific exceptions"""


class ShopException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidBalanceError(ShopException):
    """Wallet was created with a negative or non-numeric balance"""

    pass


class WalletRequiredError(ShopException):
    """Payment method was created without a wallet to draw from"""

    pass


class InvalidPinError(ShopException):
    """Credit card PIN is missing or too short"""

    pass


class InvalidCatalogError(ShopException):
    """Catalog item has a blank name or a non-positive price"""

    pass
