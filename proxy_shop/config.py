"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from proxy_shop.domain.models import DEFAULT_CATALOG, CatalogItem


class Settings(BaseSettings):
    """Application configuration loaded from SHOP_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="SHOP_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Wallet and card
    initial_balance: float = 500
    card_pin: str = "1234"
    large_purchase_threshold: float = 100

    # Shelf, as JSON in SHOP_CATALOG: [{"name": "Coffee", "price": 5}, ...]
    catalog: List[CatalogItem] = Field(default_factory=lambda: list(DEFAULT_CATALOG))

    # Service
    service_name: str = "proxy-shop"
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
