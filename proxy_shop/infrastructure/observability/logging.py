"""Console and structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from proxy_shop.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure root logging.

    The interactive shell reads best with bare messages; json_output switches
    to one JSON object per line for piping into log tooling. Raises
    ValueError for an unknown level name.
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger()
    logger.setLevel(level_name)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        formatter: logging.Formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_purchase(item_name: str, method: str, price: float, success: bool, balance: float) -> None:
    """Log structured purchase outcome for analysis"""
    logging.debug(
        "Purchase completed",
        extra={
            "step": "purchase_complete",
            "item": item_name,
            "payment_method": method,
            "price": price,
            "purchase_outcome": "sold" if success else "failed",
            "balance": balance,
        },
    )
