"""Prometheus metrics for purchase outcomes, PIN attempts and wallet balance"""

from prometheus_client import Counter, Gauge, Histogram

# Purchase metrics
purchase_counter = Counter(
    "shop_purchases_total",
    "Total purchase attempts",
    ["method", "outcome"],  # cash | card, sold | failed
)

purchase_amount_histogram = Histogram(
    "shop_purchase_amount",
    "Price of successful purchases",
    buckets=[5, 10, 25, 50, 100, 250, 500, 1000],
)

# Card metrics
pin_attempt_counter = Counter(
    "card_pin_attempts_total",
    "Credit card PIN attempts",
    ["outcome"],  # accepted | rejected
)

# Wallet
wallet_balance_gauge = Gauge(
    "wallet_balance",
    "Current wallet balance",
)


def record_purchase(method: str, success: bool, price: float) -> None:
    """Record purchase metrics for monitoring payment method outcomes"""
    outcome = "sold" if success else "failed"
    purchase_counter.labels(method=method, outcome=outcome).inc()
    if success:
        purchase_amount_histogram.observe(price)


def record_pin_attempt(accepted: bool) -> None:
    pin_attempt_counter.labels(outcome="accepted" if accepted else "rejected").inc()


def record_balance(balance: float) -> None:
    wallet_balance_gauge.set(balance)
