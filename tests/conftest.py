"""Pytest fixtures for testing"""

import io
import logging
from typing import Callable, Generator, Iterable

import pytest
from rich.console import Console

from proxy_shop.cli.dependencies import ShopSession, build_session
from proxy_shop.domain.models import DEFAULT_CATALOG
from proxy_shop.domain.payments import CashPayment, CreditCardPayment
from proxy_shop.domain.store import Store
from proxy_shop.domain.wallet import Wallet


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """setup_logging installs its own stream handler on the root logger; drop it after each test"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing domain messages from INFO up"""
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def wallet() -> Wallet:
    return Wallet(500)


@pytest.fixture
def cash(wallet: Wallet) -> CashPayment:
    return CashPayment(wallet)


@pytest.fixture
def card(wallet: Wallet) -> CreditCardPayment:
    return CreditCardPayment(wallet, "1234")


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def session() -> ShopSession:
    return build_session(initial_balance=500, pin="1234", catalog=DEFAULT_CATALOG, large_purchase_threshold=100)


@pytest.fixture
def console() -> Console:
    """Console writing into a buffer, no colour codes"""
    return Console(file=io.StringIO(), width=100, color_system=None)


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input function that replays answers, then hits end of input"""

    def build(answers: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(answers)

        def ask(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        return ask

    return build
