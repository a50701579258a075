"""Interactive shopping menus"""

from typing import Callable, Optional

from rich.console import Console
from rich.table import Table

from proxy_shop.cli.dependencies import ShopSession
from proxy_shop.domain.models import CatalogItem, Payment
from proxy_shop.infrastructure.observability.logging import log_purchase
from proxy_shop.infrastructure.observability.metrics import record_balance, record_pin_attempt, record_purchase
from proxy_shop.utils.money import format_money


class ShoppingShell:
    """
    Menu loop over one ShopSession.

    Menus:
    - main: shop, check balance, manage card, exit
    - shop: pick a catalog item (0 goes back)
    - payment: cash, credit card, cancel (back to the shop menu)
    - card: unlock with PIN, lock, back

    After any purchase attempt the shell returns to the main menu.
    """

    def __init__(
        self,
        session: ShopSession,
        console: Optional[Console] = None,
        ask: Optional[Callable[[str], str]] = None,
    ):
        self.session = session
        self.console = console or Console()
        self._ask = ask or self.console.input

    def run(self) -> None:
        """Run until the user exits or input runs out"""
        self.console.print("[bold]Welcome to the Interactive Store![/bold]")
        self.console.print(f"Starting with {format_money(self.session.wallet.balance)} in your wallet")
        record_balance(self.session.wallet.balance)

        try:
            while self._main_menu():
                pass
        except (EOFError, KeyboardInterrupt):
            self.console.print()

        self.console.print("Thanks for shopping! Goodbye!")

    def ask(self, prompt: str) -> str:
        return self._ask(prompt).strip()

    def _main_menu(self) -> bool:
        """Show the main menu once. Returns False when the user chose to exit."""
        self.console.rule("MAIN MENU")
        self.console.print("1. Shop for items")
        self.console.print("2. Check wallet balance")
        self.console.print("3. Manage credit card")
        self.console.print("4. Exit")

        choice = self.ask("Choose an option (1-4): ")
        if choice == "1":
            self._shop()
        elif choice == "2":
            self._show_balance()
        elif choice == "3":
            self._manage_card()
        elif choice == "4":
            return False
        else:
            self._invalid("Invalid menu choice")
        return True

    def _shop(self) -> None:
        catalog = self.session.catalog
        while True:
            table = Table(title="STORE ITEMS")
            table.add_column("#", justify="right")
            table.add_column("Item")
            table.add_column("Price", justify="right")
            for index, item in enumerate(catalog, start=1):
                table.add_row(str(index), item.name, format_money(item.price))
            self.console.print(table)
            self.console.print("0. Back to main menu")

            choice = self.ask(f"Choose an item (0-{len(catalog)}): ")
            if choice == "0":
                return
            if not choice.isdigit() or not 1 <= int(choice) <= len(catalog):
                self._invalid("Invalid item selection")
                continue

            if self._choose_payment(catalog[int(choice) - 1]):
                return

    def _choose_payment(self, item: CatalogItem) -> bool:
        """Returns False if the purchase was cancelled."""
        while True:
            self.console.print(f"\nYou selected: {item.name} ({format_money(item.price)})")
            self.console.print("How would you like to pay?")
            self.console.print("1. Cash (direct access)")
            self.console.print("2. Credit Card (proxy with security)")
            self.console.print("3. Cancel purchase")

            choice = self.ask("Choose payment method (1-3): ")
            if choice == "1":
                self.console.print("Paying with CASH (direct access to wallet)...")
                self._checkout(item, "cash", self.session.cash)
                return True
            if choice == "2":
                self._pay_with_card(item)
                return True
            if choice == "3":
                self.console.print("Purchase cancelled")
                return False
            self._invalid("Invalid payment method")

    def _pay_with_card(self, item: CatalogItem) -> None:
        card = self.session.card
        self.console.print("Paying with CREDIT CARD (proxy with security)...")

        if not card.is_unlocked:
            self.console.print("Credit card is locked! Please enter PIN:")
            if not self._enter_pin():
                self.console.print("[red]Wrong PIN! Payment cancelled.[/red]")
                return

        self._checkout(item, "card", card)

    def _checkout(self, item: CatalogItem, method: str, payment: Payment) -> None:
        success = self.session.store.sell(payment, item.name, item.price)
        balance = self.session.wallet.balance

        record_purchase(method, success, item.price)
        record_balance(balance)
        log_purchase(item.name, method, item.price, success, balance)

        if success:
            self.console.print(f"[green]Bought {item.name}.[/green] Balance: {format_money(balance)}")
        else:
            self.console.print(f"[red]Could not buy {item.name}.[/red] Balance: {format_money(balance)}")

    def _show_balance(self) -> None:
        state = "unlocked" if self.session.card.is_unlocked else "locked"
        self.console.print(f"\nCurrent wallet balance: {format_money(self.session.wallet.balance)}")
        self.console.print(f"Credit card is {state}")

    def _manage_card(self) -> None:
        while True:
            self.console.rule("CREDIT CARD MANAGEMENT")
            self.console.print("1. Unlock card (enter PIN)")
            self.console.print("2. Lock card")
            self.console.print("3. Back to main menu")

            choice = self.ask("Choose an option (1-3): ")
            if choice == "1":
                if self._enter_pin():
                    self.console.print("[green]Card unlocked[/green]")
                else:
                    self.console.print("[red]Wrong PIN! Card locked[/red]")
                return
            if choice == "2":
                self.session.card.lock()
                self.console.print("Card locked")
                return
            if choice == "3":
                return
            self._invalid("Invalid card management option")

    def _enter_pin(self) -> bool:
        accepted = self.session.card.enter_pin(self.ask("Enter PIN: "))
        record_pin_attempt(accepted)
        return accepted

    def _invalid(self, message: str) -> None:
        self.console.print(f"[red]{message}![/red] Please try again.")
