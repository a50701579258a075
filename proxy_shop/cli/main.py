"""
Command-line entry point.

- `proxy-shop` - start the interactive store with settings from SHOP_* env vars
- `proxy-shop --balance 200 --pin 9876` - override the wallet and card
- `proxy-shop --json-logs` - emit JSON log lines instead of plain messages
- `proxy-shop --print-metrics` - dump Prometheus metrics on exit
"""

from typing import Optional

import typer
from prometheus_client import generate_latest
from rich.console import Console

from proxy_shop.cli.dependencies import build_session
from proxy_shop.cli.shell import ShoppingShell
from proxy_shop.config import settings
from proxy_shop.domain.exceptions import ShopException
from proxy_shop.infrastructure.observability.logging import setup_logging

app = typer.Typer(
    name="proxy-shop",
    help="Interactive store paying with cash or a PIN-protected credit card",
    add_completion=False,
)

# Rich console for output
console = Console()


@app.command()
def shop(
    balance: Optional[float] = typer.Option(None, "--balance", "-b", help="Starting wallet balance"),
    pin: Optional[str] = typer.Option(None, "--pin", help="Credit card PIN (at least 4 characters)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
    json_logs: Optional[bool] = typer.Option(None, "--json-logs/--plain-logs", help="Log format"),
    print_metrics: bool = typer.Option(False, "--print-metrics", help="Print Prometheus metrics on exit"),
) -> None:
    """Start the interactive store."""
    try:
        setup_logging(log_level or settings.log_level, settings.json_logs if json_logs is None else json_logs)
        session = build_session(initial_balance=balance, pin=pin)
    except (ShopException, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"Your credit card PIN is: {session.card_pin}")

    ShoppingShell(session, console=console).run()

    if print_metrics:
        typer.echo(generate_latest().decode("utf-8"))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
