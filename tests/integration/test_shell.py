"""Integration tests driving the interactive menus with scripted input"""

from prometheus_client import REGISTRY

from proxy_shop.cli.shell import ShoppingShell
from proxy_shop.domain.models import CardState


def run_shell(session, console, scripted, answers):
    ShoppingShell(session, console=console, ask=scripted(answers)).run()
    return console.file.getvalue()


def sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_exit_immediately(session, console, scripted):
    output = run_shell(session, console, scripted, ["4"])
    assert "Welcome to the Interactive Store!" in output
    assert "Starting with $500 in your wallet" in output
    assert "Thanks for shopping! Goodbye!" in output


def test_end_of_input_exits_cleanly(session, console, scripted):
    output = run_shell(session, console, scripted, ["1"])
    assert "Goodbye" in output
    assert session.wallet.balance == 500


def test_buy_coffee_with_cash(session, console, scripted):
    output = run_shell(session, console, scripted, ["1", "1", "1", "4"])
    assert session.wallet.balance == 495
    assert "Bought Coffee." in output
    assert "STORE ITEMS" in output


def test_card_purchase_prompts_for_pin(session, console, scripted):
    """Test a locked card asks for the PIN and stays unlocked for the next purchase"""
    answers = [
        "1", "6", "2", "1234",  # Laptop by card, unlock on the way
        "1", "7", "2",          # Phone by card, no PIN needed
        "4",
    ]
    output = run_shell(session, console, scripted, answers)

    assert session.wallet.balance == 2
    assert session.card.state is CardState.UNLOCKED
    assert output.count("Credit card is locked! Please enter PIN:") == 1


def test_wrong_pin_cancels_card_purchase(session, console, scripted):
    output = run_shell(session, console, scripted, ["1", "1", "2", "0000", "4"])
    assert "Wrong PIN! Payment cancelled." in output
    assert session.wallet.balance == 500
    assert session.card.state is CardState.LOCKED


def test_failed_cash_purchase_reports_balance(session, console, scripted):
    session.wallet.debit(498)
    output = run_shell(session, console, scripted, ["1", "1", "1", "4"])
    assert "Could not buy Coffee." in output
    assert session.wallet.balance == 2


def test_cancel_returns_to_shop_menu(session, console, scripted):
    output = run_shell(session, console, scripted, ["1", "1", "3", "0", "4"])
    assert "Purchase cancelled" in output
    assert output.count("STORE ITEMS") == 2
    assert session.wallet.balance == 500


def test_invalid_choices_reprompt(session, console, scripted):
    answers = [
        "9",                 # main menu
        "1", "x", "99", "0",  # shop menu
        "1", "1", "5", "3", "0",  # payment menu
        "3", "7", "3",       # card menu
        "4",
    ]
    output = run_shell(session, console, scripted, answers)

    assert "Invalid menu choice! Please try again." in output
    assert output.count("Invalid item selection!") == 2
    assert "Invalid payment method!" in output
    assert "Invalid card management option!" in output
    assert session.wallet.balance == 500


def test_manage_card_unlock_and_lock(session, console, scripted):
    answers = ["3", "1", "1234", "2", "3", "2", "2", "4"]
    output = run_shell(session, console, scripted, answers)

    assert "Card unlocked" in output
    assert "Credit card is unlocked" in output
    assert "Card locked" in output
    assert "Credit card is locked" in output
    assert session.card.state is CardState.LOCKED


def test_manage_card_wrong_pin(session, console, scripted):
    output = run_shell(session, console, scripted, ["3", "1", "nope", "4"])
    assert "Wrong PIN! Card locked" in output
    assert session.card.is_unlocked is False


def test_balance_check(session, console, scripted):
    output = run_shell(session, console, scripted, ["2", "4"])
    assert "Current wallet balance: $500" in output


def test_purchase_metrics(session, console, scripted):
    sold_before = sample("shop_purchases_total", {"method": "cash", "outcome": "sold"})
    failed_before = sample("shop_purchases_total", {"method": "card", "outcome": "failed"})
    amount_count_before = sample("shop_purchase_amount_count")
    rejected_before = sample("card_pin_attempts_total", {"outcome": "rejected"})
    accepted_before = sample("card_pin_attempts_total", {"outcome": "accepted"})

    answers = [
        "1", "2", "1",          # Sandwich by cash
        "1", "2", "2", "0000",  # wrong PIN, no purchase recorded
        "3", "1", "1234",       # unlock from card menu
        "3", "2",               # lock again
        "1", "2", "2", "1234",  # Sandwich by card
        "4",
    ]
    run_shell(session, console, scripted, answers)

    assert sample("shop_purchases_total", {"method": "cash", "outcome": "sold"}) == sold_before + 1
    assert sample("shop_purchases_total", {"method": "card", "outcome": "failed"}) == failed_before
    assert sample("card_pin_attempts_total", {"outcome": "rejected"}) == rejected_before + 1
    assert sample("card_pin_attempts_total", {"outcome": "accepted"}) == accepted_before + 2
    assert sample("wallet_balance") == 476
    assert sample("shop_purchase_amount_count") == amount_count_before + 2
