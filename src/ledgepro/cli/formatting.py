"""Display helpers shared by CLI commands."""

from decimal import Decimal


def format_money(amount: Decimal) -> str:
    """Format an amount with thousands separators and two decimals."""
    return f"{amount:,.2f}"


def format_balance(balance: Decimal) -> str:
    """Format a balance as its magnitude with a CR (>= 0) or DR marker."""
    marker = "CR" if balance >= 0 else "DR"
    return f"{format_money(abs(balance))} {marker}"
