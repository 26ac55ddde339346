"""Currency and amount formatting for display."""

from decimal import Decimal

from xpnz.domain.models.currency import Currency
from xpnz.utils.decimal_utils import coerce_decimal


def format_amount(amount: Decimal | float | int) -> str:
    """Format an amount with two decimals and thousands separators.

    Args:
        amount: Value to format.

    Returns:
        str: Formatted number without currency symbol, e.g. ``"7,354.80"``.
    """
    return f"{coerce_decimal(amount):,.2f}"


def format_currency(
    amount: Decimal | float | int,
    currency: Currency = Currency.USD,
) -> str:
    """Format an amount with a leading currency symbol.

    The symbol is prepended to the formatted number as-is, so negative
    amounts render as ``"$-5.00"``.

    Args:
        amount: Value to format.
        currency: Display currency supplying the symbol.

    Returns:
        str: Formatted amount, e.g. ``"$1,234.50"``.
    """
    return f"{currency.symbol}{format_amount(amount)}"


def format_transaction_amount(
    amount: Decimal | float | int,
    currency: Currency = Currency.USD,
) -> str:
    """Format a transaction amount as whole units without sign."""
    value = abs(coerce_decimal(amount))
    return f"{currency.symbol}{value:.0f}"


__all__ = ["format_amount", "format_currency", "format_transaction_amount"]
