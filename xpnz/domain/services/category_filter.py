"""Transaction filtering for the category tabs."""

from collections.abc import Iterable

from xpnz.domain.constants import TOP_SPENDS_LIMIT
from xpnz.domain.models.spend import (
    Transaction,
    TransactionCategory,
    TransactionType,
)


def top_spends(
    transactions: Iterable[Transaction],
    limit: int = TOP_SPENDS_LIMIT,
) -> list[Transaction]:
    """Return the largest outgoing transactions, biggest first.

    ``sorted`` is stable, so equal amounts keep their original order.

    Args:
        transactions: Transactions to rank.
        limit: Maximum number of entries returned.

    Returns:
        list[Transaction]: At most ``limit`` outgoing transactions.
    """
    outgoing = [item for item in transactions if not item.is_incoming]
    ranked = sorted(outgoing, key=lambda item: item.amount, reverse=True)
    return ranked[:limit]


def recurring(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return subscription transactions in their original order."""
    return [
        item
        for item in transactions
        if item.transaction_type == TransactionType.SUBSCRIPTION
    ]


def filter_transactions(
    transactions: Iterable[Transaction],
    category: TransactionCategory,
) -> list[Transaction]:
    """Apply a category tab to a transaction list.

    ``BY_CATEGORY`` and ``BY_DAY`` have no grouping rule yet and pass the
    list through unchanged, like ``ALL``.

    Args:
        transactions: Source transactions; never mutated.
        category: Selected tab.

    Returns:
        list[Transaction]: Filtered view of the transactions.
    """
    if category == TransactionCategory.TOP_SPENDS:
        return top_spends(transactions)
    if category == TransactionCategory.RECURRING:
        return recurring(transactions)
    return list(transactions)


__all__ = ["filter_transactions", "top_spends", "recurring"]
