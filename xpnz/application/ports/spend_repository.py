"""Application port for spend data access."""

from typing import Protocol

from xpnz.domain.models.spend import SpendRecord, Transaction
from xpnz.domain.models.time_frame import TimeFrame


class SpendDataPort(Protocol):
    """Port exposing spend totals and transactions per time frame."""

    def fetch_spend_record(self, time_frame: TimeFrame) -> SpendRecord:
        """Return the spend total for a time frame."""

    def fetch_transactions(self, time_frame: TimeFrame) -> list[Transaction]:
        """Return the transactions backing a time frame."""


__all__ = ["SpendDataPort"]
