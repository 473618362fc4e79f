"""Mini README: Reporting helpers that summarise ledger contents."""

from .aggregation import cumulative_sum

__all__ = ["cumulative_sum"]
