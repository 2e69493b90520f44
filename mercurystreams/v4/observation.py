"""Parsed observations for v4 (benchmark price and market status) feeds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedAttributedObservation:
    """One oracle's observation after decoding, with a validity flag per field.

    Each ``valid_*`` method returns the field's value, or None when the
    observer did not mark that field valid.
    """

    timestamp: int = 0
    observer: int = 0

    benchmark_price: int | None = None
    prices_valid: bool = False

    max_finalized_timestamp: int = 0
    max_finalized_timestamp_valid: bool = False

    link_fee: int | None = None
    link_fee_valid: bool = False

    native_fee: int | None = None
    native_fee_valid: bool = False

    market_status: int = 0
    market_status_valid: bool = False

    def valid_benchmark_price(self):
        """Return the benchmark price if valid, else None."""
        return self.benchmark_price if self.prices_valid else None

    def valid_max_finalized_timestamp(self):
        """Return the max finalized timestamp if valid, else None.

        Values below -1 are never valid; -1 means no finalized report exists.
        """
        if self.max_finalized_timestamp < -1:
            return None
        return self.max_finalized_timestamp if self.max_finalized_timestamp_valid else None

    def valid_link_fee(self):
        """Return the link fee if valid, else None."""
        return self.link_fee if self.link_fee_valid else None

    def valid_native_fee(self):
        """Return the native fee if valid, else None."""
        return self.native_fee if self.native_fee_valid else None

    def valid_market_status(self):
        """Return the market status if valid, else None."""
        return self.market_status if self.market_status_valid else None