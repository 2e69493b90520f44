"""Report fields and their validation for v3 (bid/mid/ask) feeds."""

from dataclasses import dataclass

from ..validation import (
    ValidationError,
    validate_between,
    validate_expires_at,
    validate_fee,
    validate_valid_from_timestamp,
)


@dataclass
class ReportFields:
    """The values a v3 report is built from."""

    valid_from_timestamp: int = 0
    timestamp: int = 0
    native_fee: int | None = None
    link_fee: int | None = None
    expires_at: int = 0
    benchmark_price: int | None = None
    bid: int | None = None
    ask: int | None = None


def validate_prices(bid, benchmark_price, ask):
    """Check that bid <= benchmark price <= ask."""
    if bid > benchmark_price or benchmark_price > ask:
        raise ValidationError(
            "invariant violated: expected bid<=mid<=ask, "
            f"got bid: {bid}, mid: {benchmark_price}, ask: {ask}"
        )


def _collect(checks):
    errors = []
    for check in checks:
        try:
            check()
        except ValidationError as exc:
            errors.append(exc)
    return errors


def validate_report(fields, minimum, maximum):
    """Run every check on the report fields.

    All failures are gathered; if any occur a single ValidationError is
    raised whose message lists them one per line and whose ``errors``
    attribute holds the individual errors.
    """
    f = fields
    errors = _collect(
        [
            lambda: validate_between("median benchmark price", f.benchmark_price, minimum, maximum),
            lambda: validate_between("median bid invariant", f.bid, minimum, f.benchmark_price),
            lambda: validate_between("median ask invariant", f.ask, f.benchmark_price, maximum),
            lambda: validate_between("median bid", f.bid, minimum, maximum),
            lambda: validate_between("median ask", f.ask, minimum, maximum),
            lambda: validate_fee("median link fee", f.link_fee),
            lambda: validate_fee("median native fee", f.native_fee),
            lambda: validate_valid_from_timestamp(f.timestamp, f.valid_from_timestamp),
            lambda: validate_expires_at(f.timestamp, f.expires_at),
        ]
    )
    if errors:
        joined = ValidationError("\n".join(str(e) for e in errors))
        joined.errors = errors
        raise joined