"""Report fields and their validation for v4 feeds."""

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
    """The values a v4 report is built from."""

    valid_from_timestamp: int = 0
    timestamp: int = 0
    native_fee: int | None = None
    link_fee: int | None = None
    expires_at: int = 0
    benchmark_price: int | None = None
    market_status: int = 0


def _failures(checks):
    for check in checks:
        try:
            check()
        except ValidationError as exc:
            yield exc


def validate_report(fields, minimum, maximum):
    """Run every check on the report fields and return them if all pass.

    All failures are gathered; if any occur a single ValidationError is
    raised whose message lists them one per line and whose ``errors``
    attribute holds the individual errors.
    """
    f = fields
    errors = list(
        _failures(
            [
                lambda: validate_between(
                    "median benchmark price", f.benchmark_price, minimum, maximum
                ),
                lambda: validate_fee("median link fee", f.link_fee),
                lambda: validate_fee("median native fee", f.native_fee),
                lambda: validate_valid_from_timestamp(f.timestamp, f.valid_from_timestamp),
                lambda: validate_expires_at(f.timestamp, f.expires_at),
            ]
        )
    )
    if errors:
        joined = ValidationError("\n".join(str(e) for e in errors))
        joined.errors = errors
        raise joined
    return fields