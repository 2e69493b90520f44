# mercurystreams

Building blocks for data-stream price reports: fixed-width signed integer
encoding, validation of report values and timestamps, parsed attributed
observations, and consensus on market status.

## Installation

```
pip install mercurystreams
```

For running the tests:

```
pip install "mercurystreams[test]"
pytest
```

## Values

`mercurystreams.value` carries prices and fees as 24-byte big-endian
two's-complement integers (int192).

```python
from mercurystreams.value import (
    MAX_INT192,
    MAX_INT192_ENCODED,
    decode_value_int192,
    encode_value_int192,
)

data = encode_value_int192(-42)
assert len(data) == 24
assert decode_value_int192(data) == -42
assert decode_value_int192(MAX_INT192_ENCODED) == MAX_INT192
```

`encode_value_int192` raises `ValueError` for `None`, for anything that is
not an integer, and for integers outside the int192 range (`MIN_INT192` to
`MAX_INT192`). `decode_value_int192` raises `ValueError` unless it is given
exactly 24 bytes.

## Validation

`mercurystreams.validation` holds the checks applied to report fields. Each
raises `ValidationError` (a subclass of `ValueError`) when its value is out
of range.

- `validate_between(name, answer, minimum, maximum)` – checks
  `minimum <= answer <= maximum` and returns `answer`; a missing (`None`)
  answer is an error.
- `validate_fee(name, answer)` – the same check with bounds `0` and
  `MAX_INT192`; returns `answer`.
- `validate_valid_from_timestamp(observation_timestamp, valid_from_timestamp)`
  – the observation must not be earlier than valid-from.
- `validate_expires_at(observation_timestamp, expires_at)` – expiry must not
  be earlier than the observation.

```python
from mercurystreams.validation import ValidationError, validate_between

validate_between("benchmark price", 346, 0, 10_000)

try:
    validate_between("bid", 346, 0, 10)
except ValidationError as exc:
    print(exc)
    # bid (Value: 346) is outside of allowable range (Min: 0, Max: 10)
```

## Reports

Two report layouts are supported:

- `mercurystreams.v3` – benchmark price with bid and ask.
  `mercurystreams.v3.report.validate_prices(bid, benchmark_price, ask)`
  raises `ValidationError` unless `bid <= benchmark price <= ask`.
- `mercurystreams.v4` – benchmark price with a market status.
  `mercurystreams.v4.aggregate.get_consensus_market_status(paos, f)` returns
  the most common valid market status among the observations, preferring
  the smaller value on ties, and raises `ConsensusError` if it was seen
  fewer than `f + 1` times.

Each layout has, in its `observation` module, a frozen
`ParsedAttributedObservation` whose `valid_*` methods return a field's value
or `None` when the observer did not mark it valid (a max finalized
timestamp below `-1` is never valid), and, in its `report` module, a
`ReportFields` dataclass and `validate_report(fields, minimum, maximum)`.
`validate_report` checks every field against the given bounds and the
timestamp rules, and raises a single `ValidationError` whose message lists
each violation on its own line and whose `errors` attribute holds them
individually. The v4 version returns `fields` when every check passes; the
v3 version returns `None`.

```python
from mercurystreams.v4.report import ReportFields, validate_report

fields = ReportFields(
    valid_from_timestamp=42,
    timestamp=43,
    expires_at=44,
    benchmark_price=150,
    link_fee=50,
    native_fee=100,
    market_status=1,
)
validate_report(fields, 1, 1000)
```

## What the package does not do

It does not query data sources, serialize observations for transport,
compute consensus on prices, fees or timestamps (only on market status), or
encode finished reports. It supplies the value encoding, parsed
observations and checks that such a reporting process would use.