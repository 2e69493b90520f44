import pytest

from mercurystreams.validation import (
    ValidationError,
    validate_between,
    validate_expires_at,
    validate_fee,
    validate_valid_from_timestamp,
)

MIN = 0
MAX = 10_000
BAD_MIN = 9_000
BAD_MAX = 10


def test_valid_from_timestamp_accepts_later_and_equal_rejects_earlier():
    assert validate_valid_from_timestamp(456, 123) is None
    assert validate_valid_from_timestamp(123, 123) is None
    with pytest.raises(ValidationError):
        validate_valid_from_timestamp(122, 123)


def test_valid_from_timestamp_fails_when_observation_before_valid_from():
    with pytest.raises(ValidationError) as excinfo:
        validate_valid_from_timestamp(111, 112)
    assert str(excinfo.value) == (
        "observationTimestamp (Value: 111) must be >= validFromTimestamp (Value: 112)"
    )


def test_expires_at_accepts_later_and_equal_rejects_earlier():
    assert validate_expires_at(123, 456) is None
    assert validate_expires_at(123, 123) is None
    with pytest.raises(ValidationError):
        validate_expires_at(124, 123)


def test_expires_at_fails_when_observation_after_expiry():
    with pytest.raises(ValidationError) as excinfo:
        validate_expires_at(112, 111)
    assert str(excinfo.value) == (
        "expiresAt (Value: 111) must be ahead of observation timestamp (Value: 112)"
    )


def test_validate_between_in_range():
    assert validate_between("test foo", 346, MIN, MAX) == 346


def test_validate_between_above_max():
    with pytest.raises(ValidationError) as excinfo:
        validate_between("test bar", 346, MIN, BAD_MAX)
    assert str(excinfo.value) == (
        "test bar (Value: 346) is outside of allowable range (Min: 0, Max: 10)"
    )


def test_validate_between_below_min():
    with pytest.raises(ValidationError) as excinfo:
        validate_between("test baz", 346, BAD_MIN, MAX)
    assert str(excinfo.value) == (
        "test baz (Value: 346) is outside of allowable range (Min: 9000, Max: 10000)"
    )


def test_validate_between_inclusive_bounds():
    assert validate_between("lo", 0, 0, 10) == 0
    assert validate_between("hi", 10, 0, 10) == 10


def test_validate_between_none():
    with pytest.raises(ValidationError) as excinfo:
        validate_between("median bid", None, MIN, MAX)
    assert str(excinfo.value) == "median bid: got nil value"


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_between("x", 11, 0, 10)


def test_validate_fee_accepts_zero():
    assert validate_fee("median link fee", 0) == 0


def test_validate_fee_rejects_negative():
    with pytest.raises(ValidationError) as excinfo:
        validate_fee("median link fee", -1)
    assert str(excinfo.value) == (
        "median link fee (Value: -1) is outside of allowable range "
        "(Min: 0, Max: 3138550867693340381917894711603833208051177722232017256447)"
    )


def test_validate_fee_rejects_above_max_int192():
    with pytest.raises(ValidationError):
        validate_fee("median native fee", 1 << 191)


def test_validate_fee_none():
    with pytest.raises(ValidationError) as excinfo:
        validate_fee("median native fee", None)
    assert str(excinfo.value) == "median native fee: got nil value"