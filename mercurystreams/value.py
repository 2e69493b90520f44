"""Fixed-width signed 192-bit integer encoding used for prices and fees."""

BYTE_WIDTH_INT192 = 24

MAX_INT192 = (1 << 191) - 1
MIN_INT192 = -(1 << 191)


def encode_value_int192(value):
    """Encode an integer as 24-byte big-endian two's complement.

    Raises ValueError if the value is missing or does not fit in an int192.
    """
    if value is None:
        raise ValueError("cannot encode nil value")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot encode non-integer value {value!r}")
    try:
        return value.to_bytes(BYTE_WIDTH_INT192, "big", signed=True)
    except OverflowError:
        raise ValueError(
            f"value {value} does not fit in a {BYTE_WIDTH_INT192}-byte signed integer"
        ) from None


def decode_value_int192(data):
    """Decode 24-byte big-endian two's complement into an integer.

    Raises ValueError if the input is not exactly 24 bytes long.
    """
    if data is None:
        raise ValueError("cannot decode nil value")
    raw = bytes(data)
    if len(raw) != BYTE_WIDTH_INT192:
        raise ValueError(
            f"expected {BYTE_WIDTH_INT192} bytes, got {len(raw)}"
        )
    return int.from_bytes(raw, "big", signed=True)


MAX_INT192_ENCODED = encode_value_int192(MAX_INT192)