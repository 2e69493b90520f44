"""Range and timestamp checks applied to report fields."""

from .value import MAX_INT192

# Hardcoded for EVM chains.
EVM_HASH_LEN = 32


class ValidationError(ValueError):
    """A report field failed validation."""


def validate_between(name, answer, minimum, maximum):
    """Check that minimum <= answer <= maximum and return the answer."""
    if answer is None:
        raise ValidationError(f"{name}: got nil value")
    if not (minimum <= answer <= maximum):
        raise ValidationError(
            f"{name} (Value: {answer}) is outside of allowable range "
            f"(Min: {minimum}, Max: {maximum})"
        )
    return answer


def validate_valid_from_timestamp(observation_timestamp, valid_from_timestamp):
    """Check that the observation timestamp is not before valid-from."""
    if observation_timestamp < valid_from_timestamp:
        raise ValidationError(
            f"observationTimestamp (Value: {observation_timestamp}) must be >= "
            f"validFromTimestamp (Value: {valid_from_timestamp})"
        )


def validate_expires_at(observation_timestamp, expires_at):
    """Check that expiry is not before the observation timestamp."""
    if observation_timestamp > expires_at:
        raise ValidationError(
            f"expiresAt (Value: {expires_at}) must be ahead of observation "
            f"timestamp (Value: {observation_timestamp})"
        )


def validate_fee(name, answer):
    """Check that a fee lies between 0 and the largest int192."""
    return validate_between(name, answer, 0, MAX_INT192)