"""Consensus functions specific to v4 feeds."""

from collections import Counter


class ConsensusError(ValueError):
    """Not enough agreeing observations to reach consensus."""


def get_consensus_market_status(paos, f):
    """Return the most common valid market status, if seen at least f+1 times.

    Ties are broken in favour of the smaller status value.
    """
    paos = list(paos)
    counts = Counter(
        status
        for status in (pao.valid_market_status() for pao in paos)
        if status is not None
    )

    most_common_status, most_common_count = 0, 0
    if counts:
        most_common_status, most_common_count = max(
            counts.items(), key=lambda item: (item[1], -item[0])
        )

    if most_common_count < f + 1:
        raise ConsensusError(
            "market status has fewer than f+1 observations "
            f"(status {most_common_status} got {most_common_count}/{len(paos)})"
        )
    return most_common_status