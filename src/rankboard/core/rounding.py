"""Mean score rounding.

Means are rounded with exact integer arithmetic instead of a float quotient,
so results stay correct for sums near the u64 ceiling:

- half_up: x.5 rounds up (2.5 -> 3, 3.5 -> 4)
- half_even: x.5 rounds to the even neighbour (2.5 -> 2, 3.5 -> 4)

Scores are unsigned, so half_up is the same as rounding half away from zero.
Once a sum passes 2**53 the result can differ from rounding an f64 quotient,
which has already lost the low bits.
"""

from __future__ import annotations

from rankboard.config import ROUNDING_POLICIES, Rounding


def round_mean(total: int, count: int, rounding: Rounding = "half_up") -> int:
    """Round total / count to the nearest integer.

    Args:
        total: Sum of scores (>= 0).
        count: Number of scores (>= 1).
        rounding: Tie-breaking policy for exact halves.

    Returns:
        Rounded mean as a non-negative integer.

    Raises:
        ValueError: If count < 1 or rounding is unknown.

    Examples:
        >>> round_mean(5, 2)
        3
        >>> round_mean(5, 2, "half_even")
        2
        >>> round_mean(7, 3)
        2
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if rounding not in ROUNDING_POLICIES:
        raise ValueError(f"Unknown rounding policy: {rounding!r}")

    quotient, remainder = divmod(total, count)
    doubled = 2 * remainder

    if doubled > count:
        return quotient + 1
    if doubled < count:
        return quotient

    # Exact half
    if rounding == "half_up" or quotient % 2 == 1:
        return quotient + 1
    return quotient
