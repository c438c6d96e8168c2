"""Bit helpers for non-negative integers treated as 64-bit unsigned words."""

WORD_BITS = 64


def bit_ceil(n: int) -> int:
    """Return the smallest power of two that is not less than ``n`` (1 for 0)."""
    if n < 0:
        raise ValueError(f"bit_ceil() requires a non-negative integer, got {n}")
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def count_trailing_zeros(n: int) -> int:
    """Return the number of trailing zero bits of ``n``; 64 when ``n`` is 0."""
    if n < 0:
        raise ValueError(
            f"count_trailing_zeros() requires a non-negative integer, got {n}"
        )
    if n == 0:
        return WORD_BITS
    return (n & -n).bit_length() - 1