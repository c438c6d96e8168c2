"""Extended Euclid and modular inverse."""


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``, ``g`` being the gcd of a and b.

    Quotients are rounded toward zero, so signs follow the inputs.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = _trunc_div(old_r, r)
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m``; ``a`` and ``m`` must be coprime."""
    _, x, _ = ext_gcd(a, m)
    if x < 0:
        x += m
    return x % m