"""Polynomial rolling hash modulo the Mersenne prime 2**61 - 1."""

import random
from typing import Optional, Union

from comprolib.numtheory import mod_inv

MOD = (1 << 61) - 1

_BASE = random.randrange(2, MOD - 1)


class RollingHash:
    """Hashes of every substring of a string, each computed in O(1).

    A ``str`` is hashed by code points, ``bytes`` by byte values; the base is
    chosen at random once per process unless one is given.
    """

    def __init__(self, s: Union[str, bytes], base: Optional[int] = None) -> None:
        self.base = _BASE if base is None else base % MOD
        if self.base == 0:
            raise ValueError("the base must not be a multiple of the modulus")
        self.values = list(s) if isinstance(s, bytes) else [ord(c) for c in s]
        base_inv = mod_inv(self.base, MOD)

        self.inverse_powers = [1]
        self.prefix_hashes = [0]
        power = 1
        for value in self.values:
            self.prefix_hashes.append((self.prefix_hashes[-1] + value * power) % MOD)
            self.inverse_powers.append(self.inverse_powers[-1] * base_inv % MOD)
            power = power * self.base % MOD

    def __len__(self) -> int:
        return len(self.values)

    def find(self, left: int, right: int) -> int:
        """Return the hash of the half-open range ``[left, right)``."""
        n = len(self.values)
        if not 0 <= left <= right <= n:
            raise IndexError(f"range [{left}, {right}) is out of range for length {n}")
        diff = (self.prefix_hashes[right] - self.prefix_hashes[left]) % MOD
        return diff * self.inverse_powers[left] % MOD