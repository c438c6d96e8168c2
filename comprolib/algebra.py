"""Monoids and abelian groups built from plain callables."""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """A binary operation together with a factory for its identity element."""

    operation: Callable[[T, T], T]
    identity: Callable[[], T]

    def op(self, a: T, b: T) -> T:
        """Combine two elements."""
        return self.operation(a, b)

    def e(self) -> T:
        """Return the identity element."""
        return self.identity()


@dataclass(frozen=True)
class AbelianGroup(Generic[T]):
    """A commutative monoid in which every element has an inverse."""

    operation: Callable[[T, T], T]
    identity: Callable[[], T]
    inverse: Callable[[T], T]

    def op(self, a: T, b: T) -> T:
        """Combine two elements."""
        return self.operation(a, b)

    def e(self) -> T:
        """Return the identity element."""
        return self.identity()

    def inv(self, a: T) -> T:
        """Return the inverse of ``a``."""
        return self.inverse(a)