"""Fixed-capacity set of small non-negative integers backed by a bitset."""

from __future__ import annotations

BITS_PER_WORD = 64


class IntSet:
    """A set of integers in ``range(size * BITS_PER_WORD)``."""

    __slots__ = ("_size", "_bits")

    def __init__(self, size):
        if size <= 0:
            raise ValueError("intset size must be positive")
        self._size = size
        self._bits = 0

    @property
    def capacity(self) -> int:
        """Number of distinct values the set can hold."""
        return self._size * BITS_PER_WORD

    def _check(self, n: int) -> None:
        if n < 0 or n >= self.capacity:
            raise IndexError(f"{n} is outside intset of capacity {self.capacity}")

    def add(self, n) -> None:
        """Add ``n`` to the set."""
        self._check(n)
        self._bits |= 1 << n

    def __contains__(self, n) -> bool:
        self._check(n)
        return bool(self._bits >> n & 1)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __repr__(self) -> str:
        members = [n for n in range(self.capacity) if self._bits >> n & 1]
        return f"IntSet(size={self._size}, members={members})"