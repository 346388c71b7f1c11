#!/usr/bin/env python3
"""
Weighted Distributions
======================
Cumulative-frequency ("roulette wheel") sampling over arbitrary items.

Items are stored with their running cumulative weight. A draw in
``[0, total)`` selects the first item whose cumulative weight is
greater than or equal to the draw:

    dist = WeightedDistribution()
    dist.add_item("a", 10)     # cumulative 10
    dist.add_item("b", 0)      # ignored, never sampled
    dist.add_item("c", 5)      # cumulative 15

    dist.sample(0)    # -> "a"
    dist.sample(10)   # -> "a"
    dist.sample(11)   # -> "c"
    dist.sample(14)   # -> "c"
"""

from bisect import bisect_left
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar('T')


class WeightedDistribution(Generic[T]):
    """Inverse-CDF sampler over items with non-negative integer weights."""

    def __init__(self):
        self._items: List[T] = []
        self._cum_weights: List[int] = []
        self._total = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[T, int]]) -> 'WeightedDistribution[T]':
        """Build a distribution from (item, weight) pairs, in order."""
        dist = cls()
        for item, weight in pairs:
            dist.add_item(item, weight)
        return dist

    def add_item(self, item: T, weight: int) -> None:
        """Append an item. Weight 0 declares the item without storing it."""
        if weight < 0:
            raise ValueError(f"Negative weight {weight} for item {item!r}")
        if weight == 0:
            return

        self._total += weight
        self._items.append(item)
        self._cum_weights.append(self._total)

    @property
    def total(self) -> int:
        """Sum of all stored weights (0 when empty)."""
        return self._total

    def sample(self, draw: int) -> T:
        """Return the first item whose cumulative weight is >= draw."""
        if not 0 <= draw < self._total:
            raise ValueError(
                f"Draw {draw} outside distribution range [0, {self._total})"
            )
        return self._items[bisect_left(self._cum_weights, draw)]

    def draw(self, bits) -> T:
        """Sample using a bit source bounded by this distribution's total."""
        if self._total == 0:
            raise ValueError("Cannot draw from an empty distribution")
        return self.sample(bits.get_bits(self._total))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[T, int]]:
        """Iterate (item, weight) pairs of stored items."""
        previous = 0
        for item, cumulative in zip(self._items, self._cum_weights):
            yield item, cumulative - previous
            previous = cumulative

    def __repr__(self) -> str:
        return f"WeightedDistribution(items={len(self)}, total={self._total})"
