"""Binary indexed trees and the counting problems built on them."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _check_span(size: int, left: int, right: int) -> None:
    if not (1 <= left <= size and 1 <= right <= size):
        raise IndexError(f"range [{left}, {right}] is outside 1..{size}")
    if left > right:
        raise ValueError(f"empty range: left {left} is greater than right {right}")


class FenwickTree:
    """Point updates and prefix sums over positions 1..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, index: int, delta: int) -> None:
        """Add delta to the value at position index."""
        size = len(self)
        if not 1 <= index <= size:
            raise IndexError(f"index {index} is outside 1..{size}")
        while index <= size:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions 1..index; zero when index is 0."""
        if not 0 <= index <= len(self):
            raise IndexError(f"index {index} is outside 0..{len(self)}")
        total = 0
        while index:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions left..right inclusive."""
        _check_span(len(self), left, right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> FenwickTree:
        """Build a tree holding values at positions 1, 2, ..."""
        items = list(values)
        tree = cls(len(items))
        for position, value in enumerate(items, start=1):
            tree.add(position, value)
        return tree


class RangeUpdatePointQuery:
    """Add to a whole range of positions, read a single position."""

    def __init__(self, values: Sequence[int]) -> None:
        previous = 0
        differences = []
        for value in values:
            differences.append(value - previous)
            previous = value
        self._tree = FenwickTree.from_values(differences)

    def __len__(self) -> int:
        return len(self._tree)

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add delta to every position in left..right."""
        _check_span(len(self), left, right)
        self._tree.add(left, delta)
        if right < len(self):
            self._tree.add(right + 1, -delta)

    def value_at(self, index: int) -> int:
        """Current value at position index."""
        if not 1 <= index <= len(self):
            raise IndexError(f"index {index} is outside 1..{len(self)}")
        return self._tree.prefix_sum(index)


class RangeUpdateRangeSum:
    """Add to a whole range of positions, sum a whole range of positions."""

    def __init__(self, values: Sequence[int]) -> None:
        size = len(values)
        self._slope = FenwickTree(size)
        self._offset = FenwickTree(size)
        for position, value in enumerate(values, start=1):
            self.add_range(position, position, value)

    def __len__(self) -> int:
        return len(self._slope)

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add delta to every position in left..right."""
        _check_span(len(self), left, right)
        self._slope.add(left, delta)
        self._offset.add(left, delta * (left - 1))
        if right < len(self):
            self._slope.add(right + 1, -delta)
            self._offset.add(right + 1, -delta * right)

    def prefix_sum(self, index: int) -> int:
        """Sum of positions 1..index; zero when index is 0."""
        return self._slope.prefix_sum(index) * index - self._offset.prefix_sum(index)

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions left..right inclusive."""
        _check_span(len(self), left, right)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def _ranks(values: Sequence[int]) -> list[int]:
    order = {value: rank for rank, value in enumerate(sorted(set(values)), start=1)}
    return [order[value] for value in values]


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    ranks = _ranks(values)
    tree = FenwickTree(len(set(ranks)))
    total = 0
    for rank in reversed(ranks):
        total += tree.prefix_sum(rank - 1)
        tree.add(rank, 1)
    return total


def count_inversions_naive(values: Sequence[int]) -> int:
    """Count inversions by tallying every smaller value seen to the right."""
    seen: Counter[int] = Counter()
    total = 0
    for value in reversed(values):
        total += sum(count for other, count in seen.items() if other < value)
        seen[value] += 1
    return total


def count_inverse_triples(values: Sequence[int]) -> int:
    """Count triples i < j < k with values[i] > values[j] > values[k]."""
    ranks = _ranks(values)
    size = len(set(ranks))
    singles = FenwickTree(size)
    pairs_from: list[int] = []
    for rank in reversed(ranks):
        pairs_from.append(singles.prefix_sum(rank - 1))
        singles.add(rank, 1)
    pairs_from.reverse()

    pair_tree = FenwickTree(size)
    total = 0
    for rank, pairs in zip(reversed(ranks), reversed(pairs_from)):
        total += pair_tree.prefix_sum(rank - 1)
        pair_tree.add(rank, pairs)
    return total