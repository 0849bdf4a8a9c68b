"""Segment trees for range sums, range maxima, range minima and bracket matching.

Positions are numbered from 1 and ranges are inclusive on both ends.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, NamedTuple, Optional, TypeVar

T = TypeVar("T")


def _check_index(size: int, index: int) -> None:
    if not 1 <= index <= size:
        raise IndexError(f"index {index} is outside 1..{size}")


def _check_span(size: int, left: int, right: int) -> None:
    if not (1 <= left <= size and 1 <= right <= size):
        raise IndexError(f"range [{left}, {right}] is outside 1..{size}")
    if left > right:
        raise ValueError(f"empty range: left {left} is greater than right {right}")


class _Tree(Generic[T]):
    """Bottom-up segment tree over an associative, order-aware combine."""

    def __init__(self, leaves: Sequence[T], combine: Callable[[T, T], T], identity: T) -> None:
        self._count = len(leaves)
        self._combine = combine
        self._identity = identity
        width = 1
        while width < self._count:
            width *= 2
        self._width = width
        self._nodes: list[T] = [identity] * (2 * width)
        self._nodes[width : width + self._count] = leaves
        for node in range(width - 1, 0, -1):
            self._nodes[node] = combine(self._nodes[2 * node], self._nodes[2 * node + 1])

    def __len__(self) -> int:
        return self._count

    def leaf(self, position: int) -> T:
        return self._nodes[self._width + position]

    def set(self, position: int, leaf: T) -> None:
        node = self._width + position
        self._nodes[node] = leaf
        node //= 2
        while node:
            self._nodes[node] = self._combine(self._nodes[2 * node], self._nodes[2 * node + 1])
            node //= 2

    def fold(self, start: int, stop: int) -> T:
        """Combine leaves start..stop-1 (zero-based, half-open) in order."""
        left_acc = self._identity
        right_acc = self._identity
        lo = start + self._width
        hi = stop + self._width
        while lo < hi:
            if lo & 1:
                left_acc = self._combine(left_acc, self._nodes[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right_acc = self._combine(self._nodes[hi], right_acc)
            lo //= 2
            hi //= 2
        return self._combine(left_acc, right_acc)


class SumSegmentTree:
    """Point additions and range sums."""

    def __init__(self, values: Sequence[int]) -> None:
        self._tree: _Tree[int] = _Tree(list(values), lambda a, b: a + b, 0)

    def __len__(self) -> int:
        return len(self._tree)

    def add(self, index: int, delta: int) -> None:
        """Add delta to the value at position index."""
        _check_index(len(self), index)
        self._tree.set(index - 1, self._tree.leaf(index - 1) + delta)

    def query(self, left: int, right: int) -> int:
        """Sum of positions left..right."""
        _check_span(len(self), left, right)
        return self._tree.fold(left - 1, right)


_Entry = Optional[tuple[int, int]]


def _larger_prefer_left(a: _Entry, b: _Entry) -> _Entry:
    if a is None:
        return b
    if b is None:
        return a
    return a if a[0] >= b[0] else b


class MaxPairSegmentTree:
    """Point assignments and the largest sum of two distinct elements of a range."""

    def __init__(self, values: Sequence[int]) -> None:
        leaves: list[_Entry] = [(value, i) for i, value in enumerate(values, start=1)]
        self._tree: _Tree[_Entry] = _Tree(leaves, _larger_prefer_left, None)

    def __len__(self) -> int:
        return len(self._tree)

    def assign(self, index: int, value: int) -> None:
        """Replace the value at position index."""
        _check_index(len(self), index)
        self._tree.set(index - 1, (value, index))

    def max_pair_sum(self, left: int, right: int) -> int:
        """Largest values[i] + values[j] with left <= i, j <= right and i != j."""
        _check_span(len(self), left, right)
        if left == right:
            raise ValueError("the range must hold at least two elements")
        best = self._tree.fold(left - 1, right)
        assert best is not None
        value, where = best
        second = _larger_prefer_left(
            self._tree.fold(left - 1, where - 1), self._tree.fold(where, right)
        )
        assert second is not None
        return value + second[0]


class _Brackets(NamedTuple):
    matched: int
    open: int
    close: int


def _join_brackets(a: _Brackets, b: _Brackets) -> _Brackets:
    # Unmatched openers on the left pair with unmatched closers on the right.
    pairs = min(a.open, b.close)
    return _Brackets(
        a.matched + b.matched + 2 * pairs,
        a.open + b.open - pairs,
        a.close + b.close - pairs,
    )


class BracketSegmentTree:
    """Longest balanced subsequence of brackets within a range of a fixed string."""

    def __init__(self, text: str) -> None:
        leaves = [
            _Brackets(0, 1, 0) if ch == "(" else _Brackets(0, 0, 1) for ch in text
        ]
        self._tree: _Tree[_Brackets] = _Tree(leaves, _join_brackets, _Brackets(0, 0, 0))

    def __len__(self) -> int:
        return len(self._tree)

    def longest_balanced(self, left: int, right: int) -> int:
        """Length of the longest balanced bracket subsequence of text[left..right]."""
        _check_span(len(self), left, right)
        return self._tree.fold(left - 1, right).matched


def _smaller_prefer_left(a: _Entry, b: _Entry) -> _Entry:
    if a is None:
        return b
    if b is None:
        return a
    return a if a <= b else b


class MinIndexSegmentTree:
    """Point assignments and the position of a range's smallest value."""

    def __init__(self, values: Sequence[int]) -> None:
        leaves: list[_Entry] = [(value, i) for i, value in enumerate(values, start=1)]
        self._tree: _Tree[_Entry] = _Tree(leaves, _smaller_prefer_left, None)

    def __len__(self) -> int:
        return len(self._tree)

    def assign(self, index: int, value: int) -> None:
        """Replace the value at position index."""
        _check_index(len(self), index)
        self._tree.set(index - 1, (value, index))

    def query(self, left: int, right: int) -> int:
        """Smallest position holding the minimum of positions left..right."""
        _check_span(len(self), left, right)
        best = self._tree.fold(left - 1, right)
        assert best is not None
        return best[1]