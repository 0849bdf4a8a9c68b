"""Pair, triple and quadruple sum problems solved with sorting, pointers and maps."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations


def closest_pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Pair of elements whose sum is nearest target, as (smaller, larger).

    Among equally near pairs the one with the largest difference wins.
    None is returned when there are fewer than two elements.
    """
    items = sorted(values)
    left, right = 0, len(items) - 1
    best: tuple[int, int] | None = None
    best_gap = 0
    while left < right:
        low, high = items[left], items[right]
        gap = abs(low + high - target)
        if best is None or gap < best_gap:
            best, best_gap = (low, high), gap
        elif gap == best_gap and abs(low - high) > abs(best[0] - best[1]):
            best = (low, high)
        if low + high < target:
            left += 1
        else:
            right -= 1
    return best


def has_triplet_family(values: Sequence[int]) -> bool:
    """Tell whether some element equals the sum of two other elements."""
    items = sorted(values)
    for i in range(len(items) - 1, -1, -1):
        left, right = 0, i - 1
        while left < right:
            pair = items[left] + items[right]
            if pair == items[i]:
                return True
            if pair > items[i]:
                right -= 1
            else:
                left += 1
    return False


def has_triplet_sum(values: Sequence[int], target: int) -> bool:
    """Tell whether three elements at distinct positions sum to target."""
    items = sorted(values)
    for i in range(len(items) - 2):
        needed = target - items[i]
        left, right = i + 1, len(items) - 1
        while left < right:
            pair = items[left] + items[right]
            if pair == needed:
                return True
            if pair < needed:
                left += 1
            else:
                right -= 1
    return False


def zero_sum_triplets(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Every ascending index triple whose elements sum to zero, in sorted order."""
    by_sum: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for i, j in combinations(range(len(values)), 2):
        by_sum[values[i] + values[j]].append((i, j))
    found: set[tuple[int, int, int]] = set()
    for i, value in enumerate(values):
        for j, k in by_sum.get(-value, ()):
            if i != j and i != k:
                a, b, c = sorted((i, j, k))
                found.add((a, b, c))
    return sorted(found)


def count_quadruplets(values: Sequence[int], target: int) -> int:
    """Count index quadruples a < b < c < d whose elements sum to target."""
    earlier_pairs: Counter[int] = Counter()
    total = 0
    for i, value in enumerate(values):
        # Pairs (i, k) to the right meet pairs (j, i') already stored with i' < i.
        for other in values[i + 1 :]:
            total += earlier_pairs.get(target - value - other, 0)
        for other in values[:i]:
            earlier_pairs[value + other] += 1
    return total


def count_less_or_equal(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """For each element of second, how many elements of first are not greater."""
    ordered = sorted(first)
    counts: dict[int, int] = {}
    i = 0
    for bound in sorted(second):
        while i < len(ordered) and ordered[i] <= bound:
            i += 1
        counts[bound] = i
    return [counts[bound] for bound in second]


def closest_pair_across(
    first: Sequence[int], second: Sequence[int], target: int
) -> tuple[int, int]:
    """Pair (a, b), a from first and b from second, whose sum is nearest target."""
    if not first or not second:
        raise ValueError("both sequences must be non-empty")
    a_items = sorted(first)
    b_items = sorted(second)
    i, j = 0, len(b_items) - 1
    best: tuple[int, int] | None = None
    best_gap = 0
    while i < len(a_items) and j >= 0:
        pair = a_items[i] + b_items[j]
        gap = abs(pair - target)
        if best is None or gap < best_gap:
            best, best_gap = (a_items[i], b_items[j]), gap
        if pair > target:
            j -= 1
        else:
            i += 1
    assert best is not None
    return best