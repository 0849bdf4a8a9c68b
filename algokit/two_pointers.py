"""Sliding-window and two-pointer problems on sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

OAK = 1
PINE = 2


def shortest_ternary_substring(text: str) -> int:
    """Length of the shortest substring holding each of '1', '2' and '3', or 0 if none."""
    if any(ch not in "123" for ch in text):
        raise ValueError("the text may only hold the characters 1, 2 and 3")
    counts: Counter[str] = Counter()
    best: int | None = None
    left = 0
    for right, ch in enumerate(text):
        counts[ch] += 1
        while counts["1"] and counts["2"] and counts["3"]:
            length = right - left + 1
            if best is None or length < best:
                best = length
            counts[text[left]] -= 1
            left += 1
    return 0 if best is None else best


def favourite_sequence(written: Sequence[int]) -> list[int]:
    """Restore the sequence that was written alternately at the left and right ends."""
    left, right = 0, len(written) - 1
    restored = []
    while left < right:
        restored.append(written[left])
        restored.append(written[right])
        left += 1
        right -= 1
    if left == right:
        restored.append(written[left])
    return restored


def prepend_append_length(text: str) -> int:
    """Shortest original binary string from which text could have been grown.

    Each growth step wraps the string in a '0' and a '1' on opposite ends.
    """
    left, right = 0, len(text) - 1
    while left < right and text[left] != text[right]:
        left += 1
        right -= 1
    return right - left + 1 if left <= right else 0


def min_erase_operations(text: str, k: int) -> int:
    """Fewest whitenings of k consecutive cells that remove every 'B' from text."""
    if k < 1:
        raise ValueError("k must be positive")
    operations = 0
    i = 0
    while i < len(text):
        if text[i] == "B":
            operations += 1
            i += k
        else:
            i += 1
    return operations


def follows_seating_rule(seats: Sequence[int]) -> bool:
    """Tell whether every passenger after the first sat next to an occupied seat."""
    if not seats:
        raise ValueError("there must be at least one passenger")
    low = high = seats[0]
    for seat in seats[1:]:
        if seat + 1 == low:
            low = seat
        elif seat - 1 == high:
            high = seat
        else:
            return False
    return True


def max_books(times: Sequence[int], budget: int) -> int:
    """Most consecutive books that can be read within the time budget."""
    if not times:
        raise ValueError("there must be at least one book")
    best = 0
    total = 0
    left = 0
    for right, minutes in enumerate(times):
        total += minutes
        while total > budget:
            total -= times[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def sereja_dima(cards: Sequence[int]) -> tuple[int, int]:
    """Scores of Sereja and Dima when each greedily takes the larger end card."""
    scores = [0, 0]
    left, right = 0, len(cards) - 1
    turn = 0
    while left <= right:
        if cards[left] > cards[right]:
            scores[turn] += cards[left]
            left += 1
        else:
            scores[turn] += cards[right]
            right -= 1
        turn = 1 - turn
    return scores[0], scores[1]


def count_three_part_splits(values: Sequence[int]) -> int:
    """Count ways to cut values into three non-empty contiguous parts of equal sum."""
    total = sum(values)
    if total % 3:
        return 0
    target = total // 3
    n = len(values)
    suffix_sums = list(accumulate(reversed(values)))[::-1]
    # hits[i]: how many j >= i start a suffix that sums to the target.
    hits = list(accumulate(reversed([int(s == target) for s in suffix_sums])))[::-1]
    ways = 0
    prefix = 0
    for i in range(n - 2):
        prefix += values[i]
        if prefix == target:
            ways += hits[i + 2]
    return ways


def min_road(
    trees: Sequence[tuple[int, int]], oaks: int, pines: int
) -> int | None:
    """Shortest road stretch holding at least oaks kind-1 and pines kind-2 trees.

    trees holds (position, kind) pairs; None is returned when no stretch suffices.
    """
    if oaks < 0 or pines < 0:
        raise ValueError("the required counts must not be negative")
    for _, kind in trees:
        if kind not in (OAK, PINE):
            raise ValueError(f"unknown tree kind {kind}")
    ordered = sorted(trees, key=lambda tree: tree[0])
    counts = {OAK: 0, PINE: 0}
    best: int | None = None
    left = 0
    for right, (position, kind) in enumerate(ordered):
        counts[kind] += 1
        while left <= right and counts[OAK] >= oaks and counts[PINE] >= pines:
            span = position - ordered[left][0]
            if best is None or span < best:
                best = span
            counts[ordered[left][1]] -= 1
            left += 1
    return best