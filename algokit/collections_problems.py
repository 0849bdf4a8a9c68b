"""Problems solved with sets, maps, heaps and stacks."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def _same_length(*sequences: Sequence) -> None:
    if len({len(s) for s in sequences}) > 1:
        raise ValueError("the sequences must have the same length")


def seating_inconvenience(sights: Sequence[int]) -> int:
    """Total inconvenience of seating people in order on a single row.

    Every earlier person with a smaller sight level is passed by a later one.
    """
    total = 0
    for i, sight in enumerate(sights):
        total += sum(1 for earlier in sights[:i] if earlier < sight)
    return total


def subtraction_possible(values: Iterable[int], k: int) -> bool:
    """Tell whether some two elements (possibly the same one) differ by exactly k."""
    items = list(values)
    present = set(items)
    return any(value - k in present for value in items)


def letter_string_pairs(strings: Iterable[str]) -> int:
    """Count pairs of two-letter strings that differ in exactly one position."""
    first: Counter[str] = Counter()
    second: Counter[str] = Counter()
    whole: Counter[str] = Counter()
    pairs = 0
    for s in strings:
        if len(s) != 2:
            raise ValueError(f"{s!r} is not a two-letter string")
        # Identical strings match both counters and must be taken out twice.
        pairs += first[s[0]] + second[s[1]] - 2 * whole[s]
        first[s[0]] += 1
        second[s[1]] += 1
        whole[s] += 1
    return pairs


def max_candies_eaten(weights: Sequence[int]) -> int:
    """Most candies Alice (from the left) and Bob (from the right) eat with equal totals."""
    i, j = 0, len(weights) - 1
    alice_weight = bob_weight = 0
    alice_count = bob_count = 0
    best = 0
    while i <= j:
        if alice_weight < bob_weight:
            alice_weight += weights[i]
            alice_count += 1
            i += 1
        elif alice_weight > bob_weight:
            bob_weight += weights[j]
            bob_count += 1
            j -= 1
        if alice_weight == bob_weight:
            best = alice_count + bob_count
            if i < len(weights):
                alice_weight += weights[i]
            alice_count += 1
            i += 1
    return best


def longest_strike(values: Iterable[int], k: int) -> tuple[int, int] | None:
    """Longest run l..r of consecutive numbers each occurring at least k times."""
    counts = Counter(values)
    frequent = sorted(value for value, count in counts.items() if count >= k)
    if not frequent:
        return None
    best_length, best = 1, (frequent[0], frequent[0])
    run = 1
    for previous, current in zip(frequent, frequent[1:]):
        if current == previous + 1:
            run += 1
            if run > best_length:
                best_length, best = run, (current - run + 1, current)
        else:
            run = 1
    return best


def task_durations(starts: Sequence[int], finishes: Sequence[int]) -> list[int]:
    """Restore how long each task ran, given when tasks arrived and finished."""
    _same_length(starts, finishes)
    if not starts:
        return []
    tasks = sorted(zip(starts, finishes))
    first_start, current = tasks[0]
    durations = [current - first_start]
    for start, finish in tasks[1:]:
        if start > current:
            durations.append(finish - start)
            current = finish
        elif finish > current:
            durations.append(finish - current)
            current = finish
    return durations


def train_queries(
    stations: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """For each (a, b), tell whether the train can go from station a to station b."""
    first_seen: dict[int, int] = {}
    last_seen: dict[int, int] = {}
    for position, station in enumerate(stations):
        first_seen.setdefault(station, position)
        last_seen[station] = position
    return [
        a in first_seen and b in last_seen and first_seen[a] <= last_seen[b]
        for a, b in queries
    ]


def can_equate_multisets(first: Sequence[int], second: Sequence[int]) -> bool:
    """Tell whether doubling or halving elements of second can make it equal to first."""
    _same_length(first, second)
    if any(x <= 0 for x in first) or any(x <= 0 for x in second):
        raise ValueError("values must be positive")
    heap_a = [-x for x in first]
    heap_b = [-x for x in second]
    heapq.heapify(heap_a)
    heapq.heapify(heap_b)
    while heap_b:
        a, b = -heap_a[0], -heap_b[0]
        if a == b:
            heapq.heappop(heap_a)
            heapq.heappop(heap_b)
        elif b > a:
            heapq.heapreplace(heap_b, -(b // 2))
        else:
            # Only doubling could reach a, and doubling never yields an odd number.
            if a % 2:
                return False
            heapq.heapreplace(heap_a, -(a // 2))
    return True


def balloon_count(solved: Iterable[str]) -> int:
    """Balloons handed out: two for a problem's first solve, one for each later solve."""
    seen: set[str] = set()
    total = 0
    for problem in solved:
        if problem in seen:
            total += 1
        else:
            seen.add(problem)
            total += 2
    return total


def double_strings(strings: Sequence[str]) -> str:
    """For each string, '1' if it is the concatenation of two listed strings, else '0'."""
    present = set(strings)
    return "".join(
        "1"
        if any(s[:j] in present and s[j:] in present for j in range(1, len(s)))
        else "0"
        for s in strings
    )


def word_game_scores(
    first: Sequence[str], second: Sequence[str], third: Sequence[str]
) -> tuple[int, int, int]:
    """Points per player: 3 for a word nobody else wrote, 1 for a word shared by two."""
    counts = Counter([*first, *second, *third])
    points = {1: 3, 2: 1}

    def score(words: Sequence[str]) -> int:
        return sum(points.get(counts[word], 0) for word in words)

    return score(first), score(second), score(third)


def _digit_count(x: int) -> int:
    return len(str(x))


def digital_logarithm_ops(first: Sequence[int], second: Sequence[int]) -> int:
    """Least replacements of x by its digit count that make the two arrays similar."""
    _same_length(first, second)
    if any(x <= 0 for x in first) or any(x <= 0 for x in second):
        raise ValueError("values must be positive")
    heap_a = [-x for x in first]
    heap_b = [-x for x in second]
    heapq.heapify(heap_a)
    heapq.heapify(heap_b)
    operations = 0
    while heap_a and heap_b:
        a, b = -heap_a[0], -heap_b[0]
        if a == b:
            heapq.heappop(heap_a)
            heapq.heappop(heap_b)
        elif a < b:
            heapq.heapreplace(heap_b, -_digit_count(b))
            operations += 1
        else:
            heapq.heapreplace(heap_a, -_digit_count(a))
            operations += 1
    return operations


def diverse_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Rearrange the matrix so no cell keeps its value, or None if this fails."""
    rows = len(matrix)
    if rows == 0:
        raise ValueError("the matrix must not be empty")
    cols = len(matrix[0])
    if cols == 0 or any(len(row) != cols for row in matrix):
        raise ValueError("the matrix must be rectangular and not empty")
    shifted = [
        [matrix[(i + 1) % rows][(j + 1) % cols] for j in range(cols)]
        for i in range(rows)
    ]
    if any(
        a == b for row_a, row_b in zip(matrix, shifted) for a, b in zip(row_a, row_b)
    ):
        return None
    return shifted


def _splitting_cells(row: str, other: str) -> int:
    return sum(
        1
        for i in range(1, len(row) - 1)
        if row[i - 1 : i + 2] == "..." and other[i - 1 : i + 2] == "x.x"
    )


def three_region_cells(top: str, bottom: str) -> int:
    """Count free cells of a two-row grid whose blocking makes exactly three regions."""
    _same_length(top, bottom)
    return _splitting_cells(top, bottom) + _splitting_cells(bottom, top)


def even_positions_cost(text: str) -> int:
    """Least cost of a regular bracket sequence with '_' filled in on odd positions."""
    open_positions: list[int] = []
    cost = 0
    for position, ch in enumerate(text, start=1):
        if open_positions and ch in ")_":
            cost += position - open_positions.pop()
        else:
            open_positions.append(position)
    return cost


def highway_exits(
    stations: Iterable[str], trips: Iterable[tuple[str, str]]
) -> list[int]:
    """For each trip, the number of stations passed strictly between entry and exit."""
    index = {name: position for position, name in enumerate(stations, start=1)}
    answers = []
    for entry, leave in trips:
        gap = abs(index.get(entry, 0) - index.get(leave, 0))
        answers.append(gap - 1 if gap > 1 else 0)
    return answers


def disjoint_pairs(groups: Sequence[Iterable[int]]) -> int:
    """Count pairs of groups that share no element."""
    sets = [set(group) for group in groups]
    sharing = sum(
        1
        for i, a in enumerate(sets)
        for b in sets[i + 1 :]
        if not a.isdisjoint(b)
    )
    n = len(sets)
    return n * (n - 1) // 2 - sharing