"""Grid, shortest-path and small dynamic-programming problems."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

TWO_BUTTONS_LIMIT = 20000

_MOVES = (("U", -1, 0), ("L", 0, -1), ("R", 0, 1), ("D", 1, 0))


def fillomino(diagonal: Sequence[int]) -> list[list[int]]:
    """Fill the lower triangle so each region x, started on the diagonal, has x cells."""
    n = len(diagonal)
    grid = [[0] * n for _ in range(n)]
    for start, value in enumerate(diagonal):
        placed = 1
        stack: list[list[int]] = []

        def enter(i: int, j: int) -> None:
            if placed <= value:
                grid[i][j] = value
                stack.append([i, j, 0])

        enter(start, start)
        while stack:
            frame = stack[-1]
            i, j, stage = frame
            if stage == 0:
                # Prefer going left before going down.
                frame[2] = 1
                if j - 1 >= 0 and grid[i][j - 1] == 0:
                    placed += 1
                    enter(i, j - 1)
            elif stage == 1:
                frame[2] = 2
                if i + 1 < n and grid[i + 1][j] == 0:
                    placed += 1
                    enter(i + 1, j)
            else:
                stack.pop()
    return [row[: i + 1] for i, row in enumerate(grid)]


def _locate(grid: Sequence[str], mark: str) -> tuple[int, int]:
    for r, row in enumerate(grid):
        c = row.find(mark)
        if c >= 0:
            return r, c
    raise ValueError(f"the labyrinth has no {mark!r} cell")


def labyrinth_path(grid: Sequence[str]) -> str | None:
    """Return a shortest U/L/R/D route from A to B, or None if B is unreachable."""
    start = _locate(grid, "A")
    end = _locate(grid, "B")
    came_by: dict[tuple[int, int], int] = {start: -1}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for k, (_, dr, dc) in enumerate(_MOVES):
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < len(grid)
                and 0 <= nc < len(grid[nr])
                and (nr, nc) not in came_by
                and grid[nr][nc] != "#"
            ):
                came_by[(nr, nc)] = k
                queue.append((nr, nc))
    if end not in came_by:
        return None
    steps = []
    cell = end
    while cell != start:
        letter, dr, dc = _MOVES[came_by[cell]]
        steps.append(letter)
        cell = (cell[0] - dr, cell[1] - dc)
    return "".join(reversed(steps))


def set_construction(matrix: Sequence[str]) -> list[list[int]]:
    """Build sets A1..An where matrix[i][j] == '1' means Ai is a proper subset of Aj."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the matrix must be square")
    closure = [[ch == "1" for ch in row] for row in matrix]
    for i, row in enumerate(closure):
        row[i] = True
    for k in range(n):
        row_k = closure[k]
        for i, row in enumerate(closure):
            if row[k]:
                closure[i] = [a or b for a, b in zip(row, row_k)]
    return [[j for j, row in enumerate(closure, start=1) if row[i]] for i in range(n)]


def two_buttons(n: int, m: int) -> int:
    """Least presses of 'double' and 'minus one' that turn n into m."""
    seen = {n}
    queue = deque([(n, 0)])
    while queue:
        x, presses = queue.popleft()
        if x == m:
            return presses
        for y in (x * 2, x - 1):
            if 0 < y <= TWO_BUTTONS_LIMIT and y not in seen:
                seen.add(y)
                queue.append((y, presses + 1))
    raise ValueError(f"{m} cannot be reached from {n}")


def bear_blocks(heights: Sequence[int]) -> int:
    """Number of operations needed to destroy every tower of blocks."""
    if not heights:
        raise ValueError("there must be at least one tower")
    steps = list(heights)
    previous = 0
    for i, value in enumerate(steps):
        previous = steps[i] = min(value, previous + 1)
    following = 0
    for i in reversed(range(len(steps))):
        following = steps[i] = min(steps[i], following + 1)
    return max(steps)


def _squared(a: tuple[int, int], b: tuple[int, int]) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def interleaved_route_cost(
    first: Sequence[tuple[int, int]], second: Sequence[tuple[int, int]]
) -> int:
    """Least squared-distance cost of walking all of first in order, from its first
    point to its last, with a prefix of second inserted in order along the way."""
    n, m = len(first), len(second)
    if n == 0:
        raise ValueError("the first route needs at least one point")
    # at_first[i][j]: standing on first[i] after visiting second[:j].
    # at_second[j][i]: standing on second[j - 1] after visiting first[:i + 1].
    at_first = [[math.inf] * (m + 1) for _ in range(n)]
    at_second = [[math.inf] * n for _ in range(m + 1)]
    at_first[0][0] = 0
    for i in range(n):
        for j in range(m + 1):
            cost = at_first[i][j]
            if cost < math.inf:
                if i + 1 < n:
                    step = cost + _squared(first[i], first[i + 1])
                    at_first[i + 1][j] = min(at_first[i + 1][j], step)
                if j < m:
                    step = cost + _squared(first[i], second[j])
                    at_second[j + 1][i] = min(at_second[j + 1][i], step)
            if j == 0:
                continue
            cost = at_second[j][i]
            if cost < math.inf:
                here = second[j - 1]
                if j < m:
                    step = cost + _squared(here, second[j])
                    at_second[j + 1][i] = min(at_second[j + 1][i], step)
                if i + 1 < n:
                    step = cost + _squared(here, first[i + 1])
                    at_first[i + 1][j] = min(at_first[i + 1][j], step)
    return int(min(at_first[n - 1]))