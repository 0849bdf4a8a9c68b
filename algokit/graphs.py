"""Traversal problems on undirected graphs whose vertices are numbered from 1."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

MAX_COLOR = 100


class ImpossibleError(Exception):
    """Raised when a problem instance has no valid answer."""


def _check_vertex(n: int, vertex: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for x, y in edges:
        _check_vertex(n, x)
        _check_vertex(n, y)
        adjacency[x].append(y)
        adjacency[y].append(x)
    return adjacency


def _component_roots(n: int, adjacency: list[list[int]]) -> Iterator[int]:
    """Yield the smallest vertex of every connected component, in order."""
    visited = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        yield start
        visited[start] = True
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)


def is_cthulhu(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the graph is connected with exactly one cycle and n == m."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    edge_list = list(edges)
    adjacency = _adjacency(n, edge_list)
    visited = [False] * (n + 1)
    visited[1] = True
    seen = 1
    back_edges = 0
    stack = [(1, 0, iter(adjacency[1]))]
    while stack:
        u, parent, neighbours = stack[-1]
        v = next(neighbours, None)
        if v is None:
            stack.pop()
            continue
        if not visited[v]:
            visited[v] = True
            seen += 1
            stack.append((v, u, iter(adjacency[v])))
        else:
            if v != parent:
                back_edges += 1
            if back_edges > 2:
                return False
    # Every cycle edge is met from both of its ends.
    return back_edges == 2 and seen == n and n == len(edge_list)


def lexicographic_wander(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the lexicographically smallest visiting order starting at vertex 1."""
    adjacency = _adjacency(n, edges)
    visited = [False] * (n + 1)
    visited[1] = True
    heap = [1]
    order = []
    while heap:
        u = heapq.heappop(heap)
        order.append(u)
        for v in adjacency[u]:
            if not visited[v]:
                visited[v] = True
                heapq.heappush(heap, v)
    return order


def _reachable(adjacency: dict[int, list[int]] | None, source: int, target: int) -> bool:
    if source == target:
        return True
    if adjacency is None:
        return False
    visited = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, ()):
            if v == target:
                return True
            if v not in visited:
                visited.add(v)
                queue.append(v)
    return False


def colorful_path_counts(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """For each query (u, v), count colours 1..100 whose edges alone join u and v."""
    by_color: dict[int, dict[int, list[int]]] = {}
    for a, b, color in edges:
        _check_vertex(n, a)
        _check_vertex(n, b)
        graph = by_color.setdefault(color, {})
        graph.setdefault(a, []).append(b)
        graph.setdefault(b, []).append(a)
    answers = []
    for u, v in queries:
        _check_vertex(n, u)
        _check_vertex(n, v)
        answers.append(
            sum(
                1
                for color in range(1, MAX_COLOR + 1)
                if _reachable(by_color.get(color), u, v)
            )
        )
    return answers


def count_trees(partners: Sequence[int]) -> int:
    """Count the trees of a forest given each vertex's most distant relative."""
    n = len(partners)
    adjacency = _adjacency(n, enumerate(partners, start=1))
    return sum(1 for _ in _component_roots(n, adjacency))


def building_roads(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect all cities."""
    roots = list(_component_roots(n, _adjacency(n, edges)))
    return list(zip(roots, roots[1:]))


def building_teams(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Split pupils into teams 1 and 2 so that no two friends share a team."""
    adjacency = _adjacency(n, edges)
    teams = [0] * (n + 1)
    for start in range(1, n + 1):
        if teams[start]:
            continue
        teams[start] = 1
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if not teams[v]:
                    teams[v] = 3 - teams[u]
                    queue.append(v)
                elif teams[v] == teams[u]:
                    raise ImpossibleError("the friendship graph is not bipartite")
    return teams[1:]


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a shortest route from computer 1 to computer n."""
    adjacency = _adjacency(n, edges)
    parent = {1: 1}
    queue = deque([1])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if v not in parent:
                parent[v] = u
                queue.append(v)
    if n not in parent:
        raise ImpossibleError(f"computer {n} cannot be reached from computer 1")
    path = [n]
    while parent[path[-1]] != path[-1]:
        path.append(parent[path[-1]])
    path.reverse()
    return path


def _close_cycle(parent: list[int], u: int, v: int) -> list[int] | None:
    path = [v]
    while u != v:
        if u == 0:
            return None
        path.append(u)
        u = parent[u]
    path.append(u)
    path.reverse()
    return path


def round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a cycle that starts and ends in the same city."""
    adjacency = _adjacency(n, edges)
    visited = [False] * (n + 1)
    parent = [0] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            u, neighbours = stack[-1]
            v = next(neighbours, None)
            if v is None:
                stack.pop()
            elif visited[v]:
                if v != parent[u]:
                    cycle = _close_cycle(parent, u, v)
                    if cycle is not None:
                        return cycle
            else:
                parent[v] = u
                visited[v] = True
                stack.append((v, iter(adjacency[v])))
    raise ImpossibleError("the road network has no cycle")


def complement_components(n: int, missing_edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sorted sizes of the components of the complete graph minus some edges."""
    missing: list[set[int]] = [set() for _ in range(n + 1)]
    for x, y in missing_edges:
        _check_vertex(n, x)
        _check_vertex(n, y)
        missing[x].add(y)
        missing[y].add(x)
    remaining = set(range(1, n + 1))
    sizes = []
    for start in range(1, n + 1):
        if start not in remaining:
            continue
        remaining.discard(start)
        queue = deque([start])
        size = 0
        while queue:
            u = queue.popleft()
            size += 1
            reached = [v for v in remaining if v not in missing[u]]
            remaining.difference_update(reached)
            queue.extend(reached)
        sizes.append(size)
    return sorted(sizes)


def musketeers_min_recognition(n: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Return the least recognition sum of three mutual acquaintances, or None."""
    neighbours: list[set[int]] = [set() for _ in range(n + 1)]
    degree = [0] * (n + 1)
    edge_list = []
    for x, y in edges:
        _check_vertex(n, x)
        _check_vertex(n, y)
        neighbours[x].add(y)
        neighbours[y].add(x)
        degree[x] += 1
        degree[y] += 1
        edge_list.append((x, y))
    best = None
    for x, y in edge_list:
        for k in neighbours[x] & neighbours[y]:
            total = degree[x] + degree[y] + degree[k]
            if best is None or total < best:
                best = total
    # The three know each other: six degree units are among themselves.
    return None if best is None else best - 6