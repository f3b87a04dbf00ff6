"""Graph searches: components, breadth-first paths and all-pairs shortest paths."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Sequence

_KING_MOVES = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    size = len(is_connected)
    visited = [False] * size
    groups = 0
    for start in range(size):
        if visited[start]:
            continue
        groups += 1
        visited[start] = True
        stack = [start]
        while stack:
            city = stack.pop()
            for other, linked in enumerate(is_connected[city]):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return groups


def num_buses_to_destination(routes: Sequence[Sequence[int]], source: int, target: int) -> int:
    """Fewest buses from ``source`` to ``target``; -1 if it cannot be reached."""
    if source == target:
        return 0
    routes_at: defaultdict[int, list[int]] = defaultdict(list)
    for number, route in enumerate(routes):
        for stop in route:
            routes_at[stop].append(number)
    if target not in routes_at:
        return -1
    boarded: set[int] = set()
    reached = {source}
    frontier = [source]
    buses = 0
    while frontier:
        buses += 1
        upcoming = []
        for stop in frontier:
            for number in routes_at.get(stop, ()):
                if number in boarded:
                    continue
                boarded.add(number)
                for next_stop in routes[number]:
                    if next_stop == target:
                        return buses
                    if next_stop not in reached:
                        reached.add(next_stop)
                        upcoming.append(next_stop)
        frontier = upcoming
    return -1


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-connected clear path between opposite corners; -1 if none."""
    size = len(grid)
    if grid[0][0] == 1 or grid[size - 1][size - 1] == 1:
        return -1
    seen = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        row, col, length = queue.popleft()
        if row == size - 1 and col == size - 1:
            return length
        for dr, dc in _KING_MOVES:
            cell = (row + dr, col + dc)
            r, c = cell
            if 0 <= r < size and 0 <= c < size and grid[r][c] == 0 and cell not in seen:
                seen.add(cell)
                queue.append((r, c, length + 1))
    return -1


def num_of_minutes(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Minutes until the news from ``head_id`` reaches every employee."""
    reports: defaultdict[int, list[int]] = defaultdict(list)
    for employee, boss in enumerate(manager[:n]):
        if boss != -1:
            reports[boss].append(employee)
    longest = 0
    stack = [(head_id, 0)]
    while stack:
        employee, elapsed = stack.pop()
        elapsed += inform_time[employee]
        longest = max(longest, elapsed)
        stack.extend((report, elapsed) for report in reports[employee])
    return longest


def maximum_detonation(bombs: Sequence[Sequence[int]]) -> int:
    """Most bombs set off by detonating a single one."""
    triggers: list[list[int]] = [
        [
            j
            for j, (x2, y2, _) in enumerate(bombs)
            if i != j and (x1 - x2) ** 2 + (y1 - y2) ** 2 <= r1 * r1
        ]
        for i, (x1, y1, r1) in enumerate(bombs)
    ]
    best = 0
    for start in range(len(bombs)):
        exploded = {start}
        stack = [start]
        while stack:
            for hit in triggers[stack.pop()]:
                if hit not in exploded:
                    exploded.add(hit)
                    stack.append(hit)
        best = max(best, len(exploded))
    return best


class Graph:
    """A weighted directed graph answering shortest-path queries."""

    def __init__(self, n: int, edges: Sequence[Sequence[int]]) -> None:
        self._size = n
        dist = [[math.inf] * n for _ in range(n)]
        for node in range(n):
            dist[node][node] = 0
        for u, v, cost in edges:
            dist[u][v] = min(dist[u][v], cost)
        for k in range(n):
            through = dist[k]
            for row in dist:
                via = row[k]
                if via == math.inf:
                    continue
                for j in range(n):
                    if via + through[j] < row[j]:
                        row[j] = via + through[j]
        self._dist = dist

    def add_edge(self, edge: Sequence[int]) -> None:
        """Add a directed edge (from, to, cost)."""
        u, v, cost = edge
        dist = self._dist
        if dist[u][v] <= cost:
            return
        dist[u][v] = cost
        for row in dist:
            to_u = row[u]
            if to_u == math.inf:
                continue
            for j in range(self._size):
                candidate = to_u + cost + dist[v][j]
                if candidate < row[j]:
                    row[j] = candidate

    def shortest_path(self, node1: int, node2: int) -> int:
        """Cost of the cheapest path from ``node1`` to ``node2``; -1 if unreachable."""
        distance = self._dist[node1][node2]
        return -1 if distance == math.inf else int(distance)