"""Dynamic-programming puzzles: games, counting paths and interval costs."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate
from math import comb, inf

MOD = 1_000_000_007

_KNIGHT_MOVES = (
    (4, 6),
    (6, 8),
    (7, 9),
    (4, 8),
    (0, 3, 9),
    (),
    (1, 7, 0),
    (2, 6),
    (1, 3),
    (4, 2),
)


def max_profit(prices: Sequence[int], fee: int) -> int:
    """Best profit from unlimited buy/sell rounds, paying ``fee`` on each sale."""
    free = 0
    holding = 0
    for price in reversed(prices):
        free, holding = max(free, holding - price), max(holding, price - fee + free)
    return free


def knight_dialer(n: int) -> int:
    """Distinct numbers of length ``n`` a knight can dial on a phone pad, modulo 10**9 + 7."""
    if n < 1:
        raise ValueError(f"length must be at least 1, not {n}")
    counts = [1] * 10
    for _ in range(n - 1):
        counts = [sum(counts[nxt] for nxt in moves) % MOD for moves in _KNIGHT_MOVES]
    return sum(counts) % MOD


def tallest_billboard(rods: Sequence[int]) -> int:
    """Tallest height of two equal supports welded from disjoint subsets of ``rods``."""
    best = {0: 0}
    for rod in rods:
        updated = dict(best)
        for diff, shorter in best.items():
            grown = diff + rod
            updated[grown] = max(updated.get(grown, -1), shorter)
            narrowed = abs(diff - rod)
            updated[narrowed] = max(updated.get(narrowed, -1), shorter + min(diff, rod))
        best = updated
    return best[0]


def longest_arith_seq_length(nums: Sequence[int]) -> int:
    """Length of the longest arithmetic subsequence."""
    size = len(nums)
    if size <= 2:
        return size
    ends: list[dict[int, int]] = [{} for _ in range(size)]
    longest = 0
    for i in range(1, size):
        for j in range(i):
            step = nums[i] - nums[j]
            length = ends[j].get(step, 1) + 1
            ends[i][step] = length
            longest = max(longest, length)
    return longest


def make_array_increasing(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Fewest replacements from ``arr2`` making ``arr1`` strictly increasing; -1 if impossible."""
    pool = sorted(set(arr2))
    states: dict[float, int] = {-inf: 0}
    for value in arr1:
        following: dict[float, int] = {}
        for last, ops in states.items():
            if value > last and ops < following.get(value, inf):
                following[value] = ops
            position = bisect_right(pool, last)
            if position < len(pool):
                replacement = pool[position]
                if ops + 1 < following.get(replacement, inf):
                    following[replacement] = ops + 1
        if not following:
            return -1
        states = following
    return min(states.values())


def stone_game_iii(stone_value: Sequence[int]) -> str:
    """Winner when Alice and Bob alternately take 1 to 3 stones from the front."""
    size = len(stone_value)
    prefix = [0, *accumulate(stone_value)]
    alice = [0] * (size + 1)
    bob = [0] * (size + 1)
    for start in reversed(range(size)):
        steps = range(1, min(3, size - start) + 1)
        alice[start] = max(prefix[start + x] - prefix[start] + bob[start + x] for x in steps)
        bob[start] = min(alice[start + x] for x in steps)
    alice_score = alice[0]
    bob_score = prefix[-1] - alice_score
    if alice_score > bob_score:
        return "Alice"
    if alice_score < bob_score:
        return "Bob"
    return "Tie"


def min_cut_cost(n: int, cuts: Sequence[int]) -> int:
    """Cheapest total cost of making all ``cuts`` in a stick of length ``n``."""
    points = sorted([0, *cuts, n])
    count = len(points)
    cost = [[0] * count for _ in range(count)]
    for span in range(2, count):
        for left in range(count - span):
            right = left + span
            cost[left][right] = points[right] - points[left] + min(
                cost[left][k] + cost[k][right] for k in range(left + 1, right)
            )
    return cost[0][count - 1]


def num_of_ways(nums: Sequence[int]) -> int:
    """Other orderings of ``nums`` that build the same BST, modulo 10**9 + 7."""
    ways = 1
    pending = [list(nums)]
    while pending:
        values = pending.pop()
        if len(values) <= 2:
            continue
        root, rest = values[0], values[1:]
        left = [value for value in rest if value < root]
        right = [value for value in rest if value >= root]
        ways = ways * (comb(len(rest), len(left)) % MOD) % MOD
        pending.append(left)
        pending.append(right)
    return ways - 1


def count_routes(locations: Sequence[int], start: int, finish: int, fuel: int) -> int:
    """Routes from ``start`` to ``finish`` using at most ``fuel``, modulo 10**9 + 7."""
    cities = range(len(locations))
    ways: list[list[int]] = []
    for left in range(fuel + 1):
        row = []
        for here in cities:
            total = 1 if here == finish else 0
            for there in cities:
                if there == here:
                    continue
                remaining = left - abs(locations[here] - locations[there])
                if remaining >= 0:
                    total += ways[remaining][there]
            row.append(total % MOD)
        ways.append(row)
    return ways[fuel][start]


def count_paths(grid: Sequence[Sequence[int]]) -> int:
    """Strictly increasing paths in the grid, of any length, modulo 10**9 + 7."""
    rows = len(grid)
    cols = len(grid[0])
    paths = [[1] * cols for _ in range(rows)]
    cells = sorted(
        ((r, c) for r in range(rows) for c in range(cols)),
        key=lambda cell: grid[cell[0]][cell[1]],
        reverse=True,
    )
    for r, c in cells:
        here = grid[r][c]
        total = 1
        for nr, nc in ((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)):
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] > here:
                total += paths[nr][nc]
        paths[r][c] = total % MOD
    return sum(map(sum, paths)) % MOD