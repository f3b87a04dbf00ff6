"""Greedy puzzles on arrays: sorting, sliding windows and heaps."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate, pairwise


def max_coins(piles: Sequence[int]) -> int:
    """Most coins you collect taking the middle pile of each chosen triple."""
    ordered = sorted(piles)
    return sum(ordered[len(ordered) // 3 :: 2])


def max_frequency(nums: Sequence[int], k: int) -> int:
    """Largest count of equal values reachable with at most ``k`` unit increments."""
    ordered = sorted(nums)
    best = 0
    window_sum = 0
    left = 0
    for right, value in enumerate(ordered):
        window_sum += value
        while window_sum + k < value * (right - left + 1):
            window_sum -= ordered[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def maximum_element_after_decrementing_and_rearranging(arr: Sequence[int]) -> int:
    """Largest possible maximum once the array starts at 1 and steps up by at most 1."""
    if not arr:
        raise ValueError("array is empty")
    best = 0
    for value in sorted(arr):
        best = min(best + 1, value)
    return best


def min_pair_sum(nums: Sequence[int]) -> int:
    """Smallest possible largest pair sum when the values are split into pairs."""
    ordered = sorted(nums)
    half = len(ordered) // 2
    return max((a + b for a, b in zip(ordered[:half], reversed(ordered))), default=0)


def reduction_operations(nums: Sequence[int]) -> int:
    """Steps to make all values equal, each step lowering one largest value to the next."""
    operations = 0
    distinct_below = 0
    for previous, current in pairwise(sorted(nums)):
        if current != previous:
            distinct_below += 1
        operations += distinct_below
    return operations


def max_product_difference(nums: Sequence[int]) -> int:
    """Largest (a * b) - (c * d) over four distinct positions."""
    ordered = sorted(nums)
    return ordered[-1] * ordered[-2] - ordered[0] * ordered[1]


def eliminate_maximum(dist: Sequence[int], speed: Sequence[int]) -> int:
    """Monsters shot, one per minute, before the first reaches the city."""
    arrivals = sorted(d / s for d, s in zip(dist, speed))
    for minute, arrival in enumerate(arrivals):
        if arrival <= minute:
            return minute
    return len(arrivals)


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Minutes for the metal, paper and glass trucks to clear every house."""
    total = sum(map(len, garbage))
    arrival = [0, *accumulate(travel)]
    for kind in "MPG":
        last = max((house for house, load in enumerate(garbage) if kind in load), default=0)
        total += arrival[last]
    return total


def min_cost(nums: Sequence[int], cost: Sequence[int]) -> int:
    """Cheapest way to make all values equal, moving ``nums[i]`` by one costing ``cost[i]``."""
    pairs = sorted(zip(nums, cost))
    half = (sum(c for _, c in pairs) + 1) // 2
    running = 0
    median = None
    for value, weight in pairs:
        if running >= half:
            break
        running += weight
        median = value
    if median is None:
        return 0
    return sum(abs(value - median) * weight for value, weight in zip(nums, cost))


def total_cost(costs: Sequence[int], k: int, candidates: int) -> int:
    """Cost of hiring ``k`` workers, each time the cheapest among the end candidates."""
    size = len(costs)
    if k > size:
        raise ValueError(f"cannot hire {k} workers from {size}")
    front: list[int] = []
    back: list[int] = []
    lo, hi = 0, size - 1
    while lo < size and lo < candidates:
        heapq.heappush(front, costs[lo])
        lo += 1
    while hi >= lo and hi >= size - candidates:
        heapq.heappush(back, costs[hi])
        hi -= 1
    spent = 0
    for _ in range(k):
        if front and (not back or front[0] <= back[0]):
            spent += heapq.heappop(front)
            if lo <= hi:
                heapq.heappush(front, costs[lo])
                lo += 1
        else:
            spent += heapq.heappop(back)
            if lo <= hi:
                heapq.heappush(back, costs[hi])
                hi -= 1
    return spent


def get_last_moment(n: int, left: Sequence[int], right: Sequence[int]) -> int:
    """Moment the last ant falls off a plank of length ``n``."""
    return max(max(left, default=0), max((n - pos for pos in right), default=0))


def get_winner(arr: Sequence[int], k: int) -> int:
    """Value that first wins ``k`` consecutive rounds of the array game."""
    if k == 1:
        return max(arr[0], arr[1])
    if k >= len(arr):
        return max(arr)
    winner = arr[0]
    streak = 0
    for challenger in arr[1:]:
        if winner > challenger:
            streak += 1
        else:
            winner = challenger
            streak = 1
        if streak == k:
            return winner
    return winner