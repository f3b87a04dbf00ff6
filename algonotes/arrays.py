"""Array and matrix puzzles: searching, counting, rearranging and summarising."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise, permutations
from math import comb

MOD = 1_000_000_007


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _reverse_digits(num: int) -> int:
    return int(str(num)[::-1]) if num > 0 else 0


def _is_arithmetic(values: Sequence[int]) -> bool:
    ordered = sorted(values)
    step = ordered[1] - ordered[0]
    return all(b - a == step for a, b in pairwise(ordered))


def remove_element(nums: list[int], val: int) -> int:
    """Move the values other than ``val`` to the front of ``nums``, in order; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def find_peaks(mountain: Sequence[int]) -> list[int]:
    """Indices of elements strictly greater than both neighbours."""
    return [
        position
        for position, (before, here, after) in enumerate(
            zip(mountain, mountain[1:], mountain[2:]), start=1
        )
        if here > before and here > after
    ]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two values summing to ``target``, smaller value first; empty if none."""
    order = sorted((value, position) for position, value in enumerate(nums))
    low, high = 0, len(order) - 1
    while low < high:
        total = order[low][0] + order[high][0]
        if total == target:
            return [order[low][1], order[high][1]]
        if total < target:
            low += 1
        else:
            high -= 1
    return []


def permute(nums: Sequence[int]) -> list[list[int]]:
    """All orderings of ``nums``, in order of the positions chosen."""
    return [list(ordering) for ordering in permutations(nums)]


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number held as decimal digits, most significant first; updates in place."""
    for position in reversed(range(len(digits))):
        if digits[position] < 9:
            digits[position] += 1
            return digits
        digits[position] = 0
    digits.insert(0, 1)
    return digits


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Replace ``nums1`` with the sorted union of its first m and ``nums2``'s first n values."""
    nums1[:] = sorted([*nums1[:m], *nums2[:n]])


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Whether two equal values lie at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for position, value in enumerate(nums):
        if value in last_seen and position - last_seen[value] <= k:
            return True
        last_seen[value] = position
    return False


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive integers as "a->b", or "a" for a run of one."""
    ranges = []
    for _, group in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        run = [value for _, value in group]
        ranges.append(f"{run[0]}->{run[-1]}" if len(run) > 1 else str(run[0]))
    return ranges


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Distinct values present in both sequences, ascending."""
    return sorted(set(nums1) & set(nums2))


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of contiguous subarrays whose sum is ``goal``."""
    seen = Counter({0: 1})
    running = 0
    total = 0
    for value in nums:
        running += value
        total += seen[running - goal]
        seen[running] += 1
    return total


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the first n values with the next n: x1, y1, x2, y2, ..."""
    return [value for pair in zip(nums[:n], nums[n : 2 * n]) for value in pair]


def average(salary: Sequence[int]) -> float:
    """Mean of the salaries with one minimum and one maximum left out."""
    ordered = sorted(salary)
    return sum(ordered[1:-1]) / (len(ordered) - 2)


def can_make_arithmetic_progression(arr: Sequence[int]) -> bool:
    """Whether the values can be rearranged into an arithmetic progression."""
    return _is_arithmetic(arr)


def check_arithmetic_subarrays(
    nums: Sequence[int], l: Sequence[int], r: Sequence[int]
) -> list[bool]:
    """For each query [l[i], r[i]], whether that slice can be rearranged arithmetically."""
    return [_is_arithmetic(nums[start : stop + 1]) for start, stop in zip(l, r)]


def get_sum_absolute_differences(nums: Sequence[int]) -> list[int]:
    """For each element of a sorted sequence, the sum of its distances to all elements."""
    left = 0
    right = sum(nums)
    size = len(nums)
    result = []
    for position, value in enumerate(nums):
        right -= value
        result.append(value * position - left + right - value * (size - position - 1))
        left += value
    return result


def largest_submatrix(matrix: Sequence[Sequence[int]]) -> int:
    """Area of the largest all-ones submatrix after reordering columns freely."""
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [height + value if value else 0 for height, value in zip(heights, row)]
        for width, height in enumerate(sorted(heights, reverse=True), start=1):
            best = max(best, height * width)
    return best


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached starting at 0 and applying each gain in turn."""
    return max(0, *accumulate(gain)) if gain else 0


def restore_array(adjacent_pairs: Sequence[Sequence[int]]) -> list[int]:
    """Rebuild a sequence of distinct values from all its adjacent pairs."""
    neighbours: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in adjacent_pairs:
        neighbours[a].append(b)
        neighbours[b].append(a)
    start = next(value for value, links in neighbours.items() if len(links) == 1)
    result = [start, neighbours[start][0]]
    while len(result) < len(adjacent_pairs) + 1:
        previous, last = result[-2], result[-1]
        candidates = neighbours[last]
        result.append(candidates[0] if candidates[0] != previous else candidates[1])
    return result


def count_nice_pairs(nums: Sequence[int]) -> int:
    """Pairs i < j with nums[i] + rev(nums[j]) == nums[j] + rev(nums[i]), modulo 10**9 + 7."""
    groups = Counter(value - _reverse_digits(value) for value in nums)
    return sum(comb(count, 2) for count in groups.values()) % MOD


def build_array(nums: Sequence[int]) -> list[int]:
    """The array ans with ans[i] = nums[nums[i]]."""
    return [nums[value] for value in nums]


def get_averages(nums: Sequence[int], k: int) -> list[int]:
    """Truncated mean of each window of radius ``k``; -1 where the window does not fit."""
    size = len(nums)
    window = 2 * k + 1
    averages = [-1] * size
    if size < window:
        return averages
    prefix = [0, *accumulate(nums)]
    for centre in range(k, size - k):
        averages[centre] = _trunc_div(prefix[centre + k + 1] - prefix[centre - k], window)
    return averages


def equal_pairs(grid: Sequence[Sequence[int]]) -> int:
    """Number of (row, column) pairs of a square grid holding the same values."""
    rows = Counter(tuple(row) for row in grid)
    return sum(rows[column] for column in zip(*grid))


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Number of negative values in the matrix."""
    return sum(value < 0 for row in grid for value in row)


def find_diagonal_order(nums: Sequence[Sequence[int]]) -> list[int]:
    """Values of a jagged matrix by anti-diagonal, each read from bottom-left to top-right."""
    diagonals: defaultdict[int, list[int]] = defaultdict(list)
    for i, row in enumerate(nums):
        for j, value in enumerate(row):
            diagonals[i + j].append(value)
    return [value for key in sorted(diagonals) for value in reversed(diagonals[key])]