"""Arithmetic and geometry puzzles on integers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import pairwise

INT_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    digits = int(str(abs(x))[::-1])
    result = -digits if x < 0 else digits
    return 0 if abs(result) > INT_MAX else result


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``."""
    if n <= 2:
        return 0
    is_prime = bytearray([1]) * n
    is_prime[0] = is_prime[1] = 0
    for i in range(2, math.isqrt(n - 1) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(is_prime)


def add(num1: int, num2: int) -> int:
    """Sum of two integers."""
    return num1 + num2


def convert_temperature(celsius: float) -> list[float]:
    """Kelvin and Fahrenheit equivalents of a Celsius temperature."""
    return [celsius + 273.15, celsius * 1.80 + 32.00]


def check_straight_line(coordinates: Sequence[Sequence[int]]) -> bool:
    """Whether all points, taken in order, lie on one straight line."""

    def slope(p: Sequence[int], q: Sequence[int]) -> float:
        dx = q[0] - p[0]
        dy = q[1] - p[1]
        return dy / dx if dx else math.inf

    first = slope(coordinates[0], coordinates[1])
    return all(slope(p, q) == first for p, q in pairwise(coordinates))


def is_reachable_at_time(sx: int, sy: int, fx: int, fy: int, t: int) -> bool:
    """Whether a king-move walker can be at (fx, fy) exactly ``t`` steps after (sx, sy)."""
    if sx == fx and sy == fy:
        return t > 1 or t == 0
    height = abs(sy - fy)
    width = abs(sx - fx)
    return min(height, width) + abs(height - width) <= t


def _triangle(k: int) -> int:
    return k * (k + 1) // 2


def max_value(n: int, index: int, max_sum: int) -> int:
    """Largest value at ``index`` of n positive ints, neighbours differing by at most 1,
    total at most ``max_sum``."""

    def fits(peak: int) -> bool:
        total = 0
        have_left = index + 1
        if index == 0:
            total += peak
        elif have_left >= peak:
            total += _triangle(peak) + have_left - peak
        else:
            total += _triangle(peak) - _triangle(peak - have_left)
        if index != n - 1:
            need_right = peak - 1
            have_right = n - index - 1
            if have_right >= need_right:
                total += _triangle(peak - 1) + have_right - need_right
            else:
                total += _triangle(peak - 1) - _triangle(need_right - have_right)
        return total <= max_sum

    low, high, best = 1, max_sum, -1
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best