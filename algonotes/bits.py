"""Bit-manipulation puzzles."""

from __future__ import annotations

from functools import reduce
from itertools import groupby
from operator import xor
from typing import Optional


def get_maximum_xor(nums: list[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, the k below 2**maximum_bit maximising prefix-xor ^ k."""
    mask = (1 << maximum_bit) - 1
    total = reduce(xor, nums, 0)
    answers = []
    for num in reversed(nums):
        answers.append(total ^ mask)
        total ^= num
    return answers


def largest_combination(candidates: list[int]) -> int:
    """Size of the largest subset whose bitwise AND is non-zero (bits 0 to 24)."""
    return max(sum((value >> bit) & 1 for value in candidates) for bit in range(25))


def hamming_weight(n: int) -> int:
    """Number of set bits in the low 32 bits of ``n``."""
    return bin(n & 0xFFFFFFFF).count("1")


def min_flips(a: int, b: int, c: int) -> int:
    """Fewest single-bit flips in ``a`` and ``b`` so that ``a | b == c``."""
    flips = 0
    while a or b or c:
        bit_a, bit_b, bit_c = a & 1, b & 1, c & 1
        if bit_c:
            flips += bit_a == 0 and bit_b == 0
        else:
            flips += bit_a + bit_b
        a >>= 1
        b >>= 1
        c >>= 1
    return flips


def minimum_one_bit_operations(n: int) -> int:
    """Fewest allowed one-bit operations that turn ``n`` into zero."""
    result = 0
    while n > 0:
        result = -(result + (n ^ (n - 1)))
        n &= n - 1
    return abs(result)


def can_sort_array(nums: list[int]) -> bool:
    """Whether swapping adjacent values with equal set-bit counts can sort ``nums``."""
    previous_max: Optional[int] = None
    for _, group in groupby(nums, key=int.bit_count):
        run = list(group)
        if previous_max is not None and min(run) < previous_max:
            return False
        previous_max = max(run)
    return True


def find_different_binary_string(nums: list[str]) -> str:
    """A binary string of length len(nums) that differs from every entry."""
    return "".join("1" if word[position] == "0" else "0" for position, word in enumerate(nums))


def maximum_odd_binary_number(s: str) -> str:
    """Rearrange the bits of ``s`` into the largest odd number, if it has a set bit."""
    ones = s.count("1")
    if ones == 0:
        return s
    return "1" * (ones - 1) + "0" * (len(s) - ones) + "1"