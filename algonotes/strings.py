"""String puzzles: parsing, counting, comparison and rearrangement."""

from __future__ import annotations

import re
from bisect import bisect_right
from collections import Counter
from collections.abc import Sequence
from itertools import groupby, pairwise, zip_longest

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
MOD = 1_000_000_007

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_VOWELS = frozenset("aeiouAEIOU")
_ALNUM = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
_ATOI = re.compile(r" *([+-]?)([0-9]*)")


def is_circular_sentence(sentence: str) -> bool:
    """Whether each word ends with the letter the next begins with, wrapping around."""
    if sentence[0] != sentence[-1]:
        return False
    words = sentence.split(" ")
    return all(left[-1:] == right[:1] for left, right in pairwise(words))


def min_changes(s: str) -> int:
    """Fewest flips so that every aligned pair of characters is equal."""
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as count-then-character, runs capped at 9."""
    parts = []
    for char, group in groupby(word):
        run = sum(1 for _ in group)
        while run:
            take = min(9, run)
            parts.append(f"{take}{char}")
            run -= take
    return "".join(parts)


def is_balanced(num: str) -> bool:
    """Whether digits at even positions sum to the same as digits at odd positions."""
    return sum(map(int, num[::2])) == sum(map(int, num[1::2]))


def rotate_string(s: str, goal: str) -> bool:
    """Whether ``goal`` is a rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to the 32-bit range."""
    match = _ATOI.match(s)
    assert match is not None
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; unknown characters count as zero."""
    values = [_ROMAN.get(char, 0) for char in s]
    total = 0
    i = 0
    while i < len(values):
        current = values[i]
        following = values[i + 1] if i + 1 < len(values) else 0
        if current < following:
            total += following - current
            i += 2
        else:
            total += current
            i += 1
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string."""
    if not strs:
        return ""
    prefix = []
    for column in zip(*strs):
        if any(char != column[0] for char in column):
            break
        prefix.append(column[0])
    return "".join(prefix)


def is_palindrome(s: str) -> bool:
    """Whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    cleaned = "".join(char for char in s if char in _ALNUM).lower()
    return cleaned == cleaned[::-1]


def is_subsequence(s: str, t: str) -> bool:
    """Whether ``s`` can be obtained from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative decimal strings, as a decimal string."""
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def custom_sort_string(order: str, s: str) -> str:
    """Characters of ``s`` absent from ``order`` first, then the rest in ``order``'s order."""
    ranked = set(order)
    counts = Counter(s)
    head = "".join(char for char in s if char not in ranked)
    return head + "".join(char * counts[char] for char in order)


def count_characters(words: Sequence[str], chars: str) -> int:
    """Total length of the words that can each be spelled from ``chars``."""
    available = Counter(chars)
    return sum(len(word) for word in words if Counter(word) <= available)


def array_strings_are_equal(word1: Sequence[str], word2: Sequence[str]) -> bool:
    """Whether two lists of strings concatenate to the same string."""
    return "".join(word1) == "".join(word2)


def count_homogenous(s: str) -> int:
    """Number of substrings made of a single repeated character, modulo 10**9 + 7."""
    total = 0
    for _, group in groupby(s):
        run = sum(1 for _ in group)
        total += run * (run + 1) // 2
    return total % MOD


def are_almost_equal(s1: str, s2: str) -> bool:
    """Whether at most one swap within one string makes the two strings equal."""
    if s1 == s2:
        return True
    diffs = [(a, b) for a, b in zip(s1, s2) if a != b]
    if len(diffs) != 2:
        return False
    (a1, b1), (a2, b2) = diffs
    return a1 == b2 and a2 == b1


def count_palindromic_subsequence(s: str) -> int:
    """Number of distinct palindromic subsequences of length three."""
    first: dict[str, int] = {}
    last: dict[str, int] = {}
    for position, char in enumerate(s):
        first.setdefault(char, position)
        last[char] = position
    return sum(
        len(set(s[first[char] + 1 : last[char]]))
        for char in first
        if first[char] < last[char]
    )


def final_value_after_operations(operations: Sequence[str]) -> int:
    """Final value of X, starting at 0, after "++X"/"X++"/"--X"/"X--" operations."""
    return sum(1 if op[1] == "+" else -1 for op in operations)


def sort_vowels(s: str) -> str:
    """Sort the vowels of ``s`` by code point, leaving other characters in place."""
    vowels = iter(sorted(char for char in s if char in _VOWELS))
    return "".join(next(vowels) if char in _VOWELS else char for char in s)


def is_substring_present(s: str) -> bool:
    """Whether some length-two substring of ``s`` also occurs reversed."""
    pairs = set(zip(s, s[1:]))
    return any((b, a) in pairs for a, b in pairs)


def report_spam(message: Sequence[str], banned_words: Sequence[str]) -> bool:
    """Whether at least two words of the message are banned."""
    banned = set(banned_words)
    return sum(word in banned for word in message) > 1


def number_of_ways(corridor: str) -> int:
    """Ways to divide a corridor into sections of exactly two seats, modulo 10**9 + 7."""
    seats = 0
    plants = 0
    ways = 1
    for item in corridor:
        if item == "S":
            seats += 1
        elif seats == 2:
            plants += 1
        if seats == 3:
            ways = ways * (plants + 1) % MOD
            seats = 1
            plants = 0
    return ways if seats == 2 else 0


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Smallest letter in sorted ``letters`` greater than ``target``, wrapping to the first."""
    if letters[0] > target or target >= letters[-1]:
        return letters[0]
    return letters[bisect_right(letters, target)]