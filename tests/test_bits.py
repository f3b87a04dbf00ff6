from functools import reduce
from operator import xor

import pytest

from algonotes.bits import (
    can_sort_array,
    find_different_binary_string,
    get_maximum_xor,
    hamming_weight,
    largest_combination,
    maximum_odd_binary_number,
    min_flips,
    minimum_one_bit_operations,
)


@pytest.mark.parametrize(
    "nums, maximum_bit", [([0, 1, 1, 3], 2), ([2, 3, 4, 7], 3), ([0, 1, 2, 2, 5, 7], 3)]
)
def test_maximum_xor_property(nums, maximum_bit):
    mask = (1 << maximum_bit) - 1
    answers = get_maximum_xor(nums, maximum_bit)
    assert len(answers) == len(nums)
    for step, k in enumerate(answers):
        prefix = reduce(xor, nums[: len(nums) - step], 0)
        assert prefix ^ k == mask
        assert 0 <= k <= mask


def test_largest_combination_example():
    assert largest_combination([16, 17, 71, 62, 12, 24, 14]) == 4


def test_largest_combination_identical_values():
    values = [8, 8, 8]
    assert largest_combination(values) == len(values)


@pytest.mark.parametrize("k", [0, 1, 5, 31, 32])
def test_hamming_weight_of_all_ones(k):
    assert hamming_weight((1 << k) - 1) == k


def test_hamming_weight_large():
    assert hamming_weight(4294967293) == 31


def test_min_flips_example():
    assert min_flips(2, 6, 5) == 3


@pytest.mark.parametrize("a, b", [(0, 0), (1, 2), (7, 8), (123, 456)])
def test_min_flips_zero_when_already_equal(a, b):
    assert min_flips(a, b, a | b) == 0


def test_min_flips_to_zero_counts_set_bits():
    assert min_flips(0b1011, 0b0110, 0) == hamming_weight(0b1011) + hamming_weight(0b0110)


def test_one_bit_operations_zero():
    assert minimum_one_bit_operations(0) == 0


@pytest.mark.parametrize("width", [2, 4, 6])
def test_one_bit_operations_is_permutation(width):
    size = 1 << width
    assert sorted(minimum_one_bit_operations(n) for n in range(size)) == list(range(size))


@pytest.mark.parametrize("k", [0, 1, 3, 10])
def test_one_bit_operations_power_of_two(k):
    assert minimum_one_bit_operations(1 << k) == (1 << (k + 1)) - 1


def test_can_sort_example():
    assert can_sort_array([8, 4, 2, 30, 15]) is True


def test_can_sort_blocked_by_bit_count():
    assert can_sort_array([3, 16, 8, 4, 2]) is False


def test_can_sort_already_sorted():
    assert can_sort_array([1, 2, 3, 4, 5]) is True


def test_can_sort_powers_of_two_any_order():
    assert can_sort_array([64, 1, 32, 2, 16, 4, 8]) is True


@pytest.mark.parametrize("nums", [["01", "10"], ["00", "01"], ["111", "011", "001"]])
def test_different_binary_string(nums):
    result = find_different_binary_string(nums)
    assert len(result) == len(nums)
    assert set(result) <= {"0", "1"}
    assert result not in nums


@pytest.mark.parametrize("s", ["010", "0101", "1", "111", "1100100"])
def test_maximum_odd_binary_number(s):
    result = maximum_odd_binary_number(s)
    assert sorted(result) == sorted(s)
    assert result.endswith("1")
    head = result[:-1]
    assert head == "".join(sorted(head, reverse=True))


def test_maximum_odd_binary_number_no_ones():
    assert maximum_odd_binary_number("000") == "000"