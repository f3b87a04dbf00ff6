import pytest

from algonotes.numeric import (
    add,
    check_straight_line,
    convert_temperature,
    count_primes,
    is_reachable_at_time,
    max_value,
    reverse_integer,
)


@pytest.mark.parametrize("x", [1, 123, 987654, 1000001])
def test_reverse_round_trip(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [123, 45, 7])
def test_reverse_negative_mirrors_positive(x):
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_overflow_gives_zero():
    assert reverse_integer(1534236469) == 0


def test_reverse_zero():
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("n", [0, 1, 2])
def test_count_primes_small(n):
    assert count_primes(n) == 0


def test_count_primes_ten():
    assert count_primes(10) == 4


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 97])
def test_count_primes_steps_at_primes(p):
    assert count_primes(p + 1) == count_primes(p) + 1


def test_count_primes_monotonic():
    counts = [count_primes(n) for n in range(200)]
    assert counts == sorted(counts)


@pytest.mark.parametrize("a, b", [(12, 5), (-10, 4), (0, 0)])
def test_add_commutes_and_inverts(a, b):
    assert add(a, b) == add(b, a)
    assert add(add(a, b), -b) == a


def test_convert_temperature_freezing_point():
    assert convert_temperature(0) == pytest.approx([273.15, 32.0])


def test_convert_temperature_differences_scale():
    low, high = convert_temperature(10), convert_temperature(20)
    assert high[0] - low[0] == pytest.approx(10)
    assert high[1] - low[1] == pytest.approx(18)


def test_straight_line_sloped():
    assert check_straight_line([[i, 2 * i + 1] for i in range(6)]) is True


def test_straight_line_vertical():
    assert check_straight_line([[3, y] for y in range(5)]) is True


def test_straight_line_broken():
    assert check_straight_line([[1, 1], [2, 2], [3, 4], [4, 5]]) is False


def test_reachable_same_cell():
    assert is_reachable_at_time(1, 1, 1, 1, 0) is True
    assert is_reachable_at_time(1, 1, 1, 1, 1) is False
    assert is_reachable_at_time(1, 1, 1, 1, 2) is True


def test_reachable_examples():
    assert is_reachable_at_time(2, 4, 7, 7, 6) is True
    assert is_reachable_at_time(3, 1, 7, 3, 3) is False


def test_reachable_monotonic_in_time():
    results = [is_reachable_at_time(0, 0, 5, 2, t) for t in range(12)]
    assert results == [False] * 5 + [True] * 7


def test_max_value_examples():
    assert max_value(4, 2, 6) == 2
    assert max_value(6, 1, 10) == 3


@pytest.mark.parametrize("n, index", [(1, 0), (5, 0), (5, 4), (7, 3)])
def test_max_value_tight_budget(n, index):
    assert max_value(n, index, n) == 1


@pytest.mark.parametrize("max_sum", [1, 9, 1000])
def test_max_value_single_slot(max_sum):
    assert max_value(1, 0, max_sum) == max_sum


def test_max_value_grows_with_budget():
    values = [max_value(5, 2, budget) for budget in range(5, 60)]
    assert values == sorted(values)