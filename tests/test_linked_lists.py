import pytest

from algonotes.linked_lists import (
    delete_duplicates,
    get_decimal_value,
    middle_node,
    remove_zero_sum_sublists,
    reverse_list,
)
from algonotes.structures import build_list, list_values


def _has_zero_sum_run(values):
    prefix = 0
    seen = {0}
    for value in values:
        prefix += value
        if prefix in seen:
            return True
        seen.add(prefix)
    return False


@pytest.mark.parametrize("values", [[1, 1, 2], [1, 1, 2, 3, 3], [1, 2, 1, 3, 2], [4]])
def test_delete_duplicates(values):
    result = list_values(delete_duplicates(build_list(values)))
    assert result == list(dict.fromkeys(values))


def test_delete_duplicates_empty():
    assert delete_duplicates(None) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


def test_reverse_twice_restores():
    values = list(range(20))
    assert list_values(reverse_list(reverse_list(build_list(values)))) == values


def test_reverse_empty():
    assert reverse_list(None) is None


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node(values):
    assert list_values(middle_node(build_list(values))) == values[len(values) // 2:]


def test_middle_node_empty():
    assert middle_node(None) is None


def test_remove_zero_sum_example():
    assert list_values(remove_zero_sum_sublists(build_list([1, 2, -3, 3, 1]))) == [3, 1]


def test_remove_zero_sum_middle_run():
    assert list_values(remove_zero_sum_sublists(build_list([1, 2, 3, -3, 4]))) == [1, 2, 4]


def test_remove_zero_sum_everything():
    assert remove_zero_sum_sublists(build_list([1, -1])) is None


@pytest.mark.parametrize(
    "values",
    [[1, 2, -3, 3, -2], [0, 0, 5], [3, -3, 2, -2, 1], [1, 2, 3], [-1, 1, 0, 4, -4, 7]],
)
def test_remove_zero_sum_invariants(values):
    result = list_values(remove_zero_sum_sublists(build_list(values)))
    assert not _has_zero_sum_run(result)
    assert sum(result) == sum(values)


@pytest.mark.parametrize("bits", [[0], [1], [1, 0, 1], [1, 1, 1, 1, 0, 0, 1]])
def test_get_decimal_value(bits):
    expected = int("".join(map(str, bits)), 2)
    assert get_decimal_value(build_list(bits)) == expected


def test_get_decimal_value_empty():
    assert get_decimal_value(None) == 0