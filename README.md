# algonotes

A library of small, self-contained solutions to classic algorithm exercises,
grouped by theme. The functions take plain Python values (lists, strings,
integers, or the node types in `algonotes.structures`) and return plain Python
values, so they are easy to call, compare and study. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algonotes.structures`

- `ListNode(val=0, next=None)`: a singly linked list node. Iterating a node
  yields the values from that node to the end.
- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `build_list(values)` / `list_values(head)`: convert between a Python list and
  a linked list (an empty list gives `None`).
- `build_tree(values)` / `tree_values(root)`: convert between a level-order list,
  with `None` marking a missing child, and a tree. `tree_values` trims trailing
  `None` entries.

### `algonotes.linked_lists`

`delete_duplicates`, `reverse_list`, `middle_node` (the second middle for an
even length), `remove_zero_sum_sublists`, `get_decimal_value`.

### `algonotes.trees`

`invert_tree`, `find_mode`, `get_minimum_difference`, `max_level_sum`
(raises `ValueError` for an empty tree), `average_of_subtree`.

### `algonotes.bits`

`get_maximum_xor`, `largest_combination`, `hamming_weight` (counts the low
32 bits), `min_flips`, `minimum_one_bit_operations`, `can_sort_array`,
`find_different_binary_string`, `maximum_odd_binary_number`.

### `algonotes.numeric`

`reverse_integer` (0 when the result leaves the 32-bit range), `count_primes`,
`add`, `convert_temperature` (returns `[kelvin, fahrenheit]`),
`check_straight_line`, `is_reachable_at_time`, `max_value`.

### `algonotes.strings`

`is_circular_sentence`, `min_changes`, `compressed_string`, `is_balanced`,
`rotate_string`, `my_atoi`, `roman_to_int`, `longest_common_prefix`,
`is_palindrome`, `is_subsequence`, `add_strings`, `custom_sort_string`,
`count_characters`, `array_strings_are_equal`, `count_homogenous`,
`are_almost_equal`, `count_palindromic_subsequence`,
`final_value_after_operations`, `sort_vowels`, `is_substring_present`,
`report_spam`, `number_of_ways`, `next_greatest_letter`.

### `algonotes.designs`

Small stateful structures:

- `HashSet` with `add`, `remove`, `contains` (and the `in` operator).
- `SnapshotArray(length)` with `set`, `snap` (returns the snapshot id) and
  `get(index, snap_id)`.
- `UndergroundSystem` with `check_in`, `check_out` and `get_average_time`.
  `check_out` for a customer who is not checked in, and `get_average_time` for
  a route with no journeys, raise `KeyError`.
- `ParkingSystem(big, medium, small)` with `add_car(car_type)`, where the type
  is 1, 2 or 3; any other type raises `ValueError`.
- `SeatManager(n)` with `reserve` (lowest free seat; `IndexError` when none is
  free) and `unreserve`.

### `algonotes.arrays`

`remove_element` (compacts the list in place and returns the kept count),
`find_peaks`, `two_sum`, `permute`, `plus_one` (updates the list in place),
`merge` (replaces the first list in place), `contains_nearby_duplicate`,
`summary_ranges`, `intersection`, `num_subarrays_with_sum`, `shuffle`,
`average`, `can_make_arithmetic_progression`, `check_arithmetic_subarrays`,
`get_sum_absolute_differences`, `largest_submatrix`, `largest_altitude`,
`restore_array`, `count_nice_pairs`, `build_array`, `get_averages`,
`equal_pairs`, `count_negatives`, `find_diagonal_order`.

### `algonotes.greedy`

`max_coins`, `max_frequency`,
`maximum_element_after_decrementing_and_rearranging` (raises `ValueError` for
an empty array), `min_pair_sum`, `reduction_operations`,
`max_product_difference`, `eliminate_maximum`, `garbage_collection`,
`min_cost`, `total_cost` (raises `ValueError` when asked to hire more workers
than there are), `get_last_moment`, `get_winner`.

### `algonotes.graphs`

`find_circle_num`, `num_buses_to_destination`, `shortest_path_binary_matrix`,
`num_of_minutes`, `maximum_detonation`, and `Graph(n, edges)`, a weighted
directed graph with `add_edge([from, to, cost])` and
`shortest_path(node1, node2)` (returns -1 when unreachable).

### `algonotes.dynamic`

`max_profit`, `knight_dialer` (raises `ValueError` for a length below 1),
`tallest_billboard`, `longest_arith_seq_length`, `make_array_increasing`,
`stone_game_iii` (returns `"Alice"`, `"Bob"` or `"Tie"`), `min_cut_cost`,
`num_of_ways`, `count_routes`, `count_paths`.

Results that can grow large (`count_homogenous`, `number_of_ways`,
`count_nice_pairs`, `knight_dialer`, `num_of_ways`, `count_routes`,
`count_paths`) are given modulo 10**9 + 7.

## Examples

```python
from algonotes.strings import roman_to_int, my_atoi
from algonotes.structures import build_list, list_values
from algonotes.linked_lists import reverse_list
from algonotes.designs import SeatManager

roman_to_int("MCMXCIV")      # 1994
my_atoi("   -42")            # -42

head = build_list([1, 2, 3])
list_values(reverse_list(head))   # [3, 2, 1]

seats = SeatManager(3)
seats.reserve()              # 1
seats.reserve()              # 2
seats.unreserve(1)
seats.reserve()              # 1
```

## What it does not do

This is a library only: it has no command-line program, and it does not read
input files or store results anywhere. Call the functions from your own code.