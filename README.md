# algodrills

Classic algorithm exercises written as small, plain Python functions:
string problems, array manipulation, binary search, backtracking, sudoku,
linked lists, tree walks and shortest paths. Standard library only.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.palindrome` | `longest_palindrome` (table), `longest_palindrome_expand`, `longest_palindrome_centers` |
| `algodrills.regex_match` | `is_match` (table), `is_match_recursive`: whole-string matching with `.` and `*` |
| `algodrills.roman` | `int_to_roman`, `roman_to_int`, `roman_to_int_lookahead` |
| `algodrills.common_prefix` | `longest_common_prefix` (binary search on length), `prefix_by_horizontal_scan`, `prefix_by_vertical_scan`, `prefix_by_divide_and_conquer`, `prefix_by_trie`, `PrefixTrie` |
| `algodrills.text_search` | `find_index`, `find_concatenations` (sliding window), `find_concatenations_brute` |
| `algodrills.parentheses` | `is_valid`, `generate` |
| `algodrills.sequences` | `run_length_encode`, `count_and_say`, `letter_combinations` |
| `algodrills.arithmetic` | `climb_stairs`, `divide` |
| `algodrills.ksum` | `three_sum`, `three_sum_closest`, `four_sum`, `k_sum` |
| `algodrills.binary_search` | `search_range`, `search_insert`, `find_pivot`, `search_rotated` |
| `algodrills.array_ops` | `remove_duplicates`, `remove_element`, `remove_element_two_ends`, `next_permutation`, `permutations` |
| `algodrills.combinations` | `combination_sum`, `combination_sum_unique` |
| `algodrills.sudoku` | `is_valid_sudoku`, `solve_sudoku`, `solve_sudoku_simple` |
| `algodrills.linked_list` | `ListNode`, `from_values`, `to_values` |
| `algodrills.merging` | `merge_two_lists`, `merge_k_lists` (pairwise halves), `merge_k_lists_heap` |
| `algodrills.list_ops` | `remove_nth_from_end`, `reverse_k_group`, `swap_pairs` |
| `algodrills.tree_order` | `TreeNode`, `pre_order`, `post_order`, `level_order` |
| `algodrills.shortest_path` | `Edge`, `dijkstra`, the sample graph `MRT_GRAPH` |
| `algodrills.report` | `assert_answer`, `assert_answer_any` |

## Examples

```python
from algodrills.roman import int_to_roman, roman_to_int
from algodrills.regex_match import is_match
from algodrills.combinations import combination_sum_unique
from algodrills.linked_list import from_values, to_values
from algodrills.merging import merge_k_lists
from algodrills.shortest_path import MRT_GRAPH, dijkstra

int_to_roman(1994)            # "MCMXCIV"
roman_to_int("MCMXCIV")       # 1994
is_match("aaabc", "a*bc")     # True

combination_sum_unique([10, 1, 2, 7, 6, 1, 5], 8)
# [[1, 1, 6], [1, 2, 5], [1, 7], [2, 6]]

merged = merge_k_lists([from_values([1, 4, 5]), from_values([1, 3, 4]), from_values([2, 6])])
to_values(merged)             # [1, 1, 2, 3, 4, 4, 5, 6]

dijkstra(MRT_GRAPH, 0, 4)     # ([0, 7, 6, 5, 4], 21)
```

## Behaviour worth knowing

- Functions that work in place modify the list they are given:
  `remove_duplicates`, `remove_element` and `remove_element_two_ends` move the
  kept values to the front and return how many there are; `next_permutation`
  rearranges its argument and wraps the largest permutation round to the
  smallest; `solve_sudoku` and `solve_sudoku_simple` fill the board.
- Boards are 9 lists of 9 one-character strings, `"1"` to `"9"` or `"."` for
  an empty cell. The solvers raise `ValueError` for a malformed board or a
  puzzle with no solution, leaving the board unchanged.
- Linked-list functions take and return `ListNode` heads, with `None` for the
  empty list, and reuse the nodes they are given. A `ListNode` iterates over
  its values from itself to the end.
- Bad input raises rather than returning a sentinel: for example
  `divide(x, 0)` raises `ZeroDivisionError`, `count_and_say(0)`,
  `climb_stairs(0)`, `three_sum_closest` with fewer than three numbers and
  `find_concatenations` with no words raise `ValueError`, and `dijkstra`
  raises `ValueError` when the target cannot be reached.
- `divide` truncates toward zero and returns `2**31 - 1` for
  `divide(-2**31, -1)`, the one 32-bit overflow case.
- `search_range` returns a pair of indices, `(-1, -1)` when the target is
  absent; `find_pivot` returns `-1` for a sequence that is not rotated.
- `assert_answer` and `assert_answer_any` print a coloured pass or fail line
  (ANSI escape codes) and return whether the answer matched.

## What it does not do

This is a library of functions only. It has no command-line program, reads
and writes no files, and does not time or benchmark the solutions.