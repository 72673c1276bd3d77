# puzzlekit

A collection of classic programming puzzles with small, readable solutions:
string checks, a chained hash table, matrix work, graph and tree relinking,
simple plane geometry, word games, an arithmetic evaluator, and a set of
number and sequence problems. It uses only the standard library.

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

| Module | What it holds |
| --- | --- |
| `puzzlekit.strings` | `check_permutation`, `check_permutation_sorted`, `has_duplicates` (ASCII only), `is_one_edit_away`, `can_form_palindrome`, `compress` (run-length, returned only when shorter), `urlify`, `reverse_string` |
| `puzzlekit.hashtable` | `HashTable`, an integer-keyed table with `key % size` slots and chaining; `get` returns `None` for a missing key, `table[key]` raises `KeyError` |
| `puzzlekit.tail` | `last_lines`, `last_lines_of_file` and the `puzzlekit-tail` command |
| `puzzlekit.matrices` | `rotate90` (counter-clockwise, square matrices), `zero_rows_and_columns`, `pond_sizes` (8-connected zeros), `kadane`, `max_submatrix_brute_force`, `max_submatrix_sum` returning a `SubMatrix` |
| `puzzlekit.nodes` | `Node` and `copy_graph` (deep copy keeping shared nodes and cycles); `BiNode`, `bst_to_linked_list` (in place) and `iterate_linked_list` |
| `puzzlekit.geometry` | `Point`, `Square` with `center` and `bisecting_line`, and `straddles` |
| `puzzlekit.words` | `word_frequency`, `build_frequency_table`, `lookup_frequency`, `t9_words`, `int_to_english`, `SuffixTrie`, `true_frequencies` |
| `puzzlekit.calculator` | `Operator`, `Calculator`, `tokenize` and `evaluate` for `+ - * /` without parentheses |
| `puzzlekit.moderate` | `year_with_most_alive`, `diving_board_lengths`, `master_mind_score`, `sub_sort`, `largest_contiguous_sum`, `build_pattern` |
| `puzzlekit.numbers` | `factorial_trailing_zeros`, `smallest_difference`, `sum_swap_pairs`, `pairs_with_sum`, `add_without_plus` (32-bit wrap-around), `majority_element`, `kth_multiple` |
| `puzzlekit.sequences` | `optimal_booking`, `shortest_supersequence`, `histogram_volume`, `longest_balanced_subarray`, `circus_tower_height`, `smallest_k`, `shuffle`, `random_subset`, `ContinuousMedian` |

Invalid input is reported with `ValueError` (or `TypeError` for a term the
calculator cannot use); functions that may find nothing return `None`.

## Examples

```python
from puzzlekit.strings import check_permutation, can_form_palindrome, is_one_edit_away

check_permutation("hey how are you ?", "how are uoy yeh ?")   # True
can_form_palindrome("Tact Coa")                               # True
is_one_edit_away("pale", "ple")                               # True
is_one_edit_away("pale", "bake")                              # False
```

```python
from puzzlekit.hashtable import HashTable

table = HashTable(10)
table[3] = 6
table[13] = 26          # same slot as key 3, chained
table[3], table[13]     # (6, 26)
3 in table              # True
table.get(4)            # None
```

```python
from puzzlekit.calculator import evaluate
from puzzlekit.words import int_to_english, SuffixTrie
from puzzlekit.numbers import kth_multiple

evaluate("2*3+5/6*3+15")          # 23.5
int_to_english(1234)              # 'one thousand two hundred thirty four'
SuffixTrie("mississippi").search("ppi")   # [8]
kth_multiple(3, 5, 7, 7)          # 21  (1, 3, 5, 7, 9, 15, 21)
```

```python
from puzzlekit.sequences import histogram_volume, optimal_booking, ContinuousMedian

histogram_volume([0, 0, 4, 0, 0, 6, 0, 0, 3, 0, 8, 0, 2, 0, 5, 2, 0, 3, 0, 0])  # 26
optimal_booking([30, 15, 60, 75, 45, 15, 15, 45])                             # 180

running = ContinuousMedian()
for value in (5, 1, 9):
    running.add(value)
running.median()        # 5
```

## Command line

`puzzlekit-tail` prints the last lines of a UTF-8 text file. The path
defaults to `text.txt` and the count to 10:

```
puzzlekit-tail path/to/file.txt
puzzlekit-tail path/to/file.txt -n 3
```

This is the package's only command; everything else is used as a library.