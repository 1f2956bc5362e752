# algobox

A small library of classic algorithms and data structures, written in plain
Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `algobox.sorting`: `bubble_sort`, `counting_sort` (non-negative integers
  only), `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`,
  `shell_sort`, `wave_sort` and `partition_negatives`. Each takes any iterable
  and returns a new list; the input is left untouched.
- `algobox.text`: `kmp_search`, a Knuth–Morris–Pratt search returning every
  shift at which a pattern occurs (overlaps included), and `is_balanced`,
  which checks the nesting of `()`, `[]` and `{}` and ignores other characters.
- `algobox.arrays`: `insert_at` and `delete_at` (copies with one item added or
  removed, with an optional capacity), `subarrays` (a generator of every
  contiguous slice), `max_subarray_sum` (Kadane's algorithm), `max_subarray`
  (the best sum together with the slice reaching it), `trapped_water`,
  `permutations`, `optimal_merge_cost`, `knapsack` (0/1) and `reverse_digits`.
- `algobox.linked_list`: `Node`, `SinglyLinkedList` (push and pop at both
  ends, insertion after a node or a position, removal by position or value,
  `positions`, `middle`, in-place `reverse`) and `DoublyLinkedList`, which can
  be walked forwards and with `reversed()`.
- `algobox.containers`: `LinkedStack`, `ArrayQueue` (fixed slots),
  `CircularDeque` (fixed-capacity ring buffer), `QueueFromStacks`,
  `StackFromQueues`, `TreeNode` and `SimpleBinaryTree` (a root and at most
  two children).
- `algobox.graphs`: `bellman_ford` for shortest distances (unreachable
  vertices get `math.inf`) and `safe_sequence`, the banker's algorithm, which
  raises `UnsafeStateError` when no order lets every process finish.
- `algobox.records`: `StudentRecord` with `total()` and `average()`,
  `rank_by_total`, `format_records` and `format_marks`.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.text import kmp_search, is_balanced
from algobox.arrays import max_subarray_sum, max_subarray
from algobox.linked_list import SinglyLinkedList
from algobox.graphs import bellman_ford

merge_sort([2, 65, 31, 1, 7, 4])                 # [1, 2, 4, 7, 31, 65]
kmp_search("ABCABAABCABAC", "CAB")               # [2, 8]
is_balanced("{[()]}")                            # True
max_subarray_sum([-2, -5, 6, -2, -3, 1, 5, -6])  # 7
max_subarray([-2, -5, 6, -2, -3, 1, 5, -6])      # (7, [6, -2, -3, 1, 5])

items = SinglyLinkedList([55, -87, 23])
items.append(66)
items.reverse()
list(items)                                      # [66, 23, -87, 55]

bellman_ford(3, [(0, 1, 4), (1, 2, -1)], 0)      # [0, 4, 3]
```

Operations that cannot be carried out raise ordinary Python exceptions:
`IndexError` when popping from an empty container or when a position lies
outside a list, `OverflowError` when a fixed-capacity container is full, and
`ValueError` for malformed arguments.

## What it does not do

- It is a library only: there are no commands and no interactive menus; every
  operation is a function or method call.
- There are no binary or linear search functions over plain sequences;
  `SinglyLinkedList.positions` and `in` cover lookups in linked lists, and
  Python's `bisect` module serves sorted lists.