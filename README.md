# algobox

A collection of classic algorithms and small programming exercises, written as
plain Python functions with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `counting_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `selection_sort_recursive` |
| `algobox.searching` | `binary_search`, `linear_search`, `index_of_max`, `min_max` |
| `algobox.fifo` | `BoundedQueue` with `QueueOverflow` / `QueueUnderflow` errors, and a menu command |
| `algobox.bst` | `Node`, `BinarySearchTree` with pre-, in- and post-order traversals, and a menu command |
| `algobox.combinatorics` | brute-force `assign`, `knapsack`, `partition_equal`, and `hanoi_moves` (with `Assignment`, `KnapsackResult`, `Move`) |
| `algobox.arithmetic` | primes, factorials, Fibonacci numbers, GCD, digit tricks, leap years, `random_grid` |
| `algobox.conversions` | `binary_to_decimal`, `decimal_to_binary` |
| `algobox.roots` | `babylonian_sqrt`, `nth_root`, `integer_sqrt`, `hypotenuse`, and a hypotenuse command |
| `algobox.text` | `CharClass`, `classify_char`, `count_char`, `is_palindrome`, `reverse_line` |
| `algobox.matrix` | `multiply`, `diagonal_sum`, `concentric_rectangles` |
| `algobox.calculator` | `calculate` for `+`, `-`, `*`, `/` |
| `algobox.games` | `roll_die`, a three-colour code breaker (`random_secret`, `score_guess`, `Score`), `random_numbers` |
| `algobox.misc` | `add_times`, `square_or_circle_area`, `swap`, `polynomial_hash`, `write_name` |

## Examples

```python
from algobox.sorting import merge_sort
from algobox.searching import binary_search
from algobox.combinatorics import knapsack, hanoi_moves
from algobox.bst import BinarySearchTree

merge_sort([12, 11, 13, 5, 6, 7])            # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 7, 10, 11, 40], 40)  # 6

result = knapsack([2, 3, 4], [3, 4, 5], 5)
result.items, result.value, result.weight    # chosen indices, total value, total weight
moves = list(hanoi_moves(3, "A", "C", "B"))  # 7 moves

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
list(tree.inorder())                         # [20, 30, 40, 50, 70]
```

Some behaviour worth knowing:

- Sorting functions accept any iterable and return a new sorted list; the input
  is left untouched. `counting_sort` raises `ValueError` for negative values.
- `binary_search` and `linear_search` return `None` when the target is absent.
- `BoundedQueue` has a fixed number of slots; a slot freed by `delete` is not
  reused, so at most `capacity` items can ever be inserted.
- `BinarySearchTree.insert` returns `False` if the value was already present.
- `calculate` raises `ZeroDivisionError` for division by zero and `ValueError`
  for an unknown operator.
- Functions that use randomness take an optional `random.Random` so results
  can be reproduced.

## Command-line tools

Three commands are installed:

```
algobox-queue                 # menu-driven bounded queue (option: --capacity N, default 50)
algobox-bst                   # menu-driven binary search tree
algobox-hypotenuse 3 4        # prints "The hypotenuse is: 5.000000"
```

## What it does not do

The remaining routines — the calculator, the code breaker, die rolls, matrix
and text utilities — are library functions only; there is no command or
interactive game loop for them.