# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies.

## What is inside

- `dsakit.recursion` – `fibonacci`, `factorial`, `binary_strings` (a generator
  of every bit string of length *n*), `hanoi_moves` (a generator of
  `(disk, from_peg, to_peg)` moves), `is_increasing`, `is_decreasing`,
  `describe_order` and `count_queens` (N-Queens solutions, 8 by default).
- `dsakit.searching` – `linear_search` (index of the last occurrence, or
  `None`), `sentinel_search` (index of the first occurrence, or `None`),
  `rotated_minimum`, `can_ship` and `min_ship_capacity`,
  `min_subarray_length`, `has_pair_sum` for ascending sequences and
  `zero_sum_triples`.
- `dsakit.sorting` – `bubble_sort`, `selection_sort`, `insertion_sort`,
  `shaker_sort`, `shell_sort`, `heap_sort`, `merge_sort`, `quick_sort`,
  `counting_sort`, `radix_sort` and `flash_sort`. Each returns a new sorted
  list. `sort_by_name` picks an algorithm by a name such as `"quick-sort"`,
  and `benchmark` returns a `BenchmarkResult` with the sorted values, the
  number of comparisons and the elapsed milliseconds. Counting and radix
  sort raise `ValueError` on negative values; an unknown name raises
  `ValueError`.
- `dsakit.datagen` – `random_data`, `sorted_data`, `reverse_data`,
  `nearly_sorted_data` (ascending with ten random swaps), `generate` by
  `DataKind`, and `write_data`.
- `dsakit.linked_list` – `SinglyLinkedList` with head and tail references:
  add/remove at either end, by position (`insert_at`, `remove_at`) or next to
  a value (`add_before`, `add_after`, `remove_before`, `remove_after`),
  `reverse`, `remove_duplicates` and `remove_value`.
- `dsakit.doubly_linked_list` – `DoublyLinkedList` with the same operations
  plus `search`, `remove_key` (first match) and `remove_all` (every match).
- `dsakit.containers` – `LinkedQueue` and `LinkedStack`, and
  `run_queue_script` / `run_stack_script`, which replay command tokens and
  return the rendered state after each command.
- `dsakit.company_lookup` – `Company` records and `CompanyTable`, a chained
  hash table of 2000 buckets keyed by `hash_name`; `read_companies` reads a
  `name|tax code|address` file with a header line.
- `dsakit.binary_tree` – `TreeNode` and the traversals `in_order`,
  `pre_order`, `post_order`, `level_order`, plus `count_nodes`, `sum_nodes`,
  `tree_height`, `node_height`, `node_level` and `count_leaves`.
- `dsakit.bst` – `BinarySearchTree` (equal keys go right) with `insert`,
  `search`, `remove`, `clear`, `height`, `count_less`, `count_greater`, and
  the checks `is_bst` and `is_full`.
- `dsakit.avl` – `AVLTree` of distinct keys with `insert`, `remove`,
  `is_balanced`, and `is_avl`.
- `dsakit.graph` – adjacency matrix functions: `read_matrix_as_lists`,
  `read_lists_as_matrix`, `is_directed`, `count_vertices`, `count_edges`,
  `isolated_vertices`, `is_complete`, `is_bipartite`,
  `is_complete_bipartite`, `to_undirected`, `complement`, `euler_cycle`,
  `dfs_spanning_tree`, `bfs_spanning_tree`, `is_connected`, `dijkstra` and
  `bellman_ford`.

## Installation

```
pip install .
```

## Library use

```python
from dsakit.sorting import sort_by_name, benchmark
from dsakit.searching import has_pair_sum
from dsakit.recursion import count_queens

print(sort_by_name("heap-sort", [5, 3, 9, 1]))   # [1, 3, 5, 9]
print(has_pair_sum([1, 2, 4, 7, 11], 15))        # True
print(count_queens(8))                           # 92
print(benchmark("quick-sort", [3, 1, 2]).comparisons)
```

## Command-line tools

Sort the whitespace-separated integers of one file into another. Reading
stops at the first token that is not an integer; an empty input is an error.
Algorithm names are `bubble-sort`, `selection-sort`, `insertion-sort`,
`shaker-sort`, `shell-sort`, `heap-sort`, `merge-sort`, `quick-sort`,
`counting-sort`, `radix-sort` and `flash-sort`:

```
dsakit-sort -a merge-sort -i input.txt -o output.txt
```

Look up companies by name. The first file is a `name|tax code|address` list
with a header line, the second holds one name per line; each line of the
third gets the matching record or `Not found`:

```
dsakit-company companies.txt names.txt results.txt
```

Generate test data for the sorting tool. The kind is `0` (random), `1`
(ascending), `2` (descending) or `3` (nearly sorted); if it is left out, it
is asked for on standard input:

```
dsakit-datagen 3 --size 500000 --output input.txt
```

Replay an `init` / `enqueue <n>` / `dequeue` script against the queue, or an
`init` / `push <n>` / `pop` script against the stack, writing one line of
state per command (`EMPTY` for an empty container):

```
dsakit-containers queue --input input.txt --output output.txt
dsakit-containers stack --input input.txt --output output.txt
```

## What it does not do

There are no commands for the list, tree or graph modules; they are used as
a library only. The sort tool does not count comparisons or time the run;
use `dsakit.sorting.benchmark` for that.

## Running the tests

```
pip install ".[test]"
pytest
```