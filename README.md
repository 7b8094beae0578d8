# contestlib

A collection of classic algorithmic routines, each exposed as a plain Python
function or small class: range-query structures, string matching, subarray
searches, greedy selections, interval scheduling and tree algorithms.

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

- `contestlib.range_queries`: `FenwickTree` (1-based sums with `add`,
  `prefix_sum`, `range_sum`), `XorFenwickTree` (`prefix_xor`, `range_xor`),
  `MinSegmentTree` and `DynamicRangeMin` (`update`, `query` on 0-based
  positions), and batch helpers `range_xor_queries`,
  `static_range_min_queries`, `static_range_sum_queries`,
  `dynamic_range_min_queries`, `dynamic_range_sum_queries`.
- `contestlib.strings`: `prefix_function`, `z_function`, `find_borders`,
  `find_periods`, `count_occurrences` and a `Trie` with `insert` and `count`.
- `contestlib.subarrays`: `max_subarray_sum`, `max_subarray_sum_bounded`,
  `count_divisible_subarrays`, `count_subarrays_with_sum`, `min_max_division`.
- `contestlib.greedy`: `count_apartment_matches`, `min_gondolas`,
  `smallest_missing_sum`, `min_stick_cost`, `max_task_reward`, `max_movies`,
  `count_distinct`.
- `contestlib.intervals`: `max_customers`, `allocate_rooms`,
  `max_movies_with_members`, `longest_gaps`, `buy_tickets`.
- `contestlib.sequences`: `longest_unique_run`, `count_towers`.
- `contestlib.arrays`: `count_collecting_rounds`, `nearest_smaller_positions`.
- `contestlib.sums`: `two_values`, `three_values`, `four_values`; each returns
  a tuple of 1-based positions, or `None` when no such positions exist.
- `contestlib.tree_basics`: `find_centroid`, `subordinate_counts`,
  `tree_diameter`, `max_matching`, `distinct_color_counts`.
- `contestlib.lca`: `LcaLift` (binary lifting on 0-based nodes, with
  `add_edge`, `attach`, `build`, `parent`, `ancestor`, `lca`, `distance`) and
  the 1-based helpers `boss_queries`, `common_boss_queries`, `counting_paths`,
  `distance_queries`.
- `contestlib.tree_distances`: `max_distances`, `distance_sums`,
  `distance_sums_rerooted`.
- `contestlib.euler_tour`: `path_queries`, `subtree_queries`, taking
  `(1, node, value)` updates and `(2, node)` questions.

Tree helpers take nodes `1..n` with `n - 1` undirected edges and raise
`ValueError` when the edges do not form a connected tree.

## Example

```python
from contestlib.range_queries import FenwickTree
from contestlib.strings import find_borders
from contestlib.greedy import min_gondolas

tree = FenwickTree(5)
tree.add(2, 10)
tree.add(4, 7)
print(tree.range_sum(2, 4))        # 17

print(find_borders("abcababcab"))  # [2, 5]

print(min_gondolas([7, 2, 3, 9], 10))  # 3
```

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or print answers; callers pass Python
sequences to the functions and receive the results as return values.