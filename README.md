# algokit

A collection of classic algorithmic problems solved as plain Python functions
and small data structures. Every function takes ordinary Python values (lists,
tuples, strings, integers) and returns its answer instead of printing it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.graphs`: problems on undirected graphs with vertices numbered from 1:
  `is_cthulhu`, `lexicographic_wander`, `colorful_path_counts`, `count_trees`,
  `building_roads`, `building_teams`, `message_route`, `round_trip`,
  `complement_components` and `musketeers_min_recognition`. `building_teams`,
  `message_route` and `round_trip` raise `ImpossibleError` when there is no
  valid answer; a vertex outside `1..n` raises `ValueError`.
- `algokit.grids`: `fillomino`, `labyrinth_path` (returns a `U`/`L`/`R`/`D`
  string, or `None` when `B` cannot be reached), `set_construction`,
  `two_buttons`, `bear_blocks` and `interleaved_route_cost`.
- `algokit.fenwick`: binary indexed trees. `FenwickTree` (with
  `FenwickTree.from_values`) handles point updates and prefix or range sums;
  `RangeUpdatePointQuery` and `RangeUpdateRangeSum` handle range additions.
  `count_inversions`, `count_inversions_naive` and `count_inverse_triples` count
  inverted pairs and triples.
- `algokit.segment_trees`: `SumSegmentTree`, `MinIndexSegmentTree`,
  `MaxPairSegmentTree` and `BracketSegmentTree` for range queries.
- `algokit.number_theory`: `primes_up_to`, `factorize`, `legendre`,
  `max_factorial_power`, `count_special_divisors`, `divisible_queries`,
  `mul_mod`, `fibonacci_mod`, `can_equalize_bids`, `max_gcd_after_reduction`
  and `min_upload_time`.
- `algokit.collections_problems`: problems solved with sets, maps, heaps and
  stacks, such as `train_queries`, `can_equate_multisets`,
  `digital_logarithm_ops`, `longest_strike`, `word_game_scores`,
  `even_positions_cost` and `highway_exits`.
- `algokit.two_pointers`: sliding windows such as
  `shortest_ternary_substring`, `max_books`, `count_three_part_splits` and
  `min_road`.
- `algokit.pair_sums`: the 2-sum, 3-sum and 4-sum family:
  `closest_pair_sum`, `has_triplet_family`, `has_triplet_sum`,
  `zero_sum_triplets`, `count_quadruplets`, `count_less_or_equal` and
  `closest_pair_across`.

## Example

```python
from algokit.fenwick import FenwickTree, count_inversions
from algokit.graphs import message_route
from algokit.segment_trees import BracketSegmentTree

tree = FenwickTree.from_values([1, 2, 3, 4, 5])
tree.range_sum(2, 4)            # 9

count_inversions([3, 1, 2])     # 2

message_route(5, [(1, 2), (2, 3), (1, 4), (4, 5)])   # [1, 4, 5]

brackets = BracketSegmentTree("(())((())()())(")
brackets.longest_balanced(1, 13)   # 12
```

## Conventions

Tree structures and graph vertices are 1-based and ranges are inclusive on both
ends, as in the problem statements. Ranges outside the structure raise
`IndexError`; a range whose left end is past its right end raises `ValueError`.
Functions whose problem may have no answer return `None` where documented
(for example `labyrinth_path`, `musketeers_min_recognition`, `longest_strike`,
`diverse_matrix`, `min_road`).

## What it does not do

There is no command-line program and no reading of problem input from files or
standard input: callers pass already-parsed values to the functions and format
the results themselves.