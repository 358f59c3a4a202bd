# contestkit

A library of solved competitive-programming problems. Each one is a plain
Python function or class that takes ordinary values and returns the answer.

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

- `contestkit.modmath`: fast modular exponentiation (`mod_pow`), towers
  `a^(b^c)` modulo 1e9+7 (`tower_power`), divisor-sum totals
  (`sum_of_divisor_sums`, `divisor_sum_of_power`), sums of permutation orders
  (`exercise_sum`) and rhyme-scheme poem counting (`count_poems`).
- `contestkit.divisibility`: gcd and divisor problems: `boundary_divisors`,
  `max_common_divisor`, `fizzbuzz_parameters`, `gcd_of_pairwise_lcms`,
  `coprime_product_subset`, `max_gcds_by_length`,
  `lexicographically_largest_array`.
- `contestkit.counting`: coin change counts (`count_ordered_coin_ways`,
  `count_coin_combinations`), the `SubsetSumCounter` class with `add`,
  `remove` and `ways`, `process_subset_sum_queries`, inversion array counts
  (`inversion_array_counts`, `count_inversion_arrays`) and
  `count_team_divisions`.
- `contestkit.knapsack`: `bounded_knapsack`, `cloud_profit`,
  `best_talent_ratio`, `max_roundness`, `broadband_cost`.
- `contestkit.contests`: `advancing_teams`, `swerc_beauty`,
  `arrange_bottles`, `cornhusker_yield`.
- `contestkit.graphs`: the `DisjointSets` union-find, `make_cool` and
  `eta_graph`.
- `contestkit.search`: `apply_operation` and `cheapest_escape`, a
  breadth-first search over arithmetic operations.
- `contestkit.constructions`: `median_partition`, `count_removals`,
  `mod_sequence`, `circuit_range`.
- `contestkit.islands`: `memories_consistent`.
- `contestkit.strings`: `reduce_weasel`, `weasels_equivalent`,
  `even_substring_witness`, `center_sign`, `can_replace`.
- `contestkit.geometry`: `triangle_diagonals`.
- `contestkit.sequences`: `pivots`, `minimum_difference`, `trinity_moves`,
  `max_wins`, `duel_outcomes`, `max_ice_cream_customers`, `best_rating`.

## Example

```python
from contestkit.counting import count_coin_combinations
from contestkit.modmath import mod_pow
from contestkit.strings import weasels_equivalent

count_coin_combinations([2, 3, 5], 9)   # distinct coin multisets summing to 9
mod_pow(3, 200, 1_000_000_007)
weasels_equivalent("ABAB", "")          # True
```

Where a problem has no answer, the function returns `None` or raises
`ValueError`, as its docstring says.

## What it does not do

contestkit is a library only. It has no command-line program and does not
read problem input from standard input or files, nor write answers in a
judge's output format; callers pass values in and format results
themselves. Interactive problems, which need a live exchange with a judge,
are not included.