# contestkit

Solutions to classic competitive-programming problems, written as ordinary
Python functions. Each function takes plain Python values (ints, strings,
lists, tuples) and returns its answer; invalid input raises `ValueError`.
A small DES-style block cipher over 64-bit integers is included too.

No third-party packages are needed at runtime.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
contestkit-des
contestkit-des --key 133457799BBCDFF1 --plaintext 0123456789ABCDEF
```

Encrypts one 64-bit block and prints `Ciphertext: <HEX>` in upper-case
hexadecimal. `--key` and `--plaintext` take hexadecimal values; without them
a built-in sample key and block are used.

## Modules

### `contestkit.des`

- `generate_round_keys(key)`: sixteen 48-bit round keys from a 64-bit key.
- `feistel(right, round_key)`: the round function on a 32-bit half block.
- `encrypt_block(plaintext, round_keys)`: encrypt one 64-bit block; exactly
  sixteen round keys are required.
- `main(argv=None)`: the `contestkit-des` command.

### `contestkit.number_theory`

`christmas_party` ((n - 1)! modulo 1e9+7), `max_common_divisor`,
`div_game_moves`, `make_it_round`, `plus_minus_score`,
`count_pythagorean_triples`, `product_of_three` (three distinct factors or
`None`), `min_packages`, `can_divide_and_equalize`, `max_coprime_index_sum`.

### `contestkit.binary_search`

Searches over a monotone condition: `min_largest_subarray_sum`,
`min_production_time`, `multiplication_table_median`, `max_aquarium_height`,
`min_set_or_decrease_steps`, `cardboard_width`, `sage_birthday` (returns the
count of cheap spheres and an arrangement), `iva_pav_queries` (1-based
`(l, k)` queries, `-1` where no range qualifies).

### `contestkit.interactive`

Problems solved by asking questions. Each takes an `ask` callable, so the
judge can be any ordinary function:

- `find_heavy_prefix(weights, ask)`: `ask(indices)` gives the measured total
  of 1-based piles; returns the first prefix length whose measurement differs
  from the expected weights, or `-1`.
- `guess_kth_zero(n, k, ask)`: `ask(l, r)` gives the number of ones in
  `[l, r]`.
- `recover_flamingoes(n, ask)`: `ask(l, r)` gives a range sum; recovers all
  `n` counts with `n` queries (`n` must be at least 3).

### `contestkit.scheduling`

`max_movies_watched`, `allocate_rooms` (room count and the room of each stay,
in order of stays sorted by departure then arrival), `stick_cost`,
`three_values_sum` (1-based positions or `None`), `count_towers`.

### `contestkit.strings`

`alternating_ops` (deletions and number of ways modulo 998244353),
`minimize_integer`, `make_simple`, `shortest_all_kinds`, `removal_cost`,
`valentine_winner` (`"Anna"` or `"Sasha"`).

### `contestkit.arrays`

`paint_array`, `max_quest_experience`, `scoring_lengths`, `count_ski_periods`,
`max_alternating_parity_sum`, `card_deck_positions`, `count_same_differences`,
`count_divisible_pairs`, `different_pairs`, `zero_remainder_moves`.

### `contestkit.greedy`

`max_candy_gift`, `can_finish_jobs`, `strong_vertices`,
`max_three_activities`, `can_equalize_mod10`, `min_block_deletions`,
`max_sum_after_negations`, `has_balanced_subarray`.

### `contestkit.counting`

`max_eaten_candies`, `count_dance_sets`, `longest_money_segment`,
`max_frogs_caught`, `count_inequality_pairs`, `min_dance_operations`,
`max_teleporters`, `can_build_by_subsequence_addition`,
`count_balanced_subtrees`, `maximal_and`, `sliding_window_medians`.

## Example

```python
from contestkit.scheduling import count_towers, stick_cost

count_towers([3, 8, 2, 1, 5])    # 2
stick_cost([2, 3, 1, 5, 2])      # 5
```

## What this package does not do

- The problem functions do not read contest input or print answers; there is
  no command that runs them on standard input.
- The cipher encrypts a single 64-bit block only. There is no decryption, no
  block chaining mode and no padding, and it is meant for study, not for
  protecting data.