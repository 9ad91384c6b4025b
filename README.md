# algonotes

A small collection of classic algorithms, written as plain Python functions
with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]` and run `pytest`.

## Modules

### `algonotes.searching`

- `binary_search(values, target)`: first index of `target` in a sorted sequence, or `None`.
- `lower_bound(values, element)` / `upper_bound(values, element)`: index of the first value `>=` / `>` `element`, or `None` when there is none.
- `square_root(x, eps=1e-6)` and `nth_root(x, n, eps=1e-6)`: roots found by bisection; they raise `ValueError` for a negative `x`, a degree below 1 or a non-positive `eps`.
- `wood_cut(trees, height)` and `max_saw_height(trees, required)`: the lumberjack problem; the highest integer saw height that still yields at least `required` wood (0 if even ground level is not enough).
- `can_place_cows(positions, cows, min_dist)` and `largest_min_distance(positions, cows)`: the aggressive cows problem; `largest_min_distance` raises `ValueError` for fewer than two cows or more cows than stalls.

### `algonotes.bits`

- `bit_string(num, width=11)`, `is_bit_set`, `set_bit`, `unset_bit`, `toggle_bit`, `count_set_bits` (negative numbers are counted as 32-bit words), `is_odd`, `clear_low_bits`, `clear_high_bits`, `is_power_of_two`.
- `to_lowercase(ch)` / `to_uppercase(ch)`: change the case of an ASCII letter through bit 5; anything else raises `ValueError`.
- `odd_occurrence(values)`: the value occurring an odd number of times, found by XOR.
- `xor_swap(a, b)`: returns `(b, a)` using three XORs.
- `availability_mask(days)`, `common_days(mask_a, mask_b)` and `best_worker_pair(availabilities)`: days 1 to 30 as bitmasks; `best_worker_pair` returns the first `WorkerPair(first, second, days)` sharing the most days, or `None` if no pair shares a day.

### `algonotes.subsets`

- `subsets_recursive(nums)`: every subset by backtracking, empty subset first.
- `subsets_bitmask(nums)`: every subset, subset number `mask` holding element `i` when bit `i` is set.

### `algonotes.number_theory`

- `gcd(a, b)`: Euclid's algorithm.
- `power_mod_linear(a, b, modulus=MOD)`: `a ** b % modulus` by repeated multiplication.
- `bin_exp_recursive(a, b)`: exact `a ** b` by recursive squaring.
- `bin_exp_iterative(a, b, modulus=MOD)`: `a ** b % modulus` by iterative squaring.

`MOD` is `10**9 + 7`. A negative exponent or a modulus below 1 raises `ValueError`.

### `algonotes.graphs`

- `adjacency_list(n, edges)`: directed adjacency list over vertices `0..n`.
- `adjacency_matrix(n, edges)`: undirected 0/1 matrix over vertices `0..n`.
- `format_adjacency_list(adj)`: one line per vertex, such as `1-->{ 2,3, }`.
- `bfs(vertex_count, adjacency)`: breadth-first order of the vertices reachable from vertex 0.

Vertices out of range raise `ValueError`.

### `algonotes.contests`

- `latin_square(n)`: the cyclic Latin square with entries `(i + j) % n`.
- `subtraction_game_winner(n)`: `"Bob"` when `n` is a multiple of 4, else `"Alice"`.
- `can_win_tournament(strengths, j, k)`: whether player `j` (1-based) can remain among the last `k`.
- `survivors(values)`: a `"0"`/`"1"` string marking elements that are both a prefix minimum and a suffix maximum.
- `binary_string_game_winner(s, k)`: `"Alice"` or `"Bob"` for the binary string game.

### `algonotes.hero`

`Hero(name, health, level, password)` is a dataclass. `info()` returns
`"Name: ..., Health: ..., Level: ..."`. `store_balance(amount, password)` and
`balance_for(password)` write and read the balance, and raise
`WrongPasswordError` (a `PermissionError`) when the password is wrong.

```python
from algonotes.hero import Hero, WrongPasswordError

password = "password"
hero = Hero(name="Archer", health=70, level="A", password=password)
hero.store_balance(10000, password)
hero.balance_for(password)      # 10000
```

### `algonotes.lcs`

- `lcs_length`, `lcs_length_recursive`, `lcs_length_memoized`, `lcs_length_compact`: the length of a longest common subsequence, computed bottom-up, by plain recursion, with a memo, and with two rows.
- `lcs_table(x, y)`: the full table; `lcs_string(x, y)`: one longest common subsequence.
- `longest_common_substring(a, b)`: length of the longest shared contiguous run.
- `longest_palindromic_subsequence(s)` and `min_deletions_to_palindrome(s)`.
- `min_insertions_deletions(a, b)`: `(deletions, insertions)` to turn `a` into `b`.
- `shortest_common_supersequence(a, b)`: a shortest string containing both.
- `matrix_chain_cost(dims)`: fewest scalar multiplications for a matrix chain.

## Examples

```python
from algonotes.searching import lower_bound, max_saw_height
from algonotes.lcs import lcs_string, matrix_chain_cost
from algonotes.bits import odd_occurrence

lower_bound([1, 3, 5, 7], 4)           # 2
max_saw_height([20, 15, 10, 17], 7)    # 15
lcs_string("abcdgh", "abedfhr")        # "abdh"
matrix_chain_cost([2, 1, 3, 4])        # 20
odd_occurrence([2, 4, 6, 7, 7, 4, 2, 2, 2])  # 6
```

## What it does not do

The package is a library only: it installs no commands and reads no input
from the terminal or from files. Every function takes its data as arguments
and returns its result; printing is left to the caller.