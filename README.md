# puzzlekit

This is a collection of small solutions to common coding-interview puzzles.
Each puzzle has its own module. Most are a single plain function, and one is
a small class. They take ordinary Python values and return ordinary Python
values. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Modules

| Module | Names | What it does |
| --- | --- | --- |
| `puzzlekit.binary_string` | `answer_requests(binary_string, requests)` | Answers `"count:<i>"` requests with the number of zeros at or before index `i`. After an odd number of `"flip"` requests it counts ones instead. Unknown requests raise `ValueError`. Out-of-range indices raise `IndexError`. |
| `puzzlekit.building_houses` | `longest_segments(queries)` | Builds a house at each queried position and returns the longest run of adjacent houses after each build. |
| `puzzlekit.competition` | `top_two_teams(wins, draws, scored, conceded)`, `TeamRecord` | Ranks teams by points, with 3 for a win and 1 for a draw, and then by goal difference. Returns the indices of the first and second teams. Teams that tie on both keep their original order. |
| `puzzlekit.docstring_transform` | `transform_docstring(docstring)`, `to_camel_case(word)`, `is_upper_word(word)` | Rewrites snake_case words inside backticks as camelCase. It leaves words made only of capitals and underscores unchanged. |
| `puzzlekit.interesting_word` | `count_interesting(words, n)`, `is_interesting(word, n)` | Finds words in which some letter repeats exactly `n` times in a row, with a different letter or the edge of the word on each side of the run. |
| `puzzlekit.memory_slots` | `process_requests(requests, total_slots)`, `CircularMemory` | Simulates store and free requests on a ring of memory slots. |
| `puzzlekit.pattern_matching` | `count_pattern_matches(numbers, pattern)` | Counts the windows of `len(pattern) + 1` numbers that follow a pattern of steps. In the pattern, `1` means rise or stay level, `0` means stay level, and `-1` means fall or stay level. |
| `puzzlekit.rearranging` | `interleave_ends(text)` | Reorders a string as first, last, second, second-last, and so on. |
| `puzzlekit.round_trip_flights` | `last_round_trip(a2b, b2a, trips)` | Returns the time you arrive back after the last of `trips` round trips. The two departure lists must be sorted, and each flight takes 100 time units. If a flight runs out, it raises `ValueError`. |
| `puzzlekit.visits` | `first_day_reaching(visits, target)` | Returns the first zero-based day on which the running total reaches `target`. If it never does, it returns `None`. |
| `puzzlekit.watering_plants` | `watering_steps(plants, capacity)` | Counts the steps needed to water plants at `x = 0, 1, ...` when the water source is at `x = -1`. A plant that needs more than `capacity` raises `ValueError`. |

## Examples

```python
from puzzlekit.binary_string import answer_requests
from puzzlekit.building_houses import longest_segments
from puzzlekit.competition import top_two_teams
from puzzlekit.docstring_transform import transform_docstring
from puzzlekit.interesting_word import count_interesting
from puzzlekit.memory_slots import process_requests
from puzzlekit.rearranging import interleave_ends
from puzzlekit.round_trip_flights import last_round_trip
from puzzlekit.visits import first_day_reaching
from puzzlekit.watering_plants import watering_steps

answer_requests("1111010", ["count:4", "count:6", "flip", "count:4", "flip", "count:2"])
# [1, 2, 4, 0]

longest_segments([1, 3, 5, 2, 4])
# [1, 1, 1, 3, 5]

top_two_teams([3, 1, 2, 2], [1, 5, 4, 4], [30, 10, 20, 40], [32, 13, 18, 37])
# [3, 2]

transform_docstring("Function `some_function` has `CONSTANT_VALUE`.")
# 'Function `someFunction` has `CONSTANT_VALUE`.'

count_interesting(["all", "cook", "llama"], 2)
# 3

process_requests([["store", "0", "6"], ["store", "0", "3"], ["free", "0", "3"]], 15)
# [0, 6, 3]

interleave_ends("abcde")
# 'aebdc'

last_round_trip([0, 200, 500], [99, 210, 450, 610], 2)
# 710

first_day_reaching([300, 200, 100, 200, 500], 700)
# 3

watering_steps([2, 4, 5, 1, 2, 6], 10)
# 20
```

`CircularMemory` handles one request at a time. `store` returns the index where
the block begins, or `None` if no place fits. `free` returns the number of slots
it released:

```python
from puzzlekit.memory_slots import CircularMemory

memory = CircularMemory(15)
memory.store(0, 6)   # 0
memory.store(0, 3)   # 6
memory.free(0, 3)    # 3
```

## What it does not do

puzzlekit is a library only. It has no command-line program and it does not
read input files. To run a puzzle, call its function from Python.

## Running the tests

```
pytest
```