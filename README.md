# adventsolver

Solvers for a set of daily programming puzzles. Each day has two parts; every
solver takes the puzzle input as text and returns a single answer.

Days covered: 2, 3, 4, 5, 6, 7, 8, 9, 18, 19 and 20.

| Day | Module              | Puzzle                  |
|-----|---------------------|-------------------------|
| 2   | `adventsolver.day02` | Red-Nosed Reports       |
| 3   | `adventsolver.day03` | Mull It Over            |
| 4   | `adventsolver.day04` | Ceres Search            |
| 5   | `adventsolver.day05` | Print Queue             |
| 6   | `adventsolver.day06` | Guard Gallivant         |
| 7   | `adventsolver.day07` | Bridge Repair           |
| 8   | `adventsolver.day08` | Resonant Collinearity   |
| 9   | `adventsolver.day09` | Disk Fragmenter         |
| 18  | `adventsolver.day18` | RAM Run                 |
| 19  | `adventsolver.day19` | Linen Layout            |
| 20  | `adventsolver.day20` | Race Condition          |

## Installation

    pip install .

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Command line

    adventsolver DAY PART INPUT_FILE

`PART` is `1` or `2`. For example, to solve part 2 of day 7 with the input in
`input.txt`:

    adventsolver 7 2 input.txt

The answer is printed on its own line and the exit status is 0. If the file
cannot be opened, `Failed to open file` is printed and the exit status is 1.
An unknown day, or input that cannot be parsed or solved, prints an
`error: ...` message to standard error and exits with status 1. A part other
than 1 or 2 is rejected by the argument parser.

The command always uses the default parameters described below (a 71×71 grid
and 1024 bytes for day 18, a minimum saving of 100 for day 20).

## Library use

Every day lives in its own module with `part1(text)` and `part2(text)`
functions that take the puzzle input as a string:

```python
from adventsolver import day02

with open("input.txt", encoding="utf-8") as handle:
    print(day02.part1(handle.read()))
```

Malformed input raises `ValueError`.

The lower-level helpers are public as well, for example
`day02.is_safe(levels)`, `day05.fix_order(update, rules)`,
`day07.can_solve(equation, allow_concat)`,
`day19.count_arrangements(design, towels)` or
`day18.shortest_path(blocked, size)`.

Some days take extra parameters so that the smaller examples from the puzzle
statements can be solved too:

- `day18.part1(text, size=71, count=1024)` returns the fewest steps to the
  exit; `day18.part2(text, size=71)` returns the coordinates of the first byte
  that cuts off the exit as an `"x,y"` string.
- `day20.part1(text, min_saving=100)` and `day20.part2(text, min_saving=100)`
  take the smallest saving that counts as a worthwhile cheat.

To dispatch by number, use `adventsolver.cli.solve(day, part, text)`; it
raises `ValueError` for an unknown day or a part other than 1 or 2.

## What it does not do

The package only solves inputs it is given: it does not download puzzle
inputs or submit answers, and it has no solvers for days other than those
listed above.

## Running the tests

    pip install .[test]
    pytest