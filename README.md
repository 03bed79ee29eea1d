# aoc2015

Solutions to days 1 to 16 of the 2015 Advent of Code puzzles, as a small
Python package with no third-party dependencies. It also holds two
standalone hash helpers: a pure-Python MD5 (`aoc2015.md5`) and 64-bit
FNV-1a (`aoc2015.fnv1a`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each day has its own command. It takes the path to your puzzle input
and prints the answers to both parts:

```
aoc2015-day01 input/day01.txt
aoc2015-day07 input/day07.txt
aoc2015-day16 input/day16.txt
```

Commands `aoc2015-day01` through `aoc2015-day16` are all installed. A
missing or unreadable input file ends the command with an error message.

Day 15 has its ingredients built in, so it takes no input:

```
aoc2015-day15
```

## Library use

Every day module exposes the pieces its command is built from. Most of
them take the puzzle text as a string:

```python
from aoc2015.day01 import final_floor, first_basement

final_floor("(()")         # 1
first_basement("()())")    # 5
```

```python
from aoc2015.day11 import is_valid, next_password

is_valid("abcdffaa")       # True
next_password("abcdefgh")  # "abcdffaa"
```

```python
from aoc2015.day14 import Reindeer

Reindeer(14, 10, 127).distance(1000)  # 1120
```

Some days split parsing from solving: `day07.parse_circuit` and
`day07.evaluate` (with an `overrides` mapping to force wire signals),
`day09.parse_distances`, `day13.parse_happiness`, `day14.parse_reindeer`
and `day16.parse_sue`. Malformed input raises `ValueError`.

The hash helpers take bytes, or text that they encode as UTF-8:

```python
from aoc2015.md5 import Md5, md5
from aoc2015.fnv1a import fnv1a

h = Md5()
h.update(b"abc")
h.hexdigest()   # "900150983cd24fb0d6963f7d28e17f72"

md5(b"abc")     # the same digest as bytes
fnv1a(b"")      # 0xcbf29ce484222325
```

## Modules

| Module | Puzzle |
| --- | --- |
| `aoc2015.day01` | Not Quite Lisp |
| `aoc2015.day02` | I Was Told There Would Be No Math |
| `aoc2015.day03` | Perfectly Spherical Houses in a Vacuum |
| `aoc2015.day04` | The Ideal Stocking Stuffer |
| `aoc2015.day05` | Doesn't He Have Intern-Elves For This? |
| `aoc2015.day06` | Probably a Fire Hazard |
| `aoc2015.day07` | Some Assembly Required |
| `aoc2015.day08` | Matchsticks |
| `aoc2015.day09` | All in a Single Night |
| `aoc2015.day10` | Elves Look, Elves Say |
| `aoc2015.day11` | Corporate Policy |
| `aoc2015.day12` | JSAbacusFramework.io |
| `aoc2015.day13` | Knights of the Dinner Table |
| `aoc2015.day14` | Reindeer Olympics |
| `aoc2015.day15` | Science for Hungry People |
| `aoc2015.day16` | Aunt Sue |

## What it does not do

- Only days 1 to 16 are solved; there are no modules or commands for
  days 17 to 25.
- Puzzle inputs are not fetched; you supply each one as a file.
- Day 15 solves one fixed set of four ingredients and does not read
  ingredients from an input file.