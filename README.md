# advent24

Solvers for the first fourteen days of the 2024 advent puzzles. Each day is
a module with a parser for the puzzle input and the functions that compute
the answers, and one command runs any day against an input file.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `advent24` command takes a day number from 1 to 14 and, optionally,
the path of that day's puzzle input:

```
advent24 1 --input input.txt
```

Without `-i`/`--input` the input is read from `day<N>/input.txt` in the
current directory. The command prints `Day <N>`, the time the solvers took,
and then one labelled answer per line, for example `part 1: 11`. It exits
with status 1, with a message on standard error, when the input file cannot
be read or the input is rejected.

What each day prints:

- days 1 to 10, 12 and 13: `part 1` and `part 2`
- day 11: `score`, the number of stones after 75 blinks
- day 13: `part 2` moves every prize by 10000000000000 on both axes
- day 14: `part 1`, the safety factor after 100 seconds on a 101 by 103
  floor, and `tree`, the first second at which the robots cluster

## Library

Every day module takes the input as lines of text. For example, day 1:

```python
from advent24.common import read_lines
from advent24.day1 import parse_lists, total_distance, similarity_score

left, right = parse_lists(read_lines("input.txt"))
print(total_distance(left, right))
print(similarity_score(left, right))
```

`advent24.common` also holds `Position`, a frozen point with `x` and `y`
that supports `+` and `-`, and `timer(name)`, a context manager that prints
how long its block took.

The other days:

- `advent24.day2`: `parse_reports`, `is_safe`, `is_safe_dampened`,
  `count_safe`, `count_safe_dampened`
- `advent24.day3`: `parse_memory`, `sum_multiplications`,
  `sum_enabled_multiplications` (both raise `ValueError` when the memory
  holds no instruction at all)
- `advent24.day4`: `parse_grid`, `count_xmas`, `count_x_mas`
- `advent24.day5`: `parse_rules`, `is_correct`, `middle_page`, `fix_update`,
  `sum_correct_middles`, `sum_fixed_middles`
- `advent24.day6`: `Direction`, `parse_map`, `find_guard`, `step`, `walk`,
  `count_visited`, `count_loop_obstacles`
- `advent24.day7`: `parse_equations`, `operator_combinations`,
  `can_evaluate`, `calibration_total`, with the operator sets
  `BASIC_OPERATORS` (`+`, `*`) and `ALL_OPERATORS` (adding `|`,
  concatenation)
- `advent24.day8`: `parse_grid`, `antenna_positions`, `count_antinodes`,
  `count_harmonic_antinodes`
- `advent24.day9`: `parse_disk_map`, `expand_layout`, `compact_blocks`,
  `block_checksum`, `compact_files`, `file_checksum`
- `advent24.day10`: `parse_topo`, `trailhead_score`, `trailhead_rating`
- `advent24.day11`: `parse_stones`, `blink`, `count_stones(stones, blinks)`
- `advent24.day12`: `parse_garden`, `regions`, `fence_price`,
  `bulk_fence_price`
- `advent24.day13`: `ClawMachine`, `parse_machines`,
  `cheapest_win(machine, offset=0)` (returns `None` when the prize cannot
  be won), `total_tokens(machines, offset=0)`
- `advent24.day14`: `Robot`, `parse_robots`, `move_robot`, `safety_factor`,
  `find_tree`, `render_frame`, `write_frames`, and the default floor size
  `SPACE`

`advent24.cli.solve(day, lines)` runs one day's solvers on lines already
read into memory and returns a list of `(label, answer)` pairs; it raises
`ValueError` for a day that has no solver.

## Drawing the robots

`advent24.day14.render_frame(robots, space, second)` returns a PNG image of
the floor, white robots on black, and
`write_frames(robots, space, directory, start=434, count=1)` writes
`frame_<second>.png` files into a directory and returns their paths. These
are library functions only: the command does not write any images.

## What it does not do

The package does not fetch puzzle inputs or submit answers; it only reads
input files that are already on disk. There are no solvers beyond day 14.