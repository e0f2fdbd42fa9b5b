# aoc2023

A collection of puzzle solvers. Each puzzle has its own module. Every solver
takes the puzzle input as a sequence of lines (strings without trailing
newlines) and returns an integer answer.

## Usage

```python
from pathlib import Path

from aoc2023.day01 import trebuchet_part1, trebuchet_part2

lines = Path("input.txt").read_text().splitlines()
print(trebuchet_part1(lines))
print(trebuchet_part2(lines))
```

## Modules

| Module  | Puzzle | Public names |
|---------|--------|--------------|
| `day01` | Two-digit calibration values from noisy lines, with digits optionally spelled out | `trebuchet_part1`, `trebuchet_part2` |
| `day02` | Cube draws checked against 12 red, 13 green and 14 blue cubes; power of the minimal cube set | `cube_conundrum_part1`, `cube_conundrum_part2`, `cube_conundrum_part1_parallel`, `cube_conundrum_part2_parallel` |
| `day10` | Loop of pipes through the start tile `S`; farthest point and enclosed tiles | `Direction`, `pipe_maze_part1`, `pipe_maze_part2`, `render` |
| `day11` | Galaxy distances in a universe whose empty rows and columns grow | `cosmic_expansion_part1`, `cosmic_expansion_part2`, `expanded_distance_sum` |
| `day12` | Spring arrangements matching records of damaged groups | `count_arrangements`, `hot_springs_part1`, `hot_springs_part2` |
| `day13` | Mirror lines in patterns of ash and rocks, with and without one smudge | `split_patterns`, `columns_equal`, `point_of_incidence_part1`, `point_of_incidence_part2` |
| `day14` | Rolling round rocks on a tilted platform and the load on its beams | `Direction`, `column_load`, `total_load`, `tilt`, `tilt_cycle`, `parabolic_reflector_dish_part1`, `parabolic_reflector_dish_part2` |
| `day15` | The holiday hash and a lens-box initialisation sequence | `holiday_hash`, `lens_library_part1`, `lens_library_part2` |
| `day16` | Light beams through mirrors and splitters | `Heading`, `energized`, `floor_will_be_lava_part1`, `floor_will_be_lava_part2` |
| `day17` | Least heat loss on a path with limits on straight runs | `minimal_heat_loss`, `clumsy_crucible_part1`, `clumsy_crucible_part2` |
| `day18` | Area of a lagoon dug along a trench plan | `shoelace`, `lavaduct_lagoon_part1`, `lavaduct_lagoon_part2` |
| `day19` | Machine parts sorted through workflows of rating conditions | `Condition`, `Workflow`, `parse_workflows`, `parse_parts`, `aplenty_part1`, `aplenty_part2` |

## Helpers

Some functions are useful on their own:

```python
from aoc2023.day10 import render
from aoc2023.day11 import expanded_distance_sum
from aoc2023.day12 import count_arrangements
from aoc2023.day14 import Direction, tilt
from aoc2023.day15 import holiday_hash
from aoc2023.day17 import minimal_heat_loss

holiday_hash("HASH")                       # 52
count_arrangements("???.###", [1, 1, 3])   # 1
expanded_distance_sum(lines, 10)           # each empty row and column ten times as wide
tilt(Direction.NORTH, grid)                # a new grid with the rocks rolled north
minimal_heat_loss(lines, 4, 10)            # runs of four to ten blocks before a turn
print(render(maze_lines))                  # the loop drawn with box-drawing characters
```

`day19.parse_workflows` returns a dictionary of `Workflow` objects keyed by
name; `Workflow.route(part)` gives the name of the next workflow (or `"A"` /
`"R"`) for a part given as a dictionary of ratings such as
`{"x": 787, "m": 2655, "a": 1222, "s": 2876}`.

The parallel variants in `day02` take an optional `workers` count (by default
the number of CPUs), split the games between that many threads and return the
same answers as their sequential counterparts. A `workers` value below 1
raises `ValueError`.

## Errors

Malformed input raises `ValueError` where a solver can detect it: a maze with
no start tile or no pipe connected to it (`day10`), a lens step with neither
`=` nor `-` (`day15`), a grid with no allowed path to the goal (`day17`), and an
unknown dig direction (`day18`).

## What the package does not do

There is no command-line program and no input handling: the package neither
reads puzzle files nor prints answers. Load the lines yourself and call the
functions.

## Tests

The tests live in `tests/` and use pytest, which the `test` extra installs.