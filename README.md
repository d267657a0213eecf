# laberinto

A small terminal maze game. The game's prompts and messages are in Spanish.

The game creates a random square maze with an iterative randomized depth-first
search. It reports how much of the interior is carved and whether the exit can
be reached from the entrance. You can then walk the maze yourself with the
keyboard. After that, a backtracking solver looks for the path. You can watch
it redraw the board at every step, or see only the finished route.

## Installation

```
pip install .
```

## Playing

```
laberinto
```

The command accepts only `-h`/`--help`. Everything else is asked for
interactively:

1. **Maze size**: a whole number from 5 to 99. An even number is raised to the
   next odd one. The maze is always square.
2. **Manual exploration**: `1` to walk the maze yourself, `0` to skip.
3. **Step-by-step solving**: `1` to watch the solver, with a 0.1 s pause per
   step, or `0` to see only the final path and the time it took.

During manual exploration, `W`, `A`, `S` and `D` move you up, left, down and
right, and `Q` quits. Upper and lower case both work. Every non-blank
character you type counts as one key. A move into a wall prints a notice and
waits for Enter. You start at the entrance ⚫ in the top-left corner. The goal
is the flag 🏁 in the bottom-right corner. The screen is cleared between
moves.

Legend:

| Symbol | Meaning       |
|--------|---------------|
| 🟪     | wall          |
| 🔲     | corridor      |
| ⚫     | entrance      |
| 🏁     | exit          |
| 👤     | player        |
| 🔳     | solution path |

## Using it as a library

A board is a list of rows, and each row is a list of one-character strings:
`#` wall, `*` path, `E` entrance, `S` exit, `+` solution route.

- `laberinto.board`
  - `create_board(rows, cols)` gives a board made only of walls.
  - `copy_board(board)` returns an independent copy.
  - `generate_maze(board, rng)` carves the board in place from (1, 1).
    `rng` is an optional `random.Random`.
  - `coverage(board)` gives the percentage of open interior cells.
  - `can_solve(board, x, y)` and `solve_backtracking(board, x, y, on_step)`
    search for the exit. `solve_backtracking` leaves the route marked with
    `+` when it succeeds.
  - `Coordinate` is a frozen (row, column) pair.
- `laberinto.display`
  - `render_board` and `print_board` draw a board with the glyphs above.
  - `clear_screen` clears the terminal.
  - `explore_manual` runs the keyboard walk.
  - `read_int_in_range` and `read_option_01` are the prompts.
  - The interactive functions take an `input_func` and an `out` stream, so
    you can drive them without a terminal.

```python
import random

from laberinto.board import create_board, generate_maze, can_solve, coverage, solve_backtracking
from laberinto.display import render_board

board = create_board(21, 21)
generate_maze(board, random.Random(42))
board[1][1] = "E"
board[19][19] = "S"

print(coverage(board), "% carved")
print(can_solve(board, 1, 1))
if solve_backtracking(board, 1, 1, None):
    print(render_board(board))
```

## What it does not do

- It does not save or load mazes.
- It does not keep scores.
- It does not take any settings from the command line. Size and modes are
  only asked for interactively.

## Running the tests

```
pip install .[test]
pytest
```