"""Maze boards: creation, random generation, coverage and solving."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

Board = List[List[str]]

WALL = "#"
PATH = "*"
ENTRANCE = "E"
EXIT = "S"
SOLUTION = "+"
VISITED = "x"

# Up, down, left, right.
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_JUMPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


@dataclass(frozen=True)
class Coordinate:
    """A cell position: ``x`` is the row, ``y`` the column."""

    x: int
    y: int


def create_board(rows: int, cols: int) -> Board:
    """Return a ``rows`` x ``cols`` board made entirely of walls."""
    if rows < 1 or cols < 1:
        raise ValueError(f"board size must be positive, got {rows}x{cols}")
    return [[WALL] * cols for _ in range(rows)]


def copy_board(board: Board) -> Board:
    """Return an independent copy of ``board``."""
    return [list(row) for row in board]


def _size(board: Board) -> tuple[int, int]:
    rows = len(board)
    cols = len(board[0]) if rows else 0
    return rows, cols


def generate_maze(board: Board, rng: Optional[random.Random] = None) -> None:
    """Carve a maze into ``board`` in place with an iterative randomized DFS.

    Carving starts at (1, 1) and only visits cells whose coordinates are
    both odd, opening the wall between each cell and the neighbour chosen.
    """
    rows, cols = _size(board)
    if rows < 3 or cols < 3:
        raise ValueError(f"maze needs at least a 3x3 board, got {rows}x{cols}")
    chooser = rng if rng is not None else random.Random()

    start = Coordinate(1, 1)
    visited = {start}
    board[start.x][start.y] = PATH
    stack = [start]

    while stack:
        current = stack.pop()
        candidates = [
            (dx, dy)
            for dx, dy in _JUMPS
            if 0 < current.x + dx < rows - 1
            and 0 < current.y + dy < cols - 1
            and (current.x + dx) % 2 == 1
            and (current.y + dy) % 2 == 1
            and Coordinate(current.x + dx, current.y + dy) not in visited
        ]
        if not candidates:
            continue
        stack.append(current)
        dx, dy = candidates[chooser.randrange(len(candidates))]
        neighbour = Coordinate(current.x + dx, current.y + dy)
        visited.add(neighbour)
        board[neighbour.x][neighbour.y] = PATH
        board[current.x + dx // 2][current.y + dy // 2] = PATH
        stack.append(neighbour)


def coverage(board: Board) -> int:
    """Percentage (rounded down) of interior cells that are open path."""
    interior = [row[1:-1] for row in board[1:-1]]
    total = sum(len(row) for row in interior)
    if total <= 0:
        return 0
    open_cells = sum(
        1 for row in interior for cell in row if cell in (PATH, ENTRANCE, EXIT)
    )
    return open_cells * 100 // total


def _in_bounds(board: Board, x: int, y: int) -> bool:
    rows, cols = _size(board)
    return 0 <= x < rows and 0 <= y < cols


def can_solve(board: Board, x: int, y: int) -> bool:
    """Tell whether the exit is reachable from (x, y) through open cells.

    The board is left unchanged.
    """
    seen: set[tuple[int, int]] = set()
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not _in_bounds(board, cx, cy) or (cx, cy) in seen:
            continue
        cell = board[cx][cy]
        if cell == EXIT:
            return True
        if cell not in (PATH, ENTRANCE):
            continue
        seen.add((cx, cy))
        pending.extend((cx + dx, cy + dy) for dx, dy in reversed(_STEPS))
    return False


@dataclass
class _Frame:
    x: int
    y: int
    original: str
    steps: list = field(default_factory=lambda: list(_STEPS))


def solve_backtracking(
    board: Board,
    x: int,
    y: int,
    on_step: Optional[Callable[[Board], None]] = None,
) -> bool:
    """Search for the exit from (x, y) by depth-first backtracking.

    On success the route is left marked with ``+`` on ``board`` (the
    entrance keeps its mark); on failure the board is restored. ``on_step``,
    if given, is called with the board each time a cell is entered.
    """
    frames: list[_Frame] = []

    def enter(cx: int, cy: int) -> Optional[bool]:
        if not _in_bounds(board, cx, cy):
            return False
        cell = board[cx][cy]
        if cell == EXIT:
            return True
        if cell not in (PATH, ENTRANCE):
            return False
        if cell != ENTRANCE:
            board[cx][cy] = SOLUTION
        if on_step is not None:
            on_step(board)
        frames.append(_Frame(cx, cy, cell))
        return None

    outcome = enter(x, y)
    if outcome is not None:
        return outcome

    while frames:
        frame = frames[-1]
        if not frame.steps:
            frames.pop()
            if frame.original != ENTRANCE:
                board[frame.x][frame.y] = frame.original
            continue
        dx, dy = frame.steps.pop(0)
        if enter(frame.x + dx, frame.y + dy) is True:
            return True
    return False