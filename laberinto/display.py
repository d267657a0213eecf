"""Terminal presentation and interactive input for maze boards."""

from __future__ import annotations

import re
import subprocess
import sys
from typing import Callable, Optional, TextIO

from laberinto.board import EXIT, PATH, Board, copy_board

PLAYER = "-"

_GLYPHS = {
    "#": "🟪",  # wall
    "*": "🔲",  # path
    "E": "⚫",  # entrance
    "S": "🏁",  # exit
    PLAYER: "👤",  # player
    "+": "🔳",  # solution route
}
_BLANK = "  "

_MOVES = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

InputFunc = Callable[[], str]


def render_board(board: Board) -> str:
    """Return the board drawn with one glyph per cell, one line per row."""
    return "".join(
        "".join(_GLYPHS.get(cell, _BLANK) for cell in row) + "\n" for row in board
    )


def print_board(board: Board, out: Optional[TextIO] = None) -> None:
    """Write the rendered board to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(render_board(board))
    stream.flush()


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    if sys.platform.startswith("win"):
        subprocess.run("cls", shell=True, check=False)
        return
    try:
        subprocess.run(["clear"], check=False)
    except FileNotFoundError:
        pass


def _print_with_player(board: Board, x: int, y: int, out: TextIO) -> None:
    shown = copy_board(board)
    shown[x][y] = PLAYER
    print_board(shown, out)


def explore_manual(
    board: Board,
    input_func: Optional[InputFunc] = None,
    out: Optional[TextIO] = None,
) -> bool:
    """Let the player walk the maze from (1, 1) with W/A/S/D, Q to quit.

    Every non-blank character typed counts as one key. Returns True when the
    exit was reached, False when the player quit (or input ran out).
    """
    read = input_func if input_func is not None else input
    stream = out if out is not None else sys.stdout
    pending: list[str] = []

    def next_key() -> str:
        while not pending:
            line = read()
            pending.extend(ch for ch in line if not ch.isspace())
        return pending.pop(0)

    def pause() -> None:
        pending.clear()
        try:
            read()
        except EOFError:
            pass

    rows = len(board)
    cols = len(board[0]) if rows else 0
    x, y = 1, 1

    print("\n=== EXPLORACIÓN MANUAL ===", file=stream)
    print("Controles: W(arriba) S(abajo) A(izquierda) D(derecha) Q(salir)", file=stream)
    print("Objetivo: Llegar a la bandera 🏁\n", file=stream)

    while True:
        clear_screen()
        print("=== EXPLORACIÓN MANUAL ===", file=stream)
        print("Controles: WASD para mover, Q para salir", file=stream)
        print(f"Posición actual: ({x}, {y})\n", file=stream)
        _print_with_player(board, x, y, stream)

        stream.write("\n Tu movimiento: ")
        stream.flush()
        try:
            key = next_key()
        except EOFError:
            key = "q"
        quitting = key in ("q", "Q")

        dx, dy = _MOVES.get(key.lower(), (0, 0))
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols and board[nx][ny] in (PATH, EXIT):
            x, y = nx, ny
        elif not quitting:
            stream.write("No podés moverte ahí. Presiona Enter...")
            stream.flush()
            pause()

        if board[x][y] == EXIT:
            clear_screen()
            _print_with_player(board, x, y, stream)
            print("\n FELICITACIONES! ¡Encontraste la salida manualmente!", file=stream)
            print(" Sos todo un explorador de laberintos.", file=stream)
            stream.write("Presiona Enter para continuar con la resolución automática...")
            stream.flush()
            pause()
            return True

        if quitting:
            break

    print("\nSaliste de la exploración manual.", file=stream)
    return False


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def read_int_in_range(
    message: str,
    minimum: int,
    maximum: int,
    input_func: Optional[InputFunc] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt until a line starting with an integer in [minimum, maximum] is read.

    Raises EOFError if input runs out.
    """
    read = input_func if input_func is not None else input
    stream = out if out is not None else sys.stdout
    while True:
        stream.write(message)
        stream.flush()
        value = _leading_int(read())
        if value is not None and minimum <= value <= maximum:
            return value
        print(
            f"Entrada inválida. Ingresá un número entre {minimum} y {maximum}.",
            file=stream,
        )


def read_option_01(
    message: str,
    input_func: Optional[InputFunc] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt until the answer starts with 0 or 1 and return it.

    Raises EOFError if input runs out.
    """
    read = input_func if input_func is not None else input
    stream = out if out is not None else sys.stdout
    while True:
        stream.write(message)
        stream.flush()
        value = _leading_int(read())
        if value in (0, 1):
            return value
        print("Entrada inválida. Ingresá 0 o 1.", file=stream)