"""Command-line entry point: generate a maze, explore it and solve it."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Optional, Sequence

from laberinto.board import (
    ENTRANCE,
    EXIT,
    Board,
    can_solve,
    copy_board,
    coverage,
    create_board,
    generate_maze,
    solve_backtracking,
)
from laberinto.display import (
    clear_screen,
    explore_manual,
    print_board,
    read_int_in_range,
    read_option_01,
)

_STEP_DELAY = 0.1


def _show_step(board: Board) -> None:
    clear_screen()
    print("Resolviendo paso a paso...")
    print_board(board)
    time.sleep(_STEP_DELAY)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive maze program; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="laberinto",
        description="Generate a random maze, explore it by hand and solve it.",
    )
    parser.parse_args(argv)
    rng = random.Random()

    print("╔══════════════════════════════════════╗")
    print("║         EL LABERINTO MAESTRO         ║")
    print("╚══════════════════════════════════════╝\n")

    print(" CONFIGURACIÓN INICIAL:")
    rows = read_int_in_range("Tamaño del laberinto (5-99): ", 5, 99)
    if rows % 2 == 0:
        rows += 1
    cols = rows

    print(f"\nGenerando laberinto de {rows}x{cols}...")

    board = create_board(rows, cols)
    generate_maze(board, rng)
    board[1][1] = ENTRANCE
    board[rows - 2][cols - 2] = EXIT

    solvable = can_solve(board, 1, 1)
    percent = coverage(board)

    print("Laberinto generado exitosamente!")
    print(
        f"Estadísticas: Cobertura {percent}%, "
        f"{'resoluble' if solvable else 'verificando...'}"
    )

    print("\n═══  LABERINTO GENERADO ═══")
    print("⚫ = Entrada  🏁 = Salida  🟪 = Paredes  🔲 = Caminos\n")
    print_board(board)

    print("\n OPCIONES DE JUEGO:")
    explore = read_option_01(" ¿Explorar manualmente primero? [1] Sí  [0] No\n➤ ")
    visual = read_option_01(" ¿Ver resolución paso a paso? [1] Sí  [0] No\n➤ ")

    if explore:
        explore_manual(board)

    print("\n RESOLUCIÓN AUTOMÁTICA:")
    print(" Iniciando algoritmo de backtracking...")

    start = time.perf_counter()
    solution = copy_board(board)
    success = solve_backtracking(solution, 1, 1, _show_step if visual else None)
    elapsed = time.perf_counter() - start

    print("\n═══ RESULTADOS ═══")
    if success:
        print(" ¡Laberinto resuelto exitosamente!")
        print(f" Tiempo de resolución: {elapsed:.6f} segundos")
        if not visual:
            print("\n═══  SOLUCIÓN FINAL ═══")
            print("🔳 = Camino de la solución\n")
            print_board(solution)
    else:
        print("No se pudo resolver el laberinto.")

    print("\n╔══════════════════════════════════════╗")
    print("║     ¡Gracias por usar Laberinto      ║")
    print("║      Maestro! Presiona Enter...      ║")
    print("╚══════════════════════════════════════╝")
    sys.stdout.flush()
    try:
        input()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())