import io
import subprocess
import sys

import pytest

from laberinto.board import copy_board
from laberinto.display import (
    clear_screen,
    explore_manual,
    print_board,
    read_int_in_range,
    read_option_01,
    render_board,
)


@pytest.fixture(autouse=True)
def run_calls(monkeypatch):
    calls = []

    def fake_run(*args, **kwargs):
        calls.append((args, kwargs))
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls


def feed(*lines):
    it = iter(lines)

    def read(*_):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def corridor():
    return [
        list("#####"),
        list("#E*S#"),
        list("#####"),
    ]


def test_render_board_glyphs():
    board = [["#", "*"], ["E", "S"]]
    assert render_board(board) == "🟪🔲\n⚫🏁\n"


def test_render_board_player_solution_and_unknown():
    board = [["-", "+", "?"]]
    assert render_board(board) == "👤🔳  \n"


def test_print_board_writes_render():
    board = corridor()
    out = io.StringIO()
    print_board(board, out)
    assert out.getvalue() == render_board(board)
    assert out.getvalue().count("\n") == len(board)


def test_clear_screen_posix(monkeypatch, run_calls):
    monkeypatch.setattr(sys, "platform", "linux")
    clear_screen()
    assert run_calls[-1][0] == (["clear"],)
    out = io.StringIO()
    result = explore_manual(corridor(), feed("q"), out)
    assert result is False
    assert len(run_calls) >= 2
    assert all(args == (["clear"],) for args, _ in run_calls)


def test_clear_screen_windows(monkeypatch, run_calls):
    monkeypatch.setattr(sys, "platform", "win32")
    clear_screen()
    args, kwargs = run_calls[-1]
    assert args == ("cls",)
    assert kwargs["shell"] is True
    out = io.StringIO()
    result = explore_manual(corridor(), feed("q"), out)
    assert result is False
    assert len(run_calls) >= 2
    assert all(
        call_args == ("cls",) and call_kwargs["shell"] is True
        for call_args, call_kwargs in run_calls
    )


def test_read_int_retries_until_valid():
    out = io.StringIO()
    value = read_int_in_range("n: ", 5, 99, feed("abc", "100", "42"), out)
    assert value == 42
    assert out.getvalue().count("Entrada inválida") == 2
    assert out.getvalue().count("n: ") == 3


def test_read_int_accepts_leading_number():
    assert read_int_in_range("n: ", 5, 99, feed(" 7xyz"), io.StringIO()) == 7


def test_read_int_bounds_inclusive():
    assert read_int_in_range("", 5, 99, feed("5"), io.StringIO()) == 5
    assert read_int_in_range("", 5, 99, feed("99"), io.StringIO()) == 99


def test_read_int_eof_raises():
    with pytest.raises(EOFError):
        read_int_in_range("n: ", 5, 99, feed("zzz"), io.StringIO())


def test_read_option_01():
    out = io.StringIO()
    assert read_option_01("? ", feed("2", "-1", "1"), out) == 1
    assert out.getvalue().count("Entrada inválida. Ingresá 0 o 1.") == 2
    assert read_option_01("? ", feed("0"), io.StringIO()) == 0


def test_explore_reaches_exit_and_leaves_board_unchanged():
    board = corridor()
    before = copy_board(board)
    out = io.StringIO()
    assert explore_manual(board, feed("dd", ""), out) is True
    assert "FELICITACIONES" in out.getvalue()
    assert board == before


def test_explore_keys_one_per_line():
    board = corridor()
    assert explore_manual(board, feed("d", "d", ""), io.StringIO()) is True


def test_explore_quit():
    out = io.StringIO()
    assert explore_manual(corridor(), feed("q"), out) is False
    assert "Saliste de la exploración manual." in out.getvalue()
    assert "No podés moverte" not in out.getvalue()


def test_explore_blocked_move_pauses():
    out = io.StringIO()
    assert explore_manual(corridor(), feed("w", "", "q"), out) is False
    assert out.getvalue().count("No podés moverte ahí") == 1


def test_explore_shows_player_position():
    out = io.StringIO()
    explore_manual(corridor(), feed("d", "q"), out)
    text = out.getvalue()
    assert "Posición actual: (1, 1)" in text
    assert "Posición actual: (1, 2)" in text
    assert "👤" in text


def test_explore_end_of_input_quits(run_calls):
    out = io.StringIO()
    assert explore_manual(corridor(), feed(), out) is False
    assert "Saliste" in out.getvalue()
    assert len(run_calls) >= 1