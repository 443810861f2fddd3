"""Tests for the terminal client helpers."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.play import parse_user_move, show_legal_moves, print_board, describe
from checkers.core.board import Board, Cell, Side
from checkers.core.moves import Move
from checkers.core.state import GameState


class TestParseUserMove:
    def test_commands(self):
        state = GameState.new_game()
        assert parse_user_move(state, 'q') == 'quit'
        assert parse_user_move(state, 'HELP') == 'help'
        assert parse_user_move(state, ' m ') == 'show_moves'
        assert parse_user_move(state, 'r') == 'reset'

    def test_legal_move(self):
        state = GameState.new_game()
        assert parse_user_move(state, 'a3-b4') == Move((5, 0), (4, 1))

    def test_illegal_move(self, capsys):
        state = GameState.new_game()
        assert parse_user_move(state, 'b6-a5') is None
        assert "Illegal move" in capsys.readouterr().out

    def test_bad_format(self, capsys):
        state = GameState.new_game()
        assert parse_user_move(state, 'hello') is None
        assert "Invalid format" in capsys.readouterr().out

    def test_forced_capture_hint(self, capsys):
        board = Board.from_pieces({
            (5, 2): Cell.A_MAN, (4, 3): Cell.B_MAN, (5, 6): Cell.A_MAN,
        })
        state = GameState(board=board)
        assert parse_user_move(state, 'g3-h4') is None
        assert "must be taken" in capsys.readouterr().out
        assert parse_user_move(state, 'c3xe5') == Move((5, 2), (3, 4), jump=True)


class TestOutput:
    def test_show_legal_moves(self, capsys):
        show_legal_moves(GameState.new_game())
        out = capsys.readouterr().out
        assert out.startswith("Moves:")
        assert "a3-b4" in out

    def test_show_captures(self, capsys):
        board = Board.from_pieces({(5, 2): Cell.A_MAN, (4, 3): Cell.B_MAN})
        show_legal_moves(GameState(board=board))
        assert capsys.readouterr().out.startswith("Captures: c3xe5")

    def test_no_legal_moves(self, capsys):
        board = Board.from_pieces({(2, 1): Cell.B_MAN})
        show_legal_moves(GameState(board=board, current_player=Side.A))
        assert "No legal moves" in capsys.readouterr().out

    def test_print_board(self, capsys):
        state = GameState.new_game()
        print_board(state, state.legal_moves())
        out = capsys.readouterr().out
        assert "a b c d e f g h" in out
        assert "8 |" in out

    def test_describe(self):
        board = Board.from_pieces({(2, 1): Cell.A_MAN, (1, 2): Cell.B_MAN, (1, 4): Cell.B_MAN})
        state = GameState(board=board)
        outcome = state.play(Move((2, 1), (0, 3), jump=True))
        assert describe(outcome) == "b6xd8 (crowned)"
