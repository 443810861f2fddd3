"""Tests for the game state machine."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core.board import Board, Cell, Side
from checkers.core.moves import Move
from checkers.core.state import GameState, Phase


def multi_jump_state() -> GameState:
    """Side A man on (6,3) can jump (5,4) then (3,4); A also has a man on (7,0)."""
    board = Board.from_pieces({
        (6, 3): Cell.A_MAN, (7, 0): Cell.A_MAN,
        (5, 4): Cell.B_MAN, (3, 4): Cell.B_MAN,
    })
    return GameState(board=board)


class TestNewGame:
    def test_initial_values(self):
        state = GameState.new_game()
        assert state.board == Board.initial()
        assert state.current_player == Side.A
        assert state.phase == Phase.AWAITING_SELECTION
        assert not state.must_jump
        assert state.continuing_jump is None
        assert state.selected is None
        assert state.last_move is None
        assert state.winner is None
        assert not state.is_terminal()

    def test_must_jump_computed_for_custom_board(self):
        assert multi_jump_state().must_jump


class TestQueries:
    def test_moves_for_square(self):
        state = GameState.new_game()
        assert state.moves_for_square((5, 0)) == [Move((5, 0), (4, 1))]

    def test_moves_for_empty_or_invalid_square(self):
        state = GameState.new_game()
        assert state.moves_for_square((4, 1)) == []
        assert state.moves_for_square((9, 9)) == []

    def test_moves_for_opponent_square(self):
        state = GameState.new_game()
        assert state.moves_for_square((2, 1)) == []

    def test_forced_capture_filters_square_moves(self):
        board = Board.from_pieces({
            (5, 2): Cell.A_MAN, (4, 3): Cell.B_MAN, (5, 6): Cell.A_MAN,
        })
        state = GameState(board=board)
        assert state.moves_for_square((5, 2)) == [Move((5, 2), (3, 4), jump=True)]
        assert state.moves_for_square((5, 6)) == []


class TestSelection:
    def test_select_own_piece(self):
        state = GameState.new_game()
        assert state.select((5, 0))
        assert state.selected == (5, 0)
        assert state.phase == Phase.PIECE_SELECTED

    @pytest.mark.parametrize("sq", [(2, 1), (4, 1), (-1, 0), (8, 8)])
    def test_invalid_selection_is_noop(self, sq):
        state = GameState.new_game()
        assert not state.select(sq)
        assert state.selected is None
        assert state.phase == Phase.AWAITING_SELECTION

    def test_forced_capture_restricts_selection(self):
        board = Board.from_pieces({
            (5, 2): Cell.A_MAN, (4, 3): Cell.B_MAN, (5, 6): Cell.A_MAN,
        })
        state = GameState(board=board)
        assert not state.can_select((5, 6))
        assert state.can_select((5, 2))

    def test_invalid_target_clears_selection(self):
        state = GameState.new_game()
        state.select((5, 0))
        assert state.move_to((3, 2)) is None
        assert state.selected is None
        assert state.phase == Phase.AWAITING_SELECTION
        assert state.board == Board.initial()

    def test_move_without_selection(self):
        state = GameState.new_game()
        assert state.move_to((4, 1)) is None
        assert state.current_player == Side.A


class TestSimpleMove:
    def test_start_move_passes_turn(self):
        state = GameState.new_game()
        assert state.select((5, 0))
        outcome = state.move_to((4, 1))

        assert outcome is not None
        assert outcome.move == Move((5, 0), (4, 1))
        assert not outcome.captured
        assert not outcome.promoted
        assert outcome.turn_passed
        assert outcome.current_player == Side.B
        assert not outcome.game_over

        assert state.current_player == Side.B
        assert state.board[4, 1] == Cell.A_MAN
        assert state.last_move == Move((5, 0), (4, 1))
        assert state.selected is None
        assert state.phase == Phase.AWAITING_SELECTION

    def test_play_direct(self):
        state = GameState.new_game()
        outcome = state.play(Move((5, 2), (4, 3)))
        assert outcome.turn_passed
        assert state.current_player == Side.B

    def test_play_illegal_is_ignored(self):
        state = GameState.new_game()
        assert state.play(Move((2, 1), (3, 0))) is None  # side B piece
        assert state.play(Move((6, 1), (5, 0))) is None  # occupied target
        assert state.board == Board.initial()
        assert state.current_player == Side.A
        assert state.last_move is None

    def test_forced_capture_for_next_side(self):
        state = GameState.new_game()
        state.play(Move((5, 2), (4, 3)))
        state.play(Move((2, 5), (3, 4)))
        # A's man on (4,3) can now jump (3,4) into the vacated (2,5)
        assert state.must_jump
        assert all(m.jump for m in state.legal_moves())


class TestMultiJump:
    def test_continuation_keeps_turn(self):
        state = multi_jump_state()
        assert state.select((6, 3))
        outcome = state.move_to((4, 5))

        assert outcome.captured
        assert not outcome.turn_passed
        assert outcome.must_continue == (4, 5)
        assert outcome.current_player == Side.A
        assert state.phase == Phase.MUST_CONTINUE_JUMP
        assert state.continuing_jump == (4, 5)
        assert state.selected == (4, 5)
        assert state.board[5, 4] == Cell.EMPTY

    def test_only_continuing_piece_may_move(self):
        state = multi_jump_state()
        state.play(Move((6, 3), (4, 5), jump=True))

        assert not state.can_select((7, 0))
        assert not state.select((7, 0))
        assert state.can_select((4, 5))
        assert state.legal_moves() == [Move((4, 5), (2, 3), jump=True)]
        # The step from the continuing piece is not allowed either
        assert state.play(Move((4, 5), (3, 6))) is None

    def test_invalid_target_keeps_continuation(self):
        state = multi_jump_state()
        state.play(Move((6, 3), (4, 5), jump=True))
        assert state.move_to((3, 6)) is None
        assert state.continuing_jump == (4, 5)
        assert state.selected == (4, 5)
        assert state.phase == Phase.MUST_CONTINUE_JUMP

    def test_chain_completes_and_wins(self):
        state = multi_jump_state()
        state.play(Move((6, 3), (4, 5), jump=True))
        outcome = state.move_to((2, 3))

        assert outcome.captured
        assert outcome.turn_passed
        assert outcome.must_continue is None
        assert outcome.game_over
        assert outcome.winner == Side.A
        assert state.phase == Phase.GAME_OVER
        assert state.continuing_jump is None

    def test_promotion_ends_chain(self):
        # Crowned on (0,3), a king could jump (1,4) next, but the turn ends
        board = Board.from_pieces({
            (2, 1): Cell.A_MAN, (1, 2): Cell.B_MAN, (1, 4): Cell.B_MAN,
        })
        state = GameState(board=board)
        outcome = state.play(Move((2, 1), (0, 3), jump=True))

        assert outcome.captured
        assert outcome.promoted
        assert outcome.turn_passed
        assert outcome.must_continue is None
        assert state.current_player == Side.B
        assert state.board[0, 3] == Cell.A_KING
        assert state.phase == Phase.AWAITING_SELECTION


class TestReset:
    def test_reset_restores_start(self):
        state = multi_jump_state()
        state.play(Move((6, 3), (4, 5), jump=True))
        state.reset()
        assert state == GameState.new_game()

    def test_reset_after_game_over(self):
        state = multi_jump_state()
        state.play(Move((6, 3), (4, 5), jump=True))
        state.play(Move((4, 5), (2, 3), jump=True))
        assert state.is_terminal()
        state.reset()
        assert not state.is_terminal()
        assert state.board == Board.initial()
        assert state.winner is None
