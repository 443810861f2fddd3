"""
Game state machine for English draughts.

Tracks whose turn it is, forced capture, mid-turn jump continuation and the
end of the game. The board itself is an immutable value; the state swaps in
a new board after every move.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging

from .board import Board, Side, Square, cell_side, is_valid_sq
from .executor import MoveResult, apply_move
from .moves import Move, get_jump_moves, get_legal_moves, has_capture

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    AWAITING_SELECTION = "awaiting_selection"
    PIECE_SELECTED = "piece_selected"
    MUST_CONTINUE_JUMP = "must_continue_jump"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveOutcome:
    """
    What happened after a move, for the caller to react to.

    Attributes:
        move: The move that was played
        captured: Whether a piece was jumped
        promoted: Whether the moving man was crowned
        turn_passed: False while the same piece must keep jumping
        current_player: Side to move now
        must_continue: Square of the piece that must jump again, if any
        game_over: Whether the side to move has no legal moves
        winner: Winning side once the game is over
    """
    move: Move
    captured: bool
    promoted: bool
    turn_passed: bool
    current_player: Side
    must_continue: Optional[Square]
    game_over: bool
    winner: Optional[Side]


@dataclass
class GameState:
    """
    Represents the complete state of a draughts game.

    Attributes:
        board: Current position
        current_player: Side to move
        phase: Where the turn currently stands
        selected: Square of the selected piece
        continuing_jump: Square of the piece that must jump again this turn
        must_jump: Whether forced capture is active for the side to move
        last_move: Most recent move, kept for highlighting only
        winner: Set once the game is over
    """
    board: Board = field(default_factory=Board.initial)
    current_player: Side = Side.A
    phase: Phase = Phase.AWAITING_SELECTION
    selected: Optional[Square] = None
    continuing_jump: Optional[Square] = None
    must_jump: bool = False
    last_move: Optional[Move] = None
    winner: Optional[Side] = None

    def __post_init__(self):
        self.must_jump = has_capture(self.board, self.current_player)

    @classmethod
    def new_game(cls) -> GameState:
        """Create a new game in the starting position."""
        return cls()

    def reset(self) -> None:
        """Reinitialize board and state to their start values."""
        fresh = GameState.new_game()
        self.__dict__.update(fresh.__dict__)
        logger.info("Game reset")

    def is_terminal(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def get_winner(self) -> Optional[Side]:
        return self.winner

    def legal_moves(self) -> list[Move]:
        """
        Moves the side to move may play right now.

        During a jump continuation only the continuing piece's jumps count.
        """
        if self.phase == Phase.GAME_OVER:
            return []
        if self.continuing_jump is not None:
            return get_jump_moves(self.board, self.continuing_jump)
        return get_legal_moves(self.board, self.current_player)

    def moves_for_square(self, sq: Square) -> list[Move]:
        """Legal moves starting at sq; empty for empty or invalid squares."""
        return [m for m in self.legal_moves() if m.src == sq]

    def can_select(self, sq: Square) -> bool:
        """
        A square may be selected if it holds a piece of the side to move,
        matches the continuing piece (if any), and can jump when forced
        capture is active.
        """
        if self.phase == Phase.GAME_OVER:
            return False
        row, col = sq
        if not is_valid_sq(row, col):
            return False
        if cell_side(self.board[sq]) != self.current_player:
            return False
        if self.continuing_jump is not None:
            return sq == self.continuing_jump
        if self.must_jump:
            return bool(get_jump_moves(self.board, sq))
        return True

    def select(self, sq: Square) -> bool:
        """Select a piece. Disallowed selections are ignored."""
        if not self.can_select(sq):
            logger.debug(f"Ignoring selection of {sq}")
            return False
        self.selected = sq
        if self.continuing_jump is None:
            self.phase = Phase.PIECE_SELECTED
        return True

    def clear_selection(self) -> None:
        """Drop the current selection. A pending continuation stays selected."""
        if self.continuing_jump is not None or self.phase == Phase.GAME_OVER:
            return
        self.selected = None
        self.phase = Phase.AWAITING_SELECTION

    def move_to(self, target: Square) -> Optional[MoveOutcome]:
        """
        Move the selected piece to target.

        An invalid target drops the selection and returns None.
        """
        if self.selected is None or self.phase == Phase.GAME_OVER:
            return None
        for move in self.moves_for_square(self.selected):
            if move.dst == target:
                return self._execute(move)
        logger.debug(f"No legal move from {self.selected} to {target}")
        self.clear_selection()
        return None

    def play(self, move: Move) -> Optional[MoveOutcome]:
        """Play a move directly. Moves that are not legal now are ignored."""
        if move not in self.legal_moves():
            logger.debug(f"Ignoring illegal move {move}")
            return None
        return self._execute(move)

    def check_game_state(self) -> bool:
        """
        Recompute forced capture for the side to move and end the game if
        that side has no legal moves. Returns whether the game is over.
        """
        if self.phase == Phase.GAME_OVER:
            return True
        self.must_jump = has_capture(self.board, self.current_player)
        if not get_legal_moves(self.board, self.current_player):
            self.phase = Phase.GAME_OVER
            self.winner = self.current_player.opponent
            self.selected = None
            self.continuing_jump = None
            logger.info(f"Game over: side {self.winner.name} wins")
            return True
        return False

    def _execute(self, move: Move) -> MoveOutcome:
        result = apply_move(self.board, move, self.current_player)
        self.board = result.board
        self.last_move = move

        # Same piece must keep jumping unless the jump crowned it
        if result.captured and not result.promoted and get_jump_moves(self.board, move.dst):
            self.continuing_jump = move.dst
            self.selected = move.dst
            self.must_jump = True
            self.phase = Phase.MUST_CONTINUE_JUMP
            return self._outcome(result, turn_passed=False)

        self.continuing_jump = None
        self.selected = None
        self.phase = Phase.AWAITING_SELECTION
        self.current_player = self.current_player.opponent
        self.check_game_state()
        return self._outcome(result, turn_passed=True)

    def _outcome(self, result: MoveResult, turn_passed: bool) -> MoveOutcome:
        return MoveOutcome(
            move=result.move,
            captured=result.captured,
            promoted=result.promoted,
            turn_passed=turn_passed,
            current_player=self.current_player,
            must_continue=self.continuing_jump,
            game_over=self.is_terminal(),
            winner=self.winner,
        )

    def __repr__(self) -> str:
        lines = [repr(self.board)]
        if self.is_terminal():
            lines.append(f"\nGame over: side {self.winner.name} wins")
        else:
            lines.append(f"\nSide {self.current_player.name} to move")
        return "\n".join(lines)
