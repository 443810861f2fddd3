"""
Game session: one live game plus the settings a front end needs.

Wraps a GameState with the local two-player / versus-AI mode and the AI's
difficulty. Rendering, input and sound are left to the caller, which reacts
to the MoveOutcome each command returns.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional
import logging
import random

from .core.board import Side, Square
from .core.moves import Move
from .core.state import GameState, MoveOutcome
from .ai.search import Difficulty, SearchConfig, choose_move

logger = logging.getLogger(__name__)


class Game:
    """Represents an active game session."""

    def __init__(
        self,
        vs_ai: bool = False,
        ai_side: Side = Side.B,
        config: Optional[SearchConfig] = None,
        seed: Optional[int] = None
    ):
        self.state = GameState.new_game()
        self.vs_ai = vs_ai
        self.ai_side = ai_side
        self.config = config or SearchConfig()
        self.rng = random.Random(seed)

    @property
    def is_ai_turn(self) -> bool:
        return (
            self.vs_ai
            and not self.state.is_terminal()
            and self.state.current_player == self.ai_side
        )

    def legal_moves_for(self, sq: Square) -> list[Move]:
        """Legal moves from sq, with forced capture applied."""
        return self.state.moves_for_square(sq)

    def legal_moves(self) -> list[Move]:
        return self.state.legal_moves()

    def select(self, sq: Square) -> bool:
        """Select a piece for the human side. Ignored on the AI's turn."""
        if self.is_ai_turn:
            return False
        return self.state.select(sq)

    def move_to(self, target: Square) -> Optional[MoveOutcome]:
        """Move the selected piece to target. Ignored on the AI's turn."""
        if self.is_ai_turn:
            return None
        return self.state.move_to(target)

    def ai_move(
        self,
        difficulty: Optional[Difficulty] = None,
        side: Optional[Side] = None
    ) -> Optional[MoveOutcome]:
        """
        Play one automated move for the side to move.

        During a jump continuation only the continuing piece is considered,
        so call again while outcome.must_continue is set. Returns None when
        no move is available; the caller should then run
        state.check_game_state().
        """
        if self.state.is_terminal():
            return None
        mover = self.state.current_player
        if side is not None and side != mover:
            logger.debug(f"Side {side.name} asked to move on side {mover.name}'s turn")
            return None

        config = self.config
        if difficulty is not None:
            config = replace(config, difficulty=Difficulty(difficulty))

        move = choose_move(
            self.state.board, mover, config, self.rng, self.state.legal_moves()
        )
        if move is None:
            logger.info(f"No move available for side {mover.name}")
            return None
        return self.state.play(move)

    def set_mode(self, vs_ai: bool) -> None:
        """Switch between local two-player and versus AI. Restarts the game."""
        self.vs_ai = vs_ai
        logger.info(f"Mode: {'vs AI' if vs_ai else 'local two-player'}")
        self.reset()

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.config = replace(self.config, difficulty=Difficulty(difficulty))

    def reset(self) -> None:
        self.state.reset()
