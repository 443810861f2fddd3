"""
Move selection for the automated side.

Depth-limited minimax with alpha-beta pruning over the move generator,
executor and static evaluator, plus a random mover for the easy level.

Each simulated move is one elementary Move, so a multi-jump chain spans
several plies and the opponent gets a reply between its jumps.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from math import inf
from typing import Optional
import logging
import random
import time

from ..core.board import Board, Side
from ..core.executor import apply_move
from ..core.moves import Move, get_legal_moves
from .evaluator import evaluate

logger = logging.getLogger(__name__)

# Returned when a side has no legal moves inside the tree
WIN_SCORE = 1000

DEFAULT_DEPTH = 4


class Difficulty(str, Enum):
    EASY = "easy"  # uniform random among legal moves
    HARD = "hard"  # alpha-beta search


@dataclass
class SearchConfig:
    """Configuration for automated move selection."""
    difficulty: Difficulty = Difficulty.HARD
    depth: int = DEFAULT_DEPTH  # Plies searched, root move included
    win_score: int = WIN_SCORE


@dataclass
class SearchResult:
    """
    Result of a search.

    value is None when no search was needed (no moves, or a single move).
    """
    move: Optional[Move]
    value: Optional[float] = None
    nodes: int = 0
    time_ms: int = 0


class AlphaBetaSearch:
    """Minimax with alpha-beta pruning, scored from one side's perspective."""

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.nodes = 0

    def search(
        self,
        board: Board,
        side: Side,
        moves: Optional[list[Move]] = None
    ) -> SearchResult:
        """
        Pick the best move for side.

        Args:
            board: Position to search from (never modified)
            side: Side to move, which is also the maximizing side
            moves: Root candidates; defaults to all legal moves for side

        Ties keep the first move found.
        """
        start = time.monotonic()
        self.nodes = 0

        if moves is None:
            moves = get_legal_moves(board, side)
        if not moves:
            return SearchResult(move=None)
        if len(moves) == 1:
            return SearchResult(move=moves[0])

        best_move = None
        best_value = -inf
        for move in moves:
            child = apply_move(board, move, side).board
            value = self.minimax(child, self.config.depth - 1, -inf, inf, False, side)
            if value > best_value:
                best_value = value
                best_move = move

        result = SearchResult(
            move=best_move,
            value=best_value,
            nodes=self.nodes,
            time_ms=int((time.monotonic() - start) * 1000),
        )
        logger.debug(
            f"Search depth {self.config.depth} for side {side.name}: "
            f"{best_move} value={best_value} nodes={result.nodes} time={result.time_ms}ms"
        )
        return result

    def minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        side: Side
    ) -> float:
        """
        Value of board for side, searching depth more plies.

        The maximizing flag says whose turn it is in the tree: side when
        True, its opponent when False. A side with no legal moves loses on
        the spot regardless of remaining depth.
        """
        self.nodes += 1
        if depth <= 0:
            return evaluate(board, side)

        mover = side if maximizing else side.opponent
        moves = get_legal_moves(board, mover)
        if not moves:
            return -self.config.win_score if maximizing else self.config.win_score

        if maximizing:
            best = -inf
            for move in moves:
                child = apply_move(board, move, mover).board
                value = self.minimax(child, depth - 1, alpha, beta, False, side)
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return best

        best = inf
        for move in moves:
            child = apply_move(board, move, mover).board
            value = self.minimax(child, depth - 1, alpha, beta, True, side)
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
        return best


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    side: Side = Side.B
) -> float:
    """Alpha-beta value of board for side."""
    return AlphaBetaSearch().minimax(board, depth, alpha, beta, maximizing, side)


def best_move(
    board: Board,
    side: Side,
    depth: int = DEFAULT_DEPTH,
    moves: Optional[list[Move]] = None
) -> Optional[Move]:
    """Best move for side at the given depth, or None if side cannot move."""
    search = AlphaBetaSearch(SearchConfig(depth=depth))
    return search.search(board, side, moves).move


def random_move(
    board: Board,
    side: Side,
    rng: Optional[random.Random] = None,
    moves: Optional[list[Move]] = None
) -> Optional[Move]:
    """Uniformly random legal move, or None if side cannot move."""
    rng = rng or random
    if moves is None:
        moves = get_legal_moves(board, side)
    if not moves:
        return None
    return rng.choice(moves)


def choose_move(
    board: Board,
    side: Side,
    config: Optional[SearchConfig] = None,
    rng: Optional[random.Random] = None,
    moves: Optional[list[Move]] = None
) -> Optional[Move]:
    """
    Pick a move for side at the configured difficulty.

    Returns None when there is no legal move; the caller must treat that
    as a loss for side.
    """
    config = config or SearchConfig()
    if config.difficulty == Difficulty.EASY:
        return random_move(board, side, rng, moves)
    return AlphaBetaSearch(config).search(board, side, moves).move
