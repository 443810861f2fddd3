"""
Move generation for English draughts.

Handles simple diagonal steps and single jumps, with the forced-capture rule
applied across all of a side's pieces.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .board import (
    Board, Cell, Side, Square, FORWARD,
    cell_side, is_king, is_valid_sq, sq_to_algebraic, algebraic_to_sq
)

KING_DIRS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


@dataclass(frozen=True)
class Move:
    """
    One elementary transition: a step, or a single jump.

    A multi-jump is a sequence of Moves, each applied to the board the
    previous one produced.
    """
    src: Square
    dst: Square
    jump: bool = False

    @property
    def captured(self) -> Optional[Square]:
        """Square of the jumped piece (the midpoint), or None for a step."""
        if not self.jump:
            return None
        return (self.src[0] + self.dst[0]) // 2, (self.src[1] + self.dst[1]) // 2

    def __str__(self) -> str:
        return move_to_algebraic(self)


def move_to_algebraic(move: Move) -> str:
    """Convert move to notation: 'a3-b4' for steps, 'c3xe5' for jumps."""
    sep = 'x' if move.jump else '-'
    return f"{sq_to_algebraic(move.src)}{sep}{sq_to_algebraic(move.dst)}"


def algebraic_to_move(s: str) -> Move:
    """Parse 'a3-b4' or 'c3xe5'. The jump flag comes from the distance."""
    text = s.strip().lower()
    for sep in ('-', 'x'):
        parts = text.split(sep)
        if len(parts) == 2:
            break
    else:
        raise ValueError(f"Invalid move format: {s}")
    src = algebraic_to_sq(parts[0])
    dst = algebraic_to_sq(parts[1])
    dr, dc = dst[0] - src[0], dst[1] - src[1]
    if abs(dr) != abs(dc) or abs(dr) not in (1, 2):
        raise ValueError(f"Not a diagonal step or jump: {s}")
    return Move(src, dst, jump=abs(dr) == 2)


def piece_directions(cell: Cell) -> list[tuple[int, int]]:
    """Directions a piece may travel: two forward for a man, four for a king."""
    side = cell_side(cell)
    if side is None:
        return []
    if is_king(cell):
        return KING_DIRS
    forward = FORWARD[side]
    return [(forward, -1), (forward, 1)]


class MoveGenerator:
    """Generates legal moves for a board position."""

    @staticmethod
    def get_elementary_moves(board: Board, sq: Square) -> list[Move]:
        """
        All steps and single jumps for the piece on sq, ignoring the
        forced-capture rule.

        Empty or off-board squares yield no moves.
        """
        row, col = sq
        if not is_valid_sq(row, col):
            return []
        piece = board[sq]
        side = cell_side(piece)
        if side is None:
            return []

        moves = []
        for dr, dc in piece_directions(piece):
            nr, nc = row + dr, col + dc
            if not is_valid_sq(nr, nc):
                continue
            adjacent = board[nr, nc]
            if adjacent == Cell.EMPTY:
                moves.append(Move(sq, (nr, nc)))
                continue

            # Opposing piece with an empty landing square beyond it
            jr, jc = row + 2 * dr, col + 2 * dc
            if (
                is_valid_sq(jr, jc)
                and cell_side(adjacent) == side.opponent
                and board[jr, jc] == Cell.EMPTY
            ):
                moves.append(Move(sq, (jr, jc), jump=True))

        return moves

    @staticmethod
    def get_jump_moves(board: Board, sq: Square) -> list[Move]:
        """Jumps only, for the piece on sq."""
        return [m for m in MoveGenerator.get_elementary_moves(board, sq) if m.jump]

    @staticmethod
    def has_capture(board: Board, side: Side) -> bool:
        """Check if any of side's pieces has a jump (forced capture active)."""
        return any(
            MoveGenerator.get_jump_moves(board, sq) for sq in board.pieces(side)
        )

    @staticmethod
    def get_legal_moves(board: Board, side: Side) -> list[Move]:
        """
        Get all legal moves for side.

        Rules:
        1. Men step or jump diagonally forward, kings in all four directions
        2. If any piece of side can jump, only jumps are legal
        """
        moves = []
        for sq in board.pieces(side):
            moves.extend(MoveGenerator.get_elementary_moves(board, sq))

        if any(m.jump for m in moves):
            return [m for m in moves if m.jump]
        return moves


# Convenience functions
def get_elementary_moves(board: Board, sq: Square) -> list[Move]:
    """Steps and single jumps for the piece on sq."""
    return MoveGenerator.get_elementary_moves(board, sq)


def get_jump_moves(board: Board, sq: Square) -> list[Move]:
    return MoveGenerator.get_jump_moves(board, sq)


def get_legal_moves(board: Board, side: Side) -> list[Move]:
    """Get all legal moves for side, forced capture applied."""
    return MoveGenerator.get_legal_moves(board, side)


def has_capture(board: Board, side: Side) -> bool:
    return MoveGenerator.has_capture(board, side)


def is_legal_move(board: Board, side: Side, move: Move) -> bool:
    """Check if a move is legal."""
    return move in MoveGenerator.get_legal_moves(board, side)


def get_move_count(board: Board, side: Side) -> int:
    """Get number of legal moves."""
    return len(MoveGenerator.get_legal_moves(board, side))
