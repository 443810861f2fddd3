"""
Move execution: turns a board and a move into the next board.

Boards are immutable, so the pre-move board stays valid for sibling
branches in the search.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .board import Board, Cell, Side, PROMOTION_ROW, cell_side, is_king, king_of
from .moves import Move


@dataclass(frozen=True)
class MoveResult:
    """Outcome of applying a single move."""
    board: Board
    move: Move
    captured: bool
    promoted: bool


def apply_move(board: Board, move: Move, side: Optional[Side] = None) -> MoveResult:
    """
    Apply move to board and return the resulting position.

    The moving side is taken from the piece on move.src; passing side only
    cross-checks it. A man landing on its farthest row is crowned in the same
    call. Kings are never re-crowned.
    """
    piece = board[move.src]
    owner = cell_side(piece)
    if owner is None:
        raise ValueError(f"No piece on {move.src}")
    if side is not None and owner != side:
        raise ValueError(f"Piece on {move.src} belongs to side {owner.name}, not {side.name}")

    promoted = not is_king(piece) and move.dst[0] == PROMOTION_ROW[owner]

    updates = {
        move.src: Cell.EMPTY,
        move.dst: king_of(owner) if promoted else piece,
    }
    if move.jump:
        updates[move.captured] = Cell.EMPTY

    return MoveResult(
        board=board.with_cells(updates),
        move=move,
        captured=move.jump,
        promoted=promoted,
    )
