"""
Static position evaluation.

Material plus a small positional bonus: pieces on the edge are worth a
little, pieces in the interior a little more since they have more room to
move. Runs at every leaf of the search, so it is a pair of table lookups
over the whole grid.
"""

from __future__ import annotations
import numpy as np

from ..core.board import Board, Cell, Side, ROWS, COLS

MAN_VALUE = 10
KING_VALUE = 30
EDGE_BONUS = 2
CENTER_BONUS = 5

# Indexed by Cell value, scored for side B
MATERIAL = np.zeros(len(Cell), dtype=np.int32)
MATERIAL[Cell.A_MAN] = -MAN_VALUE
MATERIAL[Cell.A_KING] = -KING_VALUE
MATERIAL[Cell.B_MAN] = MAN_VALUE
MATERIAL[Cell.B_KING] = KING_VALUE

OWNER_SIGN = np.sign(MATERIAL)

POSITION_BONUS = np.full((ROWS, COLS), CENTER_BONUS, dtype=np.int32)
POSITION_BONUS[0, :] = EDGE_BONUS
POSITION_BONUS[-1, :] = EDGE_BONUS
POSITION_BONUS[:, 0] = EDGE_BONUS
POSITION_BONUS[:, -1] = EDGE_BONUS


def evaluate(board: Board, side: Side = Side.B) -> int:
    """
    Score board from side's perspective (positive favours side).

    Scores for the two sides are exact negations of each other.
    """
    cells = board.cells
    score = int(MATERIAL[cells].sum() + (OWNER_SIGN[cells] * POSITION_BONUS).sum())
    return score if side == Side.B else -score
