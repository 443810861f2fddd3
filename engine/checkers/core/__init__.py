"""Core game logic: board, move generation, execution and game state."""

from .board import Board, Cell, Side
from .moves import Move, MoveGenerator
from .executor import MoveResult, apply_move
from .state import GameState, MoveOutcome, Phase
