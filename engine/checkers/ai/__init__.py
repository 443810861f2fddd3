"""AI components: static evaluation and alpha-beta search."""

from .evaluator import evaluate
from .search import AlphaBetaSearch, Difficulty, SearchConfig, SearchResult, choose_move
