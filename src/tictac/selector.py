"""
Computer move selection.

Each difficulty maps to one Strategy. Medium, hard and unbeatable are only
defined for the classic 3x3 three-in-a-row game; any other board is played
at easy. That downgrade is deliberate and exposed via effective_difficulty()
so a front end can tell the player.
"""

import logging
import random
from enum import Enum
from typing import Callable, Dict, List, Optional

from .config import Difficulty, GameConfig
from .game import evaluate, legal_moves, opponent, Outcome
from .minimax import AlphaBeta, placed

logger = logging.getLogger(__name__)

# Plies searched below the root move by "hard"
HARD_DEPTH = 4


class Strategy(Enum):
    RANDOM = "random"
    WIN_OR_BLOCK = "win_or_block"
    DEPTH_LIMITED = "depth_limited"
    FULL_SEARCH = "full_search"


DIFFICULTY_STRATEGY = {
    Difficulty.EASY: Strategy.RANDOM,
    Difficulty.MEDIUM: Strategy.WIN_OR_BLOCK,
    Difficulty.HARD: Strategy.DEPTH_LIMITED,
    Difficulty.UNBEATABLE: Strategy.FULL_SEARCH,
}


def effective_difficulty(config: GameConfig) -> Difficulty:
    """Difficulty actually played for `config` (EASY off the classic board)."""
    if config.is_classic:
        return config.difficulty
    return Difficulty.EASY


def random_move(board: List[int], config: GameConfig, rng=None) -> Optional[int]:
    """Uniform choice among empty cells."""
    moves = legal_moves(board)
    if not moves:
        return None
    return (rng or random).choice(moves)


def _completing_move(board: List[int], config: GameConfig, mark: int) -> Optional[int]:
    """First empty cell (by index) that wins immediately for `mark`."""
    target = Outcome.for_mark(mark)
    for action in legal_moves(board):
        with placed(board, action, mark):
            if evaluate(board, config.grid_size, config.win_length) is target:
                return action
    return None


def win_or_block_move(board: List[int], config: GameConfig, rng=None) -> Optional[int]:
    """Take a one-move win, else block the opponent's, else play randomly."""
    move = _completing_move(board, config, config.computer)
    if move is None:
        move = _completing_move(board, config, opponent(config.computer))
    if move is None:
        move = random_move(board, config, rng)
    return move


def _search_move(board: List[int], config: GameConfig, rng, max_depth: Optional[int]) -> Optional[int]:
    searcher = AlphaBeta(config.computer, config.grid_size, config.win_length, max_depth)
    move = searcher.best_move(board)
    if move is None:
        return random_move(board, config, rng)
    return move


def depth_limited_move(board: List[int], config: GameConfig, rng=None) -> Optional[int]:
    return _search_move(board, config, rng, HARD_DEPTH)


def full_search_move(board: List[int], config: GameConfig, rng=None) -> Optional[int]:
    return _search_move(board, config, rng, None)


STRATEGIES: Dict[Strategy, Callable[..., Optional[int]]] = {
    Strategy.RANDOM: random_move,
    Strategy.WIN_OR_BLOCK: win_or_block_move,
    Strategy.DEPTH_LIMITED: depth_limited_move,
    Strategy.FULL_SEARCH: full_search_move,
}


def select_move(board: List[int], config: GameConfig, rng=None) -> Optional[int]:
    """
    Choose the computer's next move.

    Args:
        board: Current board; left unchanged on return.
        config: Game settings (difficulty, geometry, computer mark).
        rng: Object with a `choice` method; the `random` module by default.

    Returns:
        Index of an empty cell, or None if the board is full.
    """
    if not legal_moves(board):
        return None

    difficulty = effective_difficulty(config)
    if difficulty is not config.difficulty:
        logger.info(
            "%s is only available on 3x3 three-in-a-row; playing %s on %dx%d (win length %d)",
            config.difficulty.value, difficulty.value,
            config.grid_size, config.grid_size, config.win_length,
        )

    strategy = DIFFICULTY_STRATEGY[difficulty]
    return STRATEGIES[strategy](board, config, rng)
