"""
tictac - Tic-tac-toe engine for square boards of any size.

Board evaluation for any grid size and run length, plus a computer
opponent at four difficulties: random, win-or-block, depth-limited
minimax and full minimax with alpha-beta pruning.
"""

from .game import (
    EMPTY,
    X,
    O,
    Outcome,
    evaluate,
    winning_line,
    is_terminal,
    legal_moves,
    apply_move,
    side_to_move,
    new_board,
    opponent,
    format_board,
)
from .config import Difficulty, GameConfig, Mode
from .minimax import AlphaBeta, find_best_move, placed
from .selector import Strategy, select_move, effective_difficulty, HARD_DEPTH
from .symmetries import apply_symmetry_board, get_all_symmetries, canonical_board, symmetry_maps
from .session import GameSession, IllegalMoveError
from .eval import (
    engine_player,
    random_player,
    play_game,
    eval_matchup,
    eval_vs_random,
    eval_self_play,
    eval_exhaustive,
    iter_opponent_lines,
)

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "Outcome",
    "evaluate",
    "winning_line",
    "is_terminal",
    "legal_moves",
    "apply_move",
    "side_to_move",
    "new_board",
    "opponent",
    "format_board",
    "Difficulty",
    "GameConfig",
    "Mode",
    "AlphaBeta",
    "find_best_move",
    "placed",
    "Strategy",
    "select_move",
    "effective_difficulty",
    "HARD_DEPTH",
    "apply_symmetry_board",
    "get_all_symmetries",
    "canonical_board",
    "symmetry_maps",
    "GameSession",
    "IllegalMoveError",
    "engine_player",
    "random_player",
    "play_game",
    "eval_matchup",
    "eval_vs_random",
    "eval_self_play",
    "eval_exhaustive",
    "iter_opponent_lines",
]
