"""
Minimax search with alpha-beta pruning.

The searching side (`mark`) maximizes: +1 for its win, -1 for the
opponent's win, 0 for a draw. An optional depth cap scores unresolved
positions as 0, which is what separates "hard" from "unbeatable".
"""

import logging
import math
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .game import CLASSIC_SIZE, EMPTY, evaluate, legal_moves, opponent

logger = logging.getLogger(__name__)

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


@contextmanager
def placed(board: List[int], index: int, mark: int) -> Iterator[List[int]]:
    """Place `mark` at `index` for the duration of the block, then clear it."""
    board[index] = mark
    try:
        yield board
    finally:
        board[index] = EMPTY


class AlphaBeta:
    """
    Depth-first minimax searcher for one side.

    Args:
        mark: The maximizing side (the computer).
        grid_size: Board width.
        win_length: Run length needed to win.
        max_depth: Nodes at this depth score 0 unless terminal. None searches
            to the end of the game.
    """

    def __init__(
        self,
        mark: int,
        grid_size: int = CLASSIC_SIZE,
        win_length: int = CLASSIC_SIZE,
        max_depth: Optional[int] = None,
    ):
        self.mark = mark
        self.grid_size = grid_size
        self.win_length = win_length
        self.max_depth = max_depth
        self.nodes = 0

    def terminal_score(self, board: List[int]) -> Optional[int]:
        outcome = evaluate(board, self.grid_size, self.win_length)
        if not outcome.is_over:
            return None
        if outcome.winner is None:
            return DRAW_SCORE
        return WIN_SCORE if outcome.winner == self.mark else LOSS_SCORE

    def score(
        self,
        board: List[int],
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> float:
        """Minimax value of `board` with the given side to move."""
        self.nodes += 1

        value = self.terminal_score(board)
        if value is not None:
            return value
        if self.max_depth is not None and depth >= self.max_depth:
            return DRAW_SCORE

        if maximizing:
            best = -math.inf
            for action in legal_moves(board):
                with placed(board, action, self.mark):
                    v = self.score(board, depth + 1, alpha, beta, False)
                best = max(best, v)
                alpha = max(alpha, v)
                if beta <= alpha:
                    break
            return best

        best = math.inf
        for action in legal_moves(board):
            with placed(board, action, opponent(self.mark)):
                v = self.score(board, depth + 1, alpha, beta, True)
            best = min(best, v)
            beta = min(beta, v)
            if beta <= alpha:
                break
        return best

    def root_scores(self, board: List[int]) -> Dict[int, float]:
        """
        Score every legal move for `mark`.

        Each candidate is searched with a full window so the scores are exact
        (within the depth cap), not just bounds.
        """
        self.nodes = 0
        scores = {}
        for action in legal_moves(board):
            with placed(board, action, self.mark):
                scores[action] = self.score(board, 0, -math.inf, math.inf, False)
        return scores

    def best_move(self, board: List[int]) -> Optional[int]:
        """
        First move (lowest index) with the strictly highest score.

        Returns:
            Cell index, or None when nothing beats the -inf sentinel.
        """
        best_score = -math.inf
        move = None
        for action, value in self.root_scores(board).items():
            if value > best_score:
                best_score = value
                move = action
        logger.debug(
            "alpha-beta (max_depth=%s) searched %d nodes, move=%s score=%s",
            self.max_depth, self.nodes, move, best_score,
        )
        return move


def find_best_move(
    board: List[int],
    mark: int,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
    max_depth: Optional[int] = None,
) -> Optional[int]:
    """Best move for `mark`, or None if the board is full."""
    return AlphaBeta(mark, grid_size, win_length, max_depth).best_move(board)
