"""
One game at a time, owned by the caller.

GameSession holds the board, the side to move and a tally of finished
games. It never outlives the process.
"""

import logging
from collections import Counter
from typing import Optional

from .config import GameConfig, Mode
from .game import EMPTY, MARK_SYMBOLS, X, Outcome, evaluate, new_board, opponent
from .selector import select_move

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Move rejected by the session (game over, bad index, wrong turn)."""


class GameSession:
    """
    Turn bookkeeping around the engine.

    Args:
        config: Board geometry and computer settings.
        mode: PVP for two humans, PVA against the computer.
    """

    def __init__(self, config: Optional[GameConfig] = None, mode: Mode = Mode.PVA):
        self.config = config or GameConfig()
        self.mode = Mode(mode)
        self.tally: Counter = Counter()
        self.start()

    def start(self) -> None:
        """Fresh board, X to move. The tally is kept."""
        self.board = new_board(self.config.grid_size)
        self.current = X
        self.active = True
        self._recorded = False

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.board, self.config.grid_size, self.config.win_length)

    @property
    def is_computer_turn(self) -> bool:
        return self.mode is Mode.PVA and self.active and self.current == self.config.computer

    def play(self, index: int) -> Outcome:
        """
        Place the side-to-move's mark for a human player.

        Raises:
            IllegalMoveError: game over, index out of range, occupied cell,
                or the computer is to move.
        """
        if self.is_computer_turn:
            raise IllegalMoveError("it is the computer's turn")
        return self._apply(index)

    def computer_turn(self, rng=None) -> int:
        """
        Let the engine move.

        Returns:
            The index played.
        """
        if not self.is_computer_turn:
            raise IllegalMoveError("it is not the computer's turn")
        # an active game always has an empty cell
        move = select_move(self.board, self.config, rng)
        self._apply(move)
        return move

    def _apply(self, index: int) -> Outcome:
        if not self.active:
            raise IllegalMoveError("the game is over")
        if not 0 <= index < len(self.board):
            raise IllegalMoveError(f"cell {index} is off the board (0-{len(self.board) - 1})")
        if self.board[index] != EMPTY:
            raise IllegalMoveError(f"cell {index} is already taken")

        self.board[index] = self.current
        logger.debug("%s plays %d", MARK_SYMBOLS[self.current], index)

        outcome = self.outcome
        if outcome.is_over:
            self._finish(outcome)
        else:
            self.current = opponent(self.current)
        return outcome

    def _finish(self, outcome: Outcome) -> None:
        self.active = False
        if not self._recorded:
            self.tally[outcome] += 1
            self._recorded = True
            logger.info("game over: %s", outcome.value)

    def status(self) -> str:
        """Status line for the player."""
        outcome = self.outcome
        if outcome is Outcome.DRAW:
            return "You both tied!"
        if outcome.is_over:
            if self.mode is Mode.PVA and outcome.winner == self.config.computer:
                return "AI Wins as Expected!"
            return f"Player {outcome.value} is the Winner!"
        if self.mode is Mode.PVP:
            return f"Play Player {MARK_SYMBOLS[self.current]}"
        if self.is_computer_turn:
            return "AI is thinking..."
        return "Your Turn"
