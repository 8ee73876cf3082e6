"""
Tic-tac-toe rules for square boards of any size.

Board representation: list[int] of length grid_size ** 2, row-major
  - 0: empty
  - +1: X
  - -1: O

X always moves first. A player wins with win_length consecutive marks in a
row, a column or either diagonal.
"""

from enum import Enum
from typing import List, Optional, Tuple

EMPTY = 0
X = +1
O = -1

CLASSIC_SIZE = 3

# Scan directions as (d_row, d_col): right, down, down-right, down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

MARK_SYMBOLS = {EMPTY: " ", X: "X", O: "O"}


class Outcome(Enum):
    """Result of evaluating a board."""
    NONE = "none"
    X_WINS = "X"
    O_WINS = "O"
    DRAW = "draw"

    @property
    def winner(self) -> Optional[int]:
        """Winning mark, or None for NONE/DRAW."""
        if self is Outcome.X_WINS:
            return X
        if self is Outcome.O_WINS:
            return O
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.NONE

    @classmethod
    def for_mark(cls, mark: int) -> "Outcome":
        """Win outcome owned by `mark`."""
        if mark == X:
            return cls.X_WINS
        if mark == O:
            return cls.O_WINS
        raise ValueError(f"not a player mark: {mark!r}")


def opponent(mark: int) -> int:
    """Return the other player's mark."""
    return -mark


def new_board(grid_size: int = CLASSIC_SIZE) -> List[int]:
    """Return an empty board."""
    return [EMPTY] * (grid_size * grid_size)


def _check_shape(board: List[int], grid_size: int, win_length: int) -> None:
    if len(board) != grid_size * grid_size:
        raise ValueError(
            f"board has {len(board)} cells, expected {grid_size * grid_size} "
            f"for a {grid_size}x{grid_size} grid"
        )
    if win_length < 1:
        raise ValueError(f"win_length must be positive, got {win_length}")


def winning_line(board: List[int], grid_size: int, win_length: int) -> Optional[Tuple[int, ...]]:
    """
    Find the first complete line in scan order.

    Every cell is tried as a line origin (row-major), and for each origin the
    four directions are tried in DIRECTIONS order. A line is only considered
    when its last cell is inside the grid, so win_length > grid_size never
    matches.

    Returns:
        Tuple of cell indices forming the line, or None.
    """
    _check_shape(board, grid_size, win_length)
    span = win_length - 1

    for origin, mark in enumerate(board):
        if mark == EMPTY:
            continue
        row, col = divmod(origin, grid_size)
        for dr, dc in DIRECTIONS:
            end_row = row + dr * span
            end_col = col + dc * span
            if not (0 <= end_row < grid_size and 0 <= end_col < grid_size):
                continue
            line = tuple((row + dr * k) * grid_size + (col + dc * k) for k in range(win_length))
            if all(board[i] == mark for i in line):
                return line
    return None


def evaluate(board: List[int], grid_size: int = CLASSIC_SIZE, win_length: int = CLASSIC_SIZE) -> Outcome:
    """
    Evaluate a board.

    Returns:
        The owner's win outcome for the first complete line found, DRAW when
        the board is full without a line, NONE while play continues.
    """
    line = winning_line(board, grid_size, win_length)
    if line is not None:
        return Outcome.for_mark(board[line[0]])
    if EMPTY not in board:
        return Outcome.DRAW
    return Outcome.NONE


def is_terminal(board: List[int], grid_size: int = CLASSIC_SIZE,
                win_length: int = CLASSIC_SIZE) -> Tuple[bool, Outcome]:
    """
    Check if board is terminal.

    Returns:
        (is_terminal, outcome)
    """
    outcome = evaluate(board, grid_size, win_length)
    return outcome.is_over, outcome


def legal_moves(board: List[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: List[int], mark: int, action: int) -> List[int]:
    """Apply move and return new board."""
    new = board[:]
    new[action] = mark
    return new


def side_to_move(board: List[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    return X if x_cnt == o_cnt else O


def format_board(board: List[int], grid_size: int = CLASSIC_SIZE) -> str:
    """Render board as text rows separated by rules."""
    rows = []
    for r in range(grid_size):
        cells = board[r * grid_size:(r + 1) * grid_size]
        rows.append("|".join(MARK_SYMBOLS[v] for v in cells))
    rule = "+".join("-" for _ in range(grid_size))
    return f"\n{rule}\n".join(rows)
