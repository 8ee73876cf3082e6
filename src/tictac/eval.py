"""
Evaluation functions.

Plays engines against random players, against themselves, and against every
possible line of opposing moves.
"""

import random
from collections import Counter
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from tqdm.auto import trange

from .config import Difficulty, GameConfig
from .game import CLASSIC_SIZE, EMPTY, O, X, Outcome, evaluate, legal_moves, new_board, opponent
from .selector import select_move
from .symmetries import canonical_board

# (board, mark to play) -> cell index or None
Player = Callable[[List[int], int], Optional[int]]


def engine_player(
    difficulty,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
    rng=None,
) -> Player:
    """Wrap select_move as a player for either side."""
    configs = {
        mark: GameConfig(grid_size, win_length, Difficulty.parse(difficulty), mark)
        for mark in (X, O)
    }

    def play(board: List[int], mark: int) -> Optional[int]:
        return select_move(board, configs[mark], rng)

    return play


def random_player(rng=None) -> Player:
    """Player choosing uniformly among empty cells."""
    def play(board: List[int], mark: int) -> Optional[int]:
        moves = legal_moves(board)
        return (rng or random).choice(moves) if moves else None

    return play


def play_game(
    x_player: Player,
    o_player: Player,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
) -> Tuple[Outcome, List[int]]:
    """
    Play one game to the end, X first.

    Returns:
        (outcome, moves) with moves in play order
    """
    board = new_board(grid_size)
    players = {X: x_player, O: o_player}
    mark = X
    moves: List[int] = []

    while True:
        outcome = evaluate(board, grid_size, win_length)
        if outcome.is_over:
            return outcome, moves

        action = players[mark](board, mark)
        if action is None or board[action] != EMPTY:
            raise RuntimeError(f"player for {mark:+d} returned illegal move {action!r}")
        board[action] = mark
        moves.append(action)
        mark = opponent(mark)


def _replay(moves: List[int], grid_size: int) -> List[int]:
    board = new_board(grid_size)
    mark = X
    for action in moves:
        board[action] = mark
        mark = opponent(mark)
    return board


def eval_matchup(
    x_player: Player,
    o_player: Player,
    games: int = 100,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
    progress: bool = False,
    desc: str = "games",
) -> Dict[str, int]:
    """
    Play `games` games with fixed sides.

    Returns:
        Dict with 'games', 'x_wins', 'o_wins', 'draws', 'distinct_positions'
        (final positions counted up to board symmetry)
    """
    results: Counter = Counter()
    finals = set()

    for _ in trange(games, desc=desc, disable=not progress, leave=False):
        outcome, moves = play_game(x_player, o_player, grid_size, win_length)
        results[outcome] += 1
        finals.add(canonical_board(_replay(moves, grid_size), grid_size))

    return {
        "games": games,
        "x_wins": results[Outcome.X_WINS],
        "o_wins": results[Outcome.O_WINS],
        "draws": results[Outcome.DRAW],
        "distinct_positions": len(finals),
    }


def eval_vs_random(
    difficulty,
    games: int = 500,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
    rng=None,
    progress: bool = False,
) -> Tuple[float, float, float]:
    """
    Evaluate an engine vs a random opponent, alternating sides.

    Returns:
        (win_rate, draw_rate, loss_rate) from the engine's side
    """
    engine = engine_player(difficulty, grid_size, win_length, rng)
    opponent_player = random_player(rng)
    wins = draws = losses = 0

    for g in trange(games, desc=f"{Difficulty.parse(difficulty).value} vs random",
                    disable=not progress, leave=False):
        engine_side = X if g % 2 == 0 else O
        if engine_side == X:
            outcome, _ = play_game(engine, opponent_player, grid_size, win_length)
        else:
            outcome, _ = play_game(opponent_player, engine, grid_size, win_length)

        if outcome is Outcome.DRAW:
            draws += 1
        elif outcome.winner == engine_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return wins / total, draws / total, losses / total


def eval_self_play(
    difficulty,
    games: int = 10,
    grid_size: int = CLASSIC_SIZE,
    win_length: int = CLASSIC_SIZE,
    rng=None,
    progress: bool = False,
) -> Dict[str, int]:
    """Engine against itself; unbeatable on 3x3 should only draw."""
    engine = engine_player(difficulty, grid_size, win_length, rng)
    return eval_matchup(
        engine, engine, games, grid_size, win_length,
        progress=progress, desc=f"{Difficulty.parse(difficulty).value} self-play",
    )


def iter_opponent_lines(difficulty, engine_mark: int = O) -> Iterator[Tuple[Outcome, List[int]]]:
    """
    Play a deterministic engine against every legal opposing move sequence
    on the classic board.

    Easy and medium choose randomly in places, so only hard and unbeatable
    give a meaningful enumeration.

    Yields:
        (outcome, moves) for each finished line
    """
    config = GameConfig(difficulty=Difficulty.parse(difficulty), computer=engine_mark)
    replies: Dict[Tuple[int, ...], int] = {}

    def walk(board: List[int], mark: int, moves: List[int]) -> Iterator[Tuple[Outcome, List[int]]]:
        outcome = evaluate(board)
        if outcome.is_over:
            yield outcome, moves
            return

        if mark == engine_mark:
            key = tuple(board)
            if key not in replies:
                replies[key] = select_move(board, config)
            candidates = [replies[key]]
        else:
            candidates = legal_moves(board)

        for action in candidates:
            board[action] = mark
            try:
                yield from walk(board, opponent(mark), moves + [action])
            finally:
                board[action] = EMPTY

    yield from walk(new_board(), X, [])


def eval_exhaustive(difficulty, engine_mark: int = O) -> Counter:
    """
    Count outcomes over every opposing line.

    Returns:
        Counter keyed by Outcome
    """
    return Counter(outcome for outcome, _ in iter_opponent_lines(difficulty, engine_mark))
