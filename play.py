#!/usr/bin/env python3
"""
Play tic-tac-toe in the terminal, or pit the engines against each other.

Usage:
    python play.py                                  # you (X) vs easy computer (O)
    python play.py --difficulty unbeatable
    python play.py --mode pvp --grid-size 5 --win-length 4
    python play.py --arena --games 200
"""

import sys
import time
import random
import logging
import argparse
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tictac import (
    Difficulty,
    GameConfig,
    GameSession,
    Mode,
    O,
    X,
    effective_difficulty,
    eval_self_play,
    eval_vs_random,
    format_board,
    legal_moves,
    winning_line,
)


def print_board(board, grid_size):
    """Pretty print board."""
    print(format_board(board, grid_size))


def print_index_guide(grid_size):
    """Show which number selects which cell."""
    width = len(str(grid_size * grid_size - 1))
    for r in range(grid_size):
        print(" | ".join(str(r * grid_size + c).rjust(width) for c in range(grid_size)))


def play_interactive(session, rng=None, think_delay=0.0, input_fn=input):
    """Play one game in the terminal. Returns the final outcome, or None if aborted."""
    config = session.config

    print("\n=== Tic-Tac-Toe ===")
    if session.mode is Mode.PVA:
        you = "X" if config.computer == O else "O"
        print(f"You are {you}, the computer plays {effective_difficulty(config).value}")
        if effective_difficulty(config) is not config.difficulty:
            print(f"({config.difficulty.value} needs a 3x3 board with three in a row)")
    print(f"Get {config.win_length} in a row. Enter moves as numbers:")
    print_index_guide(config.grid_size)
    print()

    while session.active:
        print_board(session.board, config.grid_size)
        print(f"\n{session.status()}")

        if session.is_computer_turn:
            if think_delay:
                time.sleep(think_delay)
            action = session.computer_turn(rng)
            print(f"Computer plays: {action}\n")
            continue

        try:
            text = input_fn(f"Move ({', '.join(map(str, legal_moves(session.board)))}): ")
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted")
            return None
        if text.strip().lower() in ("q", "quit"):
            print("Game aborted")
            return None

        try:
            session.play(int(text))
        except ValueError as e:
            # IllegalMoveError is a ValueError, so bad numbers land here too
            print(f"Invalid move ({e}), try again")
        print()

    print_board(session.board, config.grid_size)
    line = winning_line(session.board, config.grid_size, config.win_length)
    if line is not None:
        print(f"\nWinning line: {list(line)}")
    print(f"\n{session.status()}")
    return session.outcome


def run_arena(config, games, rng):
    """Print engine results vs random and in self-play."""
    print("\n=== Evaluation ===")
    print(f"Board: {config.grid_size}x{config.grid_size}, win length {config.win_length}")

    for difficulty in Difficulty:
        tqdm.write(f"\n{difficulty.value} vs Random ({games} games)...")
        w, d, l = eval_vs_random(
            difficulty, games=games, grid_size=config.grid_size,
            win_length=config.win_length, rng=rng, progress=True,
        )
        print(f"  Wins:   {w:.2%}")
        print(f"  Draws:  {d:.2%}")
        print(f"  Losses: {l:.2%}")

    self_games = max(1, games // 10)
    print(f"\nSelf-play ({self_games} games each)...")
    for difficulty in Difficulty:
        res = eval_self_play(
            difficulty, games=self_games, grid_size=config.grid_size,
            win_length=config.win_length, rng=rng, progress=True,
        )
        print(f"  {difficulty.value:<11} X: {res['x_wins']}  O: {res['o_wins']}  "
              f"D: {res['draws']}  positions: {res['distinct_positions']}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a person or the computer")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.PVA.value,
                        help="pvp: two players, pva: against the computer")
    parser.add_argument("--difficulty", choices=[d.value for d in Difficulty],
                        default=Difficulty.EASY.value, help="Computer strength")
    parser.add_argument("--grid-size", type=int, default=3, help="Board width and height")
    parser.add_argument("--win-length", type=int, default=None,
                        help="Marks in a row needed to win (default: 3, capped at grid size)")
    parser.add_argument("--computer", choices=["X", "O"], default="O", help="Mark the computer plays")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--think-delay", type=float, default=0.0, help="Seconds to pause before computer moves")
    parser.add_argument("--arena", action="store_true", help="Run engine evaluation instead of playing")
    parser.add_argument("--games", type=int, default=100, help="Number of eval games")
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    win_length = args.win_length if args.win_length is not None else min(3, args.grid_size)
    try:
        config = GameConfig(
            grid_size=args.grid_size,
            win_length=win_length,
            difficulty=Difficulty(args.difficulty),
            computer=X if args.computer == "X" else O,
        )
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2

    rng = random.Random(args.seed)

    if args.arena:
        run_arena(config, args.games, rng)
        return 0

    session = GameSession(config, Mode(args.mode))
    play_interactive(session, rng=rng, think_delay=args.think_delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())
