import random
import unittest

import numpy as np

from tictac.config import Difficulty, GameConfig
from tictac.game import O, X, evaluate, legal_moves, new_board, opponent
from tictac.selector import (
    DIFFICULTY_STRATEGY,
    STRATEGIES,
    Strategy,
    effective_difficulty,
    select_move,
)

from tests.boards import board_from_rows

ALL_DIFFICULTIES = list(Difficulty)


def random_positions(count: int, seed: int = 0, grid_size: int = 3, win_length: int = 3):
    """Yield (board, side_to_move) from random play, skipping finished games."""
    rng = random.Random(seed)
    produced = 0
    while produced < count:
        board = new_board(grid_size)
        mark = X
        for _ in range(rng.randrange(2, grid_size * grid_size)):
            if evaluate(board, grid_size, win_length).is_over:
                break
            board[rng.choice(legal_moves(board))] = mark
            mark = opponent(mark)
        if evaluate(board, grid_size, win_length).is_over:
            continue
        produced += 1
        yield board, mark


class TestDispatch(unittest.TestCase):
    def test_every_difficulty_has_a_strategy(self) -> None:
        self.assertEqual(set(DIFFICULTY_STRATEGY), set(Difficulty))
        self.assertEqual(set(STRATEGIES), set(Strategy))

    def test_full_board_returns_none_for_every_difficulty(self) -> None:
        board = board_from_rows("XOX", "XOO", "OXX")
        for difficulty in ALL_DIFFICULTIES:
            with self.subTest(difficulty=difficulty):
                self.assertIsNone(select_move(board, GameConfig(difficulty=difficulty)))

    def test_board_invariance(self) -> None:
        for difficulty in ALL_DIFFICULTIES:
            for board, mark in random_positions(15, seed=11):
                with self.subTest(difficulty=difficulty, board=board):
                    before = list(board)
                    config = GameConfig(difficulty=difficulty, computer=mark)
                    move = select_move(board, config, random.Random(3))
                    self.assertEqual(board, before)
                    self.assertIn(move, legal_moves(board))


class TestMedium(unittest.TestCase):
    config = GameConfig(difficulty=Difficulty.MEDIUM, computer=O)

    def test_takes_win(self) -> None:
        board = board_from_rows("OO.", "XX.", "...")
        self.assertEqual(select_move(board, self.config), 2)

    def test_blocks_opponent_win(self) -> None:
        board = board_from_rows("XX.", "O..", "...")
        self.assertEqual(select_move(board, self.config), 2)

    def test_prefers_win_over_block(self) -> None:
        # X threatens 2, O can win at 8
        board = board_from_rows("XX.", "..X", "OO.")
        self.assertEqual(select_move(board, self.config), 8)

    def test_plays_as_x(self) -> None:
        config = GameConfig(difficulty=Difficulty.MEDIUM, computer=X)
        board = board_from_rows("OO.", "XX.", "...")
        self.assertEqual(select_move(board, config), 5)

    def test_falls_back_to_random_empty_cell(self) -> None:
        board = board_from_rows("X..", "...", "...")
        rng = random.Random(5)
        expected = random.Random(5).choice(legal_moves(board))
        self.assertEqual(select_move(board, self.config, rng), expected)


class TestSearchDifficulties(unittest.TestCase):
    def test_hard_and_unbeatable_take_and_block_wins(self) -> None:
        win_board = board_from_rows("OO.", "XX.", "...")
        block_board = board_from_rows("X.X", "O..", "...")
        for difficulty in (Difficulty.HARD, Difficulty.UNBEATABLE):
            config = GameConfig(difficulty=difficulty, computer=O)
            with self.subTest(difficulty=difficulty):
                self.assertEqual(select_move(win_board, config), 2)
                self.assertEqual(select_move(block_board, config), 1)

    def test_hard_misses_loss_beyond_its_horizon(self) -> None:
        board = board_from_rows("X..", "...", "...")
        hard = GameConfig(difficulty=Difficulty.HARD, computer=O)
        unbeatable = GameConfig(difficulty=Difficulty.UNBEATABLE, computer=O)
        self.assertEqual(select_move(board, hard), 1)
        self.assertEqual(select_move(board, unbeatable), 4)


class TestEasy(unittest.TestCase):
    def test_only_empty_cells(self) -> None:
        board = board_from_rows("X.O", ".X.", "O..")
        config = GameConfig(difficulty=Difficulty.EASY)
        rng = random.Random(42)
        empties = set(legal_moves(board))
        for _ in range(200):
            self.assertIn(select_move(board, config, rng), empties)

    def test_uniform_over_empty_board(self) -> None:
        config = GameConfig(difficulty=Difficulty.EASY)
        rng = random.Random(1234)
        board = new_board(3)
        trials = 9000
        picks = [select_move(board, config, rng) for _ in range(trials)]
        counts = np.bincount(picks, minlength=9)
        self.assertEqual(counts.sum(), trials)
        # expected 1000 per cell, std ~30
        self.assertTrue(np.all(np.abs(counts - trials / 9) < 150), counts)


class TestDowngrade(unittest.TestCase):
    def test_effective_difficulty(self) -> None:
        self.assertIs(effective_difficulty(GameConfig(difficulty="unbeatable")), Difficulty.UNBEATABLE)
        self.assertIs(effective_difficulty(GameConfig(4, 3, Difficulty.UNBEATABLE)), Difficulty.EASY)
        self.assertIs(effective_difficulty(GameConfig(3, 2, Difficulty.MEDIUM)), Difficulty.EASY)

    def test_large_board_plays_random_and_logs(self) -> None:
        config = GameConfig(grid_size=4, win_length=3, difficulty=Difficulty.UNBEATABLE)
        board = new_board(4)
        board[1] = X
        board[2] = X
        expected = random.Random(7).choice(legal_moves(board))
        with self.assertLogs("tictac.selector", level="INFO") as logs:
            move = select_move(board, config, random.Random(7))
        self.assertEqual(move, expected)
        self.assertIn("unbeatable", logs.output[0])


if __name__ == "__main__":
    unittest.main()
