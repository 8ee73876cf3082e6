import random
import unittest

from tictac.config import Difficulty, GameConfig, Mode
from tictac.game import EMPTY, O, X, Outcome, new_board
from tictac.session import GameSession, IllegalMoveError


class TestPlayerVsPlayer(unittest.TestCase):
    def setUp(self) -> None:
        self.session = GameSession(GameConfig(), Mode.PVP)

    def test_turns_alternate(self) -> None:
        self.assertEqual(self.session.status(), "Play Player X")
        self.session.play(4)
        self.assertEqual(self.session.current, O)
        self.assertEqual(self.session.status(), "Play Player O")
        self.session.play(0)
        self.assertEqual(self.session.board[4], X)
        self.assertEqual(self.session.board[0], O)

    def test_win_ends_game_and_tallies_once(self) -> None:
        for idx in (0, 3, 1, 4):
            self.assertIs(self.session.play(idx), Outcome.NONE)
        self.assertIs(self.session.play(2), Outcome.X_WINS)
        self.assertFalse(self.session.active)
        self.assertEqual(self.session.status(), "Player X is the Winner!")
        with self.assertRaises(IllegalMoveError):
            self.session.play(5)
        self.assertEqual(self.session.tally[Outcome.X_WINS], 1)

    def test_draw(self) -> None:
        for idx in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            outcome = self.session.play(idx)
        self.assertIs(outcome, Outcome.DRAW)
        self.assertEqual(self.session.status(), "You both tied!")

    def test_rejects_illegal_moves(self) -> None:
        self.session.play(4)
        with self.assertRaises(IllegalMoveError):
            self.session.play(4)
        with self.assertRaises(IllegalMoveError):
            self.session.play(9)
        with self.assertRaises(IllegalMoveError):
            self.session.play(-1)
        # rejected moves do not change the turn
        self.assertEqual(self.session.current, O)

    def test_illegal_move_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(IllegalMoveError, ValueError))

    def test_start_keeps_tally(self) -> None:
        for idx in (0, 3, 1, 4, 2):
            self.session.play(idx)
        self.session.start()
        self.assertEqual(self.session.board, new_board(3))
        self.assertTrue(self.session.active)
        self.assertEqual(self.session.current, X)
        self.assertEqual(sum(self.session.tally.values()), 1)

    def test_computer_turn_rejected_in_pvp(self) -> None:
        with self.assertRaises(IllegalMoveError):
            self.session.computer_turn()


class TestPlayerVsComputer(unittest.TestCase):
    def test_human_then_computer(self) -> None:
        session = GameSession(GameConfig(difficulty=Difficulty.UNBEATABLE))
        self.assertEqual(session.status(), "Your Turn")
        self.assertFalse(session.is_computer_turn)
        session.play(0)
        self.assertTrue(session.is_computer_turn)
        self.assertEqual(session.status(), "AI is thinking...")
        with self.assertRaises(IllegalMoveError):
            session.play(1)
        self.assertEqual(session.computer_turn(), 4)
        self.assertEqual(session.board[4], O)
        self.assertEqual(session.status(), "Your Turn")

    def test_computer_win_message(self) -> None:
        session = GameSession(GameConfig(difficulty=Difficulty.MEDIUM))
        session.play(0)
        session.board[3] = O
        session.board[4] = O
        session.current = X
        session.play(8)
        self.assertEqual(session.computer_turn(), 5)
        self.assertIs(session.outcome, Outcome.O_WINS)
        self.assertEqual(session.status(), "AI Wins as Expected!")
        self.assertEqual(session.tally[Outcome.O_WINS], 1)

    def test_computer_as_x_moves_first(self) -> None:
        session = GameSession(GameConfig(difficulty=Difficulty.EASY, computer=X))
        self.assertTrue(session.is_computer_turn)
        move = session.computer_turn(random.Random(0))
        self.assertEqual(session.board[move], X)
        self.assertEqual(session.board.count(EMPTY), 8)
        self.assertFalse(session.is_computer_turn)

    def test_human_cannot_beat_unbeatable(self) -> None:
        rng = random.Random(8)
        for _ in range(10):
            session = GameSession(GameConfig(difficulty=Difficulty.UNBEATABLE))
            while session.active:
                if session.is_computer_turn:
                    session.computer_turn()
                else:
                    session.play(rng.choice([i for i, v in enumerate(session.board) if v == EMPTY]))
            self.assertIn(session.outcome, (Outcome.O_WINS, Outcome.DRAW))

    def test_large_board_game_completes(self) -> None:
        config = GameConfig(grid_size=4, win_length=3, difficulty=Difficulty.UNBEATABLE)
        session = GameSession(config)
        rng = random.Random(2)
        while session.active:
            if session.is_computer_turn:
                session.computer_turn(rng)
            else:
                session.play(rng.choice([i for i, v in enumerate(session.board) if v == EMPTY]))
        self.assertTrue(session.outcome.is_over)
        self.assertEqual(sum(session.tally.values()), 1)


if __name__ == "__main__":
    unittest.main()
