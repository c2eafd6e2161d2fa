import random
import unittest

from board import Cell
from game import GameSession, cell_handle
from outcome import GameStatus
from strategy import BotStrategy, Difficulty, new_session


class ScriptedRandom:
    """Stand-in for random.Random with fixed answers."""

    def __init__(self, roll=0.5, cells=()):
        self.roll = roll
        self.values = [v for cell in cells for v in cell]

    def random(self):
        return self.roll

    def randrange(self, stop):
        return self.values.pop(0)


class NoRandom:
    def random(self):
        raise AssertionError("random() should not be used")

    def randrange(self, stop):
        raise AssertionError("randrange() should not be used")


class DifficultyTests(unittest.TestCase):
    def test_hard_always_uses_rules(self) -> None:
        strategy = BotStrategy(Difficulty.HARD, rng=NoRandom())
        self.assertTrue(strategy.uses_rules())

    def test_easy_draws_each_turn(self) -> None:
        self.assertFalse(BotStrategy(Difficulty.EASY, rng=ScriptedRandom(0.29)).uses_rules())
        self.assertTrue(BotStrategy(Difficulty.EASY, rng=ScriptedRandom(0.3)).uses_rules())

    def test_easy_rate_roughly_thirty_percent(self) -> None:
        strategy = BotStrategy(Difficulty.EASY, rng=random.Random(1234))
        random_turns = sum(1 for _ in range(10000) if not strategy.uses_rules())
        self.assertTrue(2700 < random_turns < 3300, random_turns)


class BotTurnTests(unittest.TestCase):
    def test_scenario_center_opening(self) -> None:
        session = new_session(Difficulty.HARD, rng=NoRandom())
        self.assertTrue(session.request_move(1, 1, cell_handle(1, 1)))
        self.assertEqual(session.mark_count(), 2)
        self.assertEqual(session.board[0][2], Cell.BOT)
        self.assertEqual(session.turn, 3)

    def test_scenario_center_opening_easy(self) -> None:
        for seed in range(20):
            session = new_session(Difficulty.EASY, rng=random.Random(seed))
            session.request_move(1, 1, cell_handle(1, 1))
            self.assertEqual(session.mark_count(), 2, seed)
            self.assertEqual(session.board[1][1], Cell.PLAYER)

    def test_scenario_offense_beats_defense(self) -> None:
        strategy = BotStrategy(Difficulty.HARD, rng=NoRandom())
        session = GameSession.from_rows(["XX.", "OO.", "..."], bot=strategy)
        strategy.take_turn(session)
        self.assertEqual(session.board[1][2], Cell.BOT)
        self.assertTrue(session.is_empty(0, 2))
        self.assertEqual(session.status, GameStatus.BOT_WON)
        self.assertEqual(session.message, "You lost!")

    def test_scenario_hard_always_finishes_a_line(self) -> None:
        for rows, target in [
            (["X.O", "XO.", ".X."], (2, 0)),
            ([".O.", "XO.", "X.X"], (2, 1)),
            (["O.X", ".OX", "X.."], (2, 2)),
        ]:
            strategy = BotStrategy(Difficulty.HARD, rng=NoRandom())
            session = GameSession.from_rows(rows, bot=strategy)
            strategy.take_turn(session)
            self.assertEqual(session.board[target[0]][target[1]], Cell.BOT, rows)
            self.assertEqual(session.status, GameStatus.BOT_WON, rows)

    def test_defense_after_human_move(self) -> None:
        session = GameSession.from_rows(
            ["X..", ".O.", "..."], bot=BotStrategy(Difficulty.HARD, rng=NoRandom())
        )
        session.request_move(0, 1, "01")
        self.assertEqual(session.board[0][2], Cell.BOT)
        self.assertEqual(session.turn, 5)

    def test_easy_random_turn_ignores_rules(self) -> None:
        rng = ScriptedRandom(roll=0.1, cells=[(0, 0), (2, 2)])
        session = GameSession.from_rows(["X..", "...", "..."], bot=BotStrategy(rng=rng))
        session.bot.take_turn(session)
        # (0, 0) is taken, so the second pick lands
        self.assertEqual(session.board[2][2], Cell.BOT)
        self.assertTrue(session.is_empty(1, 1))
        self.assertEqual(session.mark_count(), 2)

    def test_easy_rule_turn_claims_center(self) -> None:
        rng = ScriptedRandom(roll=0.9)
        session = GameSession.from_rows(["X..", "...", "..."], bot=BotStrategy(rng=rng))
        session.bot.take_turn(session)
        self.assertEqual(session.board[1][1], Cell.BOT)

    def test_falls_back_to_random_when_no_rule_applies(self) -> None:
        rng = ScriptedRandom(cells=[(0, 0), (0, 1)])
        strategy = BotStrategy(Difficulty.HARD, rng=rng)
        session = GameSession.from_rows(["X..", ".O.", "..."], bot=strategy)
        strategy.take_turn(session)
        self.assertEqual(session.board[0][1], Cell.BOT)
        self.assertEqual(session.mark_count(), 3)

    def test_random_fills_last_cell(self) -> None:
        strategy = BotStrategy(Difficulty.EASY, rng=random.Random(7))
        session = GameSession.from_rows(["XOX", "XOO", "OX."])
        strategy.play_random(session)
        self.assertEqual(session.board[2][2], Cell.BOT)
        self.assertEqual(session.status, GameStatus.DRAW)

    def test_random_does_nothing_once_game_is_over(self) -> None:
        strategy = BotStrategy(rng=NoRandom())
        session = GameSession.from_rows(["XXX", "OO.", "..."])
        session.evaluate()
        strategy.play_random(session)
        self.assertEqual(session.mark_count(), 5)


class FullGameTests(unittest.TestCase):
    def play(self, difficulty, seed):
        session = new_session(difficulty, rng=random.Random(seed))
        while session.in_progress:
            row, col = session.empty_cells()[0]
            self.assertTrue(session.request_move(row, col, cell_handle(row, col)))
            self.assertEqual(session.turn, session.mark_count() + 1)
        return session

    def test_games_terminate_with_consistent_counters(self) -> None:
        for difficulty in Difficulty:
            for seed in range(25):
                session = self.play(difficulty, seed)
                self.assertTrue(session.status.is_terminal)
                self.assertLessEqual(session.mark_count(), 9)
                self.assertLessEqual(session.turn, 10)


if __name__ == "__main__":
    unittest.main()
