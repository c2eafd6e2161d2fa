"""Bot move selection: heuristic rules with a random fallback."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from board import Cell, Position
from defense import find_defensive_move
from game import GameSession, NullRenderer, Renderer
from offense import find_offensive_move

logger = logging.getLogger(__name__)

# Chance that an Easy bot ignores its rules for a turn
EASY_RANDOM_RATE = 0.3


class Difficulty(Enum):
    EASY = "easy"
    HARD = "hard"


class BotStrategy:
    """
    Plays the bot's single move for a turn.

    A Hard bot always follows its rules: offense first, then defense.
    An Easy bot drops the rules for a whole turn with probability
    ``easy_random_rate``. When the rules are off or find nothing, the
    bot picks random cells until one is accepted.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        rng: Optional[random.Random] = None,
        easy_random_rate: float = EASY_RANDOM_RATE,
    ):
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.easy_random_rate = easy_random_rate

    def uses_rules(self) -> bool:
        """Decide, for this turn, whether the bot plays by its rules."""
        if self.difficulty == Difficulty.HARD:
            return True
        return self.rng.random() >= self.easy_random_rate

    def choose_heuristic_move(self, session: GameSession) -> Optional[Position]:
        move = find_offensive_move(session.board)
        if move is not None:
            return move
        return find_defensive_move(session.board, session.turn)

    def take_turn(self, session: GameSession) -> None:
        if self.uses_rules():
            move = self.choose_heuristic_move(session)
            if move is not None:
                # A rejected rule move still ends the bot's turn
                if not session.apply_move(move[0], move[1], Cell.BOT):
                    logger.debug("Bot rule move %s was rejected", move)
                return
            logger.debug("No rule applies, playing at random")
        else:
            logger.debug("Bot plays at random this turn")

        self.play_random(session)

    def play_random(self, session: GameSession) -> None:
        """Try random cells over the whole grid until a move is accepted."""
        if not session.in_progress or not session.has_empty_cell():
            return

        while True:
            row, col = self.rng.randrange(3), self.rng.randrange(3)
            if session.apply_move(row, col, Cell.BOT):
                return


def new_session(
    difficulty: Difficulty = Difficulty.EASY,
    renderer: Optional[Renderer] = None,
    rng: Optional[random.Random] = None,
    easy_random_rate: float = EASY_RANDOM_RATE,
) -> GameSession:
    """Create a game whose bot plays with the given difficulty."""
    return GameSession(
        renderer=renderer or NullRenderer(),
        bot=BotStrategy(difficulty, rng=rng, easy_random_rate=easy_random_rate),
    )
