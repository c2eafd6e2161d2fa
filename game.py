"""Tic-Tac-Toe game session: move validation, turn counting and result tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Iterable, List, Optional, Protocol

from board import Board, Cell, Position, board_from_rows, new_board
from outcome import GameStatus, evaluate_board

logger = logging.getLogger(__name__)

# Display symbols
SYMBOLS = {
    Cell.EMPTY: "·",
    Cell.PLAYER: "❌",
    Cell.BOT: "⭕",
}

# Message shown to the human for each status
STATUS_MESSAGES = {
    GameStatus.IN_PROGRESS: "",
    GameStatus.PLAYER_WON: "You won!",
    GameStatus.BOT_WON: "You lost!",
    GameStatus.DRAW: "Draw!",
}


def cell_handle(row: int, col: int) -> str:
    """Default handle for a cell when the caller has none, e.g. ``"02"``."""
    return f"{row}{col}"


class Renderer(Protocol):
    """What the presentation layer must provide to follow a game."""

    def mark_cell(self, handle: Hashable, mark: Cell) -> None:
        ...

    def show_status(self, status: GameStatus) -> None:
        ...


class NullRenderer:
    def mark_cell(self, handle: Hashable, mark: Cell) -> None:
        pass

    def show_status(self, status: GameStatus) -> None:
        pass


class BotPlayer(Protocol):
    def take_turn(self, session: "GameSession") -> None:
        ...


@dataclass
class GameSession:
    """
    A single game between the human (X) and the bot (O).

    The session is the only writer of the board, the turn counter and
    the status. ``turn`` is the number of the next move, starting at 1.
    """

    board: Board = field(default_factory=new_board)
    turn: int = 1
    status: GameStatus = GameStatus.IN_PROGRESS
    renderer: Renderer = field(default_factory=NullRenderer)
    bot: Optional[BotPlayer] = None

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[str],
        turn: Optional[int] = None,
        **kwargs,
    ) -> "GameSession":
        """Start from a given position. ``turn`` defaults to marks on the board + 1."""
        session = cls(board=board_from_rows(rows), **kwargs)
        session.turn = turn if turn is not None else session.mark_count() + 1
        return session

    # ─── Queries ───

    def is_empty(self, row: int, col: int) -> bool:
        return self.board[row][col] == Cell.EMPTY

    def empty_cells(self) -> List[Position]:
        return [(r, c) for r in range(3) for c in range(3) if self.is_empty(r, c)]

    def has_empty_cell(self) -> bool:
        return any(cell == Cell.EMPTY for row in self.board for cell in row)

    def mark_count(self) -> int:
        return sum(1 for row in self.board for cell in row if cell != Cell.EMPTY)

    @property
    def in_progress(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    @property
    def message(self) -> str:
        return STATUS_MESSAGES[self.status]

    # ─── Moves ───

    def request_move(
        self, row: int, col: int, handle: Hashable, mark: Cell = Cell.PLAYER
    ) -> bool:
        """Entry point for the presentation layer when a cell is picked."""
        return self.apply_move(row, col, mark, handle)

    def apply_move(
        self, row: int, col: int, mark: Cell, handle: Optional[Hashable] = None
    ) -> bool:
        """
        Place ``mark`` at (row, col). Returns True if the move was applied.

        A move is rejected when the game is over or the cell is taken;
        nothing changes in that case. Coordinates must be 0-2.

        After a human move the bot is always asked to play, even if the
        human just won. Its move is then rejected by the status check.
        """
        if not self.in_progress or not self.is_empty(row, col):
            logger.debug(
                "Rejected %s at (%d, %d): status=%s", mark.name, row, col, self.status.name
            )
            return False

        self.board[row][col] = mark
        self.renderer.mark_cell(handle if handle is not None else cell_handle(row, col), mark)
        logger.debug("Turn %d: %s at (%d, %d)", self.turn, mark.name, row, col)

        self.renderer.show_status(self.evaluate())
        self.turn += 1

        if mark == Cell.PLAYER and self.bot is not None:
            self.bot.take_turn(self)

        return True

    def evaluate(self) -> GameStatus:
        """Evaluate the board for the current move and leave IN_PROGRESS on a result."""
        result = evaluate_board(self.board, self.turn)
        if self.in_progress and result.is_terminal:
            logger.info("Game over after move %d: %s", self.turn, result.name)
            self.status = result
        return self.status
