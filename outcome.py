"""Win / draw detection."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from board import (
    Board,
    read_ascending_diagonal,
    read_columns,
    read_descending_diagonal,
    read_rows,
)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    BOT_WON = "bot_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


# Only the two uniform triples decide a line
LINE_RESULTS = {
    "XXX": GameStatus.PLAYER_WON,
    "OOO": GameStatus.BOT_WON,
}

LAST_TURN = 9


def classify_line(line: str) -> Optional[GameStatus]:
    """Return PLAYER_WON / BOT_WON for a completed line, otherwise None."""
    return LINE_RESULTS.get(line)


def winning_lines(board: Board) -> List[str]:
    """The eight lines in evaluation order: rows, columns, then both diagonals."""
    return (
        read_rows(board)
        + read_columns(board)
        + [read_descending_diagonal(board), read_ascending_diagonal(board)]
    )


def evaluate_board(board: Board, turn: int) -> GameStatus:
    """
    Classify the board after the move numbered ``turn``.

    The first decided line wins. With no decided line, the ninth move
    ends the game in a draw.
    """
    for line in winning_lines(board):
        result = classify_line(line)
        if result is not None:
            return result

    if turn == LAST_TURN:
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS
