"""Bot offense: finish a line of three bot marks."""

from __future__ import annotations

import logging
from typing import Optional

from board import (
    CENTER,
    Board,
    Cell,
    Position,
    ascending_position,
    column_position,
    descending_position,
    read_ascending_diagonal,
    read_columns,
    read_descending_diagonal,
    read_rows,
    row_position,
)

logger = logging.getLogger(__name__)

# Two bot marks and one gap -> index of the gap. Nothing else counts.
COMPLETIONS = {
    ".OO": 0,
    "O.O": 1,
    "OO.": 2,
}


def find_offensive_completion(line: str) -> Optional[int]:
    """Return the index that completes ``line`` for the bot, or None."""
    return COMPLETIONS.get(line)


def find_offensive_move(board: Board) -> Optional[Position]:
    """
    Pick the bot's attacking move, or None when there is nothing to attack.

    An empty center is always claimed first. After that rows, columns,
    the descending diagonal and the ascending diagonal are scanned in
    that order and the first completable line wins.
    """
    row, col = CENTER
    if board[row][col] == Cell.EMPTY:
        logger.debug("Offense: claiming the center")
        return CENTER

    for i, line in enumerate(read_rows(board)):
        index = find_offensive_completion(line)
        if index is not None:
            logger.debug("Offense: completing row %d", i)
            return row_position(i, index)

    for i, line in enumerate(read_columns(board)):
        index = find_offensive_completion(line)
        if index is not None:
            logger.debug("Offense: completing column %d", i)
            return column_position(i, index)

    index = find_offensive_completion(read_descending_diagonal(board))
    if index is not None:
        logger.debug("Offense: completing descending diagonal")
        return descending_position(index)

    index = find_offensive_completion(read_ascending_diagonal(board))
    if index is not None:
        logger.debug("Offense: completing ascending diagonal")
        return ascending_position(index)

    return None
