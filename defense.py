"""Bot defense: block the human's lines and answer known opening traps."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from board import (
    CENTER,
    CORNERS,
    Board,
    Cell,
    Position,
    ascending_position,
    column_position,
    descending_position,
    read_all,
    read_ascending_diagonal,
    read_columns,
    read_descending_diagonal,
    read_diamonds,
    read_rows,
    row_position,
)

logger = logging.getLogger(__name__)

# Pattern tags
BLOCK_FIRST = 0
BLOCK_MIDDLE = 1
BLOCK_LAST = 2
BOT_THEN_TWO_PLAYER = 3
CROSS_DESCENDING = 4
CROSS_ASCENDING = 5
DIAMOND_PAIR = 6

THREATS = {
    ".XX": BLOCK_FIRST,
    "X.X": BLOCK_MIDDLE,
    "XX.": BLOCK_LAST,
    "OXX": BOT_THEN_TWO_PLAYER,
    # Human on opposite corners around a bot center, read row by row
    "X...O...X": CROSS_DESCENDING,
    "..X.O.X..": CROSS_ASCENDING,
    "XX": DIAMOND_PAIR,
}

BLOCK_TAGS = (BLOCK_FIRST, BLOCK_MIDDLE, BLOCK_LAST)

# (source, tag) -> answer. Diamond answers are looked up by diamond index.
RESPONSES: Dict[Tuple[str, int], Position] = {
    ("board", CROSS_DESCENDING): (1, 0),
    ("board", CROSS_ASCENDING): (1, 0),
    ("descending", BOT_THEN_TWO_PLAYER): (0, 2),
    ("ascending", BOT_THEN_TWO_PLAYER): (0, 0),
}
DIAMOND_RESPONSES: Dict[int, Position] = dict(enumerate(CORNERS))

OPENING_TURN = 2
TRAP_TURN = 4
OPENING_RESPONSE: Position = (0, 2)


def find_defensive_block(line: str) -> Optional[int]:
    """Return the threat tag for ``line`` (see THREATS), or None."""
    return THREATS.get(line)


def _block_index(line: str) -> Optional[int]:
    tag = find_defensive_block(line)
    if tag in BLOCK_TAGS:
        return tag
    return None


def _trap_response(board: Board) -> Optional[Position]:
    tag = find_defensive_block(read_all(board))
    if ("board", tag) in RESPONSES:
        logger.debug("Defense: breaking cross pattern %s", tag)
        return RESPONSES[("board", tag)]

    if find_defensive_block(read_descending_diagonal(board)) == BOT_THEN_TWO_PLAYER:
        logger.debug("Defense: answering descending diagonal")
        return RESPONSES[("descending", BOT_THEN_TWO_PLAYER)]

    if find_defensive_block(read_ascending_diagonal(board)) == BOT_THEN_TWO_PLAYER:
        logger.debug("Defense: answering ascending diagonal")
        return RESPONSES[("ascending", BOT_THEN_TWO_PLAYER)]

    for i, pair in enumerate(read_diamonds(board)):
        if find_defensive_block(pair) == DIAMOND_PAIR:
            logger.debug("Defense: covering corner of diamond %d", i)
            return DIAMOND_RESPONSES[i]

    return None


def find_defensive_move(board: Board, turn: int) -> Optional[Position]:
    """
    Pick the bot's blocking move for move number ``turn``, or None.

    Turn 2 answers a human center with the top-right corner. Turn 4
    checks the cross, diagonal and diamond traps before the generic
    scan. The generic scan blocks rows, columns, the descending diagonal
    and the ascending diagonal, in that order.
    """
    row, col = CENTER
    if turn == OPENING_TURN and board[row][col] == Cell.PLAYER:
        logger.debug("Defense: human opened in the center")
        return OPENING_RESPONSE

    if turn == TRAP_TURN:
        answer = _trap_response(board)
        if answer is not None:
            return answer

    for i, line in enumerate(read_rows(board)):
        index = _block_index(line)
        if index is not None:
            logger.debug("Defense: blocking row %d", i)
            return row_position(i, index)

    for i, line in enumerate(read_columns(board)):
        index = _block_index(line)
        if index is not None:
            logger.debug("Defense: blocking column %d", i)
            return column_position(i, index)

    index = _block_index(read_descending_diagonal(board))
    if index is not None:
        logger.debug("Defense: blocking descending diagonal")
        return descending_position(index)

    index = _block_index(read_ascending_diagonal(board))
    if index is not None:
        logger.debug("Defense: blocking ascending diagonal")
        return ascending_position(index)

    return None
