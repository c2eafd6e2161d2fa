"""Board cells and line readers for the 3x3 grid."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple


class Cell(Enum):
    EMPTY = "."
    PLAYER = "X"
    BOT = "O"


Board = List[List[Cell]]
Position = Tuple[int, int]

SIZE = 3
CENTER: Position = (1, 1)

# Corners in the same order as the diamonds that guard them
CORNERS: List[Position] = [(0, 0), (0, 2), (2, 2), (2, 0)]

# Edge midpoint pairs next to each corner: left+top, top+right, right+bottom, bottom+left
DIAMONDS: List[Tuple[Position, Position]] = [
    ((1, 0), (0, 1)),
    ((0, 1), (1, 2)),
    ((1, 2), (2, 1)),
    ((2, 1), (1, 0)),
]


def new_board() -> Board:
    """Return an empty board."""
    return [[Cell.EMPTY] * SIZE for _ in range(SIZE)]


def board_from_rows(rows: Iterable[str]) -> Board:
    """Build a board from three 3-character strings such as ``"XO."``."""
    board = [[Cell(ch) for ch in row] for row in rows]
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("a board needs exactly 3 rows of 3 cells")
    return board


def _join(cells: Iterable[Cell]) -> str:
    return "".join(cell.value for cell in cells)


# ─── Line readers ───────────────────────────────────────────


def read_rows(board: Board) -> List[str]:
    return [_join(row) for row in board]


def read_columns(board: Board) -> List[str]:
    return [_join(board[r][c] for r in range(SIZE)) for c in range(SIZE)]


def read_descending_diagonal(board: Board) -> str:
    """Top-left to bottom-right."""
    return _join(board[i][i] for i in range(SIZE))


def read_ascending_diagonal(board: Board) -> str:
    """Top-right to bottom-left."""
    return _join(board[i][SIZE - 1 - i] for i in range(SIZE))


def read_all(board: Board) -> str:
    """All nine cells, row by row."""
    return _join(cell for row in board for cell in row)


def read_diamonds(board: Board) -> List[str]:
    return [_join((board[a[0]][a[1]], board[b[0]][b[1]])) for a, b in DIAMONDS]


# ─── Line index -> board position ───────────────────────────


def row_position(row: int, index: int) -> Position:
    return (row, index)


def column_position(col: int, index: int) -> Position:
    return (index, col)


def descending_position(index: int) -> Position:
    return (index, index)


def ascending_position(index: int) -> Position:
    return (index, SIZE - 1 - index)
