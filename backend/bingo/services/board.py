import random

from bingo.models import Board, Cell, FREE

BOARD_SIZE = 5
COLUMN_SPAN = 15
CENTER = BOARD_SIZE // 2


def column_range(col: int) -> range:
    """Numbers allowed in column ``col``: B=1-15, I=16-30, ... O=61-75."""
    start = col * COLUMN_SPAN + 1
    return range(start, start + COLUMN_SPAN)


def generate_board(rng=None) -> Board:
    """Draw a fresh 5x5 board with the center replaced by the free cell.

    Each column samples five distinct numbers from its own range, so no
    number can repeat anywhere on the board. The number drawn for the center
    is discarded.
    """
    rng = rng or random
    columns = [rng.sample(column_range(col), BOARD_SIZE) for col in range(BOARD_SIZE)]
    rows = [
        [Cell(number=columns[col][row]) for col in range(BOARD_SIZE)]
        for row in range(BOARD_SIZE)
    ]
    rows[CENTER][CENTER] = Cell(number=None, marked_by=FREE)
    return Board(rows=rows)
