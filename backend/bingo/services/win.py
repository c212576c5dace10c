from typing import Iterable, List

from bingo.models import Board, Cell, FREE
from bingo.services.board import BOARD_SIZE


def board_lines(board: Board) -> List[List[Cell]]:
    """Every line that wins: five rows, five columns and both diagonals."""
    lines = [list(row) for row in board.rows]
    lines.extend(board.column(col) for col in range(BOARD_SIZE))
    lines.append([board.cell(i, i) for i in range(BOARD_SIZE)])
    lines.append([board.cell(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)])
    return lines


def line_complete(cells: Iterable[Cell], actor_id: str) -> bool:
    return all(cell.marked_by in (actor_id, FREE) for cell in cells)


def check_win(board: Board, actor_id: str) -> bool:
    """True when any line on the board is fully marked by ``actor_id``.

    The free cell counts as marked for everyone. Pure: never touches the
    board.
    """
    return any(line_complete(line, actor_id) for line in board_lines(board))
