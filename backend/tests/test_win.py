import pytest

from bingo.models import FREE
from bingo.services.board import BOARD_SIZE, generate_board
from bingo.services.win import board_lines, check_win

ACTOR = 'alice'


def _mark(board, cells, actor=ACTOR):
    for row, col in cells:
        if not board.cell(row, col).is_free:
            board.cell(row, col).marked_by = actor


def test_twelve_lines():
    assert len(board_lines(generate_board())) == 12


def test_fresh_board_does_not_win():
    assert not check_win(generate_board(), ACTOR)


@pytest.mark.parametrize('cells', [
    [(0, c) for c in range(BOARD_SIZE)],
    [(4, c) for c in range(BOARD_SIZE)],
    [(r, 3) for r in range(BOARD_SIZE)],
    [(i, i) for i in range(BOARD_SIZE)],
    [(i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)],
])
def test_complete_line_wins(cells):
    board = generate_board()
    _mark(board, cells)
    assert check_win(board, ACTOR)


def test_free_cell_counts_in_middle_row():
    board = generate_board()
    _mark(board, [(2, 0), (2, 1), (2, 3), (2, 4)])
    assert board.cell(2, 2).marked_by == FREE
    assert check_win(board, ACTOR)


def test_incomplete_line_loses():
    board = generate_board()
    _mark(board, [(0, 0), (0, 1), (0, 2), (0, 3), (1, 4), (3, 3)])
    assert not check_win(board, ACTOR)


def test_marks_by_another_actor_do_not_count():
    board = generate_board()
    _mark(board, [(0, c) for c in range(BOARD_SIZE)], actor='bob')
    assert not check_win(board, ACTOR)
    assert check_win(board, 'bob')


def test_check_win_has_no_side_effects():
    board = generate_board()
    before = board.to_list()
    check_win(board, ACTOR)
    assert board.to_list() == before
