from typing import List, Optional

import pytest
from hypothesis import given, strategies as st

from tictactoe.logic.game_state import Player
from tictactoe.logic.win_checker import LINES_THROUGH, WINNING_LINES, WinChecker

from conftest import played_games

X, O = Player.X, Player.O

checker = WinChecker()

cells = st.lists(st.sampled_from([None, X, O]), min_size=9, max_size=9)


def complete_lines(board: List[Optional[Player]]):
    return [
        line for line in WINNING_LINES
        if board[line[0]] is not None and len({board[i] for i in line}) == 1
    ]


def test_line_table():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8
    # corners sit on 3 lines, edges on 2, the centre on 4
    assert [len(LINES_THROUGH[i]) for i in range(9)] == [3, 2, 3, 2, 4, 2, 3, 2, 3]


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_found_from_each_of_its_cells(line):
    board = [None] * 9
    for i in line:
        board[i] = O
    for i in line:
        assert checker.check_line(board, i) == line
    assert checker.find_winning_line(board) == line


def test_mixed_line_is_not_a_win():
    board = [X, X, O, None, None, None, None, None, None]
    assert checker.check_line(board, 2) is None
    assert checker.find_winning_line(board) is None


def test_only_lines_through_index_are_checked():
    # complete top row, but the move looked at is on the bottom row
    board = [X, X, X, None, None, None, O, None, None]
    assert checker.check_line(board, 6) is None
    assert checker.find_winning_line(board) == (0, 1, 2)


def test_two_lines_reports_first_in_table_order():
    # X at the centre completes the middle row and a diagonal at once
    board = [X, O, O, X, X, X, O, O, X]
    assert checker.check_line(board, 4) == (3, 4, 5)
    assert checker.find_winning_line(board) == (3, 4, 5)


@given(cells, st.integers(min_value=0, max_value=8))
def test_check_line_matches_full_scan_through_index(board, index):
    through = [line for line in complete_lines(board) if index in line]
    expected = through[0] if through else None
    assert checker.check_line(board, index) == expected


@given(played_games())
def test_last_move_check_agrees_with_full_scan(game):
    s, played = game
    if not played:
        return
    assert checker.check_line(s.board, played[-1]) == checker.find_winning_line(s.board)


def test_is_full():
    assert not checker.is_full([None] * 9)
    assert checker.is_full([X, O, X, X, O, O, O, X, X])
