import pytest

from tictactoe.logic.game_state import GameSession
from tictactoe.logic.move_validator import InvalidMove, MoveValidator, ValidationResult

validator = MoveValidator()


def test_valid_move(session):
    assert validator.validate_move(session, 4) == ValidationResult(is_valid=True)


@pytest.mark.parametrize("index", [-1, 9, True, "4", 4.0])
def test_rejects_non_cell_positions(session, index):
    result = validator.validate_move(session, index)
    assert not result.is_valid
    assert "Must be 0-8" in result.error_message


def test_rejects_taken_cell():
    s = GameSession.from_cells("..O......")
    result = validator.validate_move(s, 2)
    assert not result.is_valid
    assert result.error_message == "Cell 2 is already taken by O"


def test_rejects_when_not_in_play():
    result = validator.validate_move(GameSession(), 0)
    assert result == ValidationResult(is_valid=False, error_message="Game is not in play!")


def test_raise_if_invalid():
    ValidationResult(is_valid=True).raise_if_invalid()
    with pytest.raises(InvalidMove, match="nope"):
        ValidationResult(is_valid=False, error_message="nope").raise_if_invalid()
    assert issubclass(InvalidMove, ValueError)


def test_get_valid_moves():
    s = GameSession.from_cells("X...O...X")
    assert validator.get_valid_moves(s) == [1, 2, 3, 5, 6, 7]
    s.in_play = False
    assert validator.get_valid_moves(s) == []
