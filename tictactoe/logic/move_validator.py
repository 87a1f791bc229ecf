"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass

if TYPE_CHECKING:
    from .game_state import GameSession


class InvalidMove(ValueError):
    """A mark was placed where the rules do not allow it."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None

    def raise_if_invalid(self):
        """Raise InvalidMove with the error message if the move is invalid."""
        if not self.is_valid:
            raise InvalidMove(self.error_message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must be in play
    """

    def validate_move(self, session: "GameSession", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not session.in_play:
            return ValidationResult(
                is_valid=False,
                error_message="Game is not in play!"
            )

        # bool is an int, but never a cell number
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 8:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        occupant = session.cell_at(index)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: "GameSession") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            session: Current game session.

        Returns:
            Empty cell indices, or nothing if the game is not in play.
        """
        if not session.in_play:
            return []
        return session.empty_cells()
