"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and how the game ended.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Union
from dataclasses import dataclass, field

from .move_validator import InvalidMove, MoveValidator
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        """The mark drawn on the board."""
        return self.value

    def other(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self is Player.X else Player.X


FIRST_PLAYER = Player.X

# Characters accepted for an empty cell by GameSession.from_cells
EMPTY_CHARS = " ._-"

_win_checker = WinChecker()
_validator = MoveValidator()


@dataclass(frozen=True)
class GameResult:
    """How a game ended: a winner and its line, or a draw."""
    winner: Optional[Player]
    line: Optional[Line] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def describe(self) -> str:
        if self.winner is None:
            return "NO WINNER"
        return f"{self.winner.symbol} WINS"


@dataclass
class GameSession:
    """
    The complete state of one TicTacToe board.

    Tracks:
    - The 9 cells (None means empty, otherwise the Player who marked it)
    - Whose turn it is
    - Whether moves are accepted (False before reset() and after a result)
    - The winning line, once one is found
    """

    board: List[Optional[Player]] = field(default_factory=lambda: [None] * 9)

    active_player: Player = FIRST_PLAYER

    in_play: bool = False

    winning_line: Optional[Line] = None
    winner: Optional[Player] = None

    @classmethod
    def from_cells(
        cls,
        cells: Union[str, Iterable],
        active_player: Optional[Player] = None,
        in_play: bool = True
    ) -> "GameSession":
        """
        Build a session from a written-out board, e.g. "XX.OO....".

        Args:
            cells: 9 cells: "X"/"O" (or Player) for marks,
                   " ", ".", "_", "-" (or None) for empty.
            active_player: Whose turn it is. By default X if both players
                           have as many marks, else O.
            in_play: Whether the session accepts moves. Ignored (False)
                     when the board is already won or full.

        Returns:
            The new session, with any finished result recorded.
        """
        board: List[Optional[Player]] = []
        for cell in cells:
            if cell is None or isinstance(cell, Player):
                board.append(cell)
            elif isinstance(cell, str) and len(cell) == 1 and cell in EMPTY_CHARS:
                board.append(None)
            elif isinstance(cell, str) and cell.upper() in ("X", "O"):
                board.append(Player(cell.upper()))
            else:
                raise ValueError(f"Unknown cell value {cell!r}")

        if len(board) != 9:
            raise ValueError(f"A board has 9 cells, got {len(board)}")

        if active_player is None:
            x_count = board.count(Player.X)
            o_count = board.count(Player.O)
            active_player = Player.X if x_count == o_count else Player.O

        session = cls(board=board, active_player=active_player, in_play=in_play)

        line = _win_checker.find_winning_line(board)
        if line is not None:
            session.winning_line = line
            session.winner = board[line[0]]
        if session.result() is not None:
            session.in_play = False

        return session

    def reset(self):
        """Clear the board and start accepting moves. The turn is kept."""
        self.board = [None] * 9
        self.winning_line = None
        self.winner = None
        self.in_play = True

    def place(self, index: int, player: Optional[Player] = None):
        """
        Put a mark on an empty cell.

        Args:
            index: Cell index (0-8).
            player: Whose mark; the active player by default.

        Raises:
            InvalidMove: Off the board, cell taken, or game not in play.
        """
        _validator.validate_move(self, index).raise_if_invalid()

        if player is None:
            player = self.active_player
        if not isinstance(player, Player):
            raise InvalidMove(f"Not a player: {player!r}")
        self.board[index] = player
        logger.debug("%s placed at %d", player.symbol, index)

    def check_line(self, index: int) -> bool:
        """
        Check whether the move at `index` completed a line.

        The line found is kept in `winning_line`.

        Args:
            index: The cell that was just played.

        Returns:
            True if a line through `index` holds three equal marks.
        """
        line = _win_checker.check_line(self.board, index)
        if line is None:
            return False

        self.winning_line = line
        logger.debug("Winning line %s", line)
        return True

    def is_draw(self) -> bool:
        """True if the board is full and no winning line was found."""
        return self.winning_line is None and self.is_full()

    def is_full(self) -> bool:
        return _win_checker.is_full(self.board)

    def result(self) -> Optional[GameResult]:
        """The result of a finished game, or None while it can go on."""
        if self.winning_line is not None:
            return GameResult(winner=self.winner, line=self.winning_line)
        if self.is_draw():
            return GameResult(winner=None)
        return None

    def play(self, index: int) -> Optional[GameResult]:
        """
        Play one turn for the active player.

        Places the mark, looks for a win and then a draw, and passes
        the turn to the other player (also after the last move).

        Args:
            index: Cell index (0-8).

        Returns:
            The GameResult if this move ended the game, otherwise None.
        """
        player = self.active_player
        self.place(index, player)

        result = None
        if self.check_line(index):
            self.winner = player
            result = GameResult(winner=player, line=self.winning_line)
        elif self.is_draw():
            result = GameResult(winner=None)

        if result is not None:
            self.in_play = False
            logger.debug("Game over: %s", result.describe())

        self.toggle_player()
        return result

    def toggle_player(self):
        """Pass the turn to the other player."""
        self.active_player = self.active_player.other()

    def current_player_symbol(self) -> str:
        return self.active_player.symbol

    def opponent_symbol(self) -> str:
        return self.active_player.other().symbol

    def cell_at(self, index: int) -> Optional[Player]:
        """Get the mark on a cell, or None if it is empty."""
        if not 0 <= index <= 8:
            raise IndexError(f"Cell index {index} out of range 0-8")
        return self.board[index]

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameSession":
        """Create a copy of the session with its own board."""
        return GameSession(
            board=list(self.board),
            active_player=self.active_player,
            in_play=self.in_play,
            winning_line=self.winning_line,
            winner=self.winner
        )

    def render(self) -> str:
        """
        Draw the board as text. Empty cells show their number (1-9).

         X | 2 | O
        ---+---+---
         4 | X | 6
        ---+---+---
         7 | 8 | 9
        """
        rows = []
        for row in range(3):
            marks = []
            for col in range(3):
                index = row * 3 + col
                cell = self.board[index]
                marks.append(str(index + 1) if cell is None else cell.symbol)
            rows.append(" " + " | ".join(marks))
        return "\n---+---+---\n".join(rows)
