"""
Win checker for TicTacToe.
Finds completed lines on a board of 9 cells.
"""

from typing import Dict, List, Optional, Sequence, Tuple

Line = Tuple[int, int, int]

# Board cells are numbered row by row:
#
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
CENTER = 4

# All possible winning lines, in the order they are reported
WINNING_LINES: List[Line] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]

DIAGONALS = WINNING_LINES[6:]

# Lines passing through each cell
LINES_THROUGH: Dict[int, List[Line]] = {
    index: [line for line in WINNING_LINES if index in line]
    for index in range(9)
}


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_line(self, board: Sequence, index: int) -> Optional[Line]:
        """
        Check the lines through the cell that was just played.

        Only a line through the latest move can have just been completed,
        so the other lines are not looked at. The diagonals all cross the
        centre: they are skipped for odd cells and while the centre is empty.

        Args:
            board: The 9 cells (None for empty).
            index: The cell that was just played (0-8).

        Returns:
            The completed line, or None.
        """
        check_diagonals = index % 2 == 0 and board[CENTER] is not None

        for line in LINES_THROUGH[index]:
            if line in DIAGONALS and not check_diagonals:
                continue
            if self._is_complete(board, line):
                return line

        return None

    def find_winning_line(self, board: Sequence) -> Optional[Line]:
        """
        Scan all 8 lines.

        Args:
            board: The 9 cells.

        Returns:
            The first completed line in table order, or None.
        """
        for line in WINNING_LINES:
            if self._is_complete(board, line):
                return line
        return None

    def _is_complete(self, board: Sequence, line: Line) -> bool:
        """True if all 3 cells of the line hold the same mark."""
        a, b, c = line
        return board[a] is not None and board[a] == board[b] == board[c]

    def is_full(self, board: Sequence) -> bool:
        """True if no empty cell is left."""
        return all(cell is not None for cell in board)
