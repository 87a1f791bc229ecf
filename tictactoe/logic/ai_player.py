"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Dict, List, Optional

from ..config import GameConfig
from .game_state import GameSession, Player
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class NoMovesAvailable(RuntimeError):
    """The search was asked for a move on a full board."""


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always searches to the end of the game - it will win if
    possible, block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Optional[Player] = None, win_score: int = GameConfig.WIN_SCORE):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls. None means whoever's
                    turn it is on the session passed to best_move().
            win_score: Score of an immediate win.
        """
        self.player = player
        self.win_score = win_score
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.nodes_evaluated = 0

    def best_move(self, session: GameSession) -> int:
        """
        Get the best move for the current position.

        Candidates are tried in cell order, and a later one only replaces
        the best so far with a strictly higher score.

        Args:
            session: Current game session. It is not modified.

        Returns:
            Index of the chosen empty cell.

        Raises:
            NoMovesAvailable: The board is full.
        """
        me = self._searching_player(session)
        board = list(session.board)
        moves = [index for index, cell in enumerate(board) if cell is None]

        if not moves:
            raise NoMovesAvailable("No empty cell left to play")

        self.nodes_evaluated = 0
        best_score = float('-inf')
        best_move = moves[0]

        for index in moves:
            board[index] = me
            just_won = self.win_checker.check_line(board, index) is not None
            # scores at or below best_score may come back as bounds only
            score = self._minimax(board, me, 0, False, just_won, best_score, float('inf'))
            board[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "%s evaluated %d positions. Best move: %d (score: %s)",
            me.symbol, self.nodes_evaluated, best_move, best_score
        )

        return best_move

    def score_moves(self, session: GameSession) -> Dict[int, int]:
        """
        Score every empty cell for the searching player.

        Args:
            session: Current game session. It is not modified.

        Returns:
            Exact minimax score for each empty cell index.
        """
        me = self._searching_player(session)
        board = list(session.board)
        self.nodes_evaluated = 0

        scores = {}
        for index, cell in enumerate(board):
            if cell is not None:
                continue
            board[index] = me
            just_won = self.win_checker.check_line(board, index) is not None
            scores[index] = self._minimax(board, me, 0, False, just_won, float('-inf'), float('inf'))
            board[index] = None

        return scores

    def _searching_player(self, session: GameSession) -> Player:
        if self.player is None:
            return session.active_player
        return self.player

    def _minimax(
        self,
        board: List[Optional[Player]],
        me: Player,
        depth: int,
        is_maximizing: bool,
        just_won: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Marks are placed on `board` and taken back before returning.

        Args:
            board: Scratch copy of the cells.
            me: The maximizing player.
            depth: Plies played since the real position, minus one.
            is_maximizing: True if it is the maximizing player's turn.
            just_won: True if the move that led here completed a line.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        if just_won:
            if not is_maximizing:
                return self.win_score - depth   # We just won (prefer faster wins)
            return -self.win_score + depth      # They just won (prefer slower losses)

        moves = [index for index, cell in enumerate(board) if cell is None]
        if not moves:
            return 0  # Draw

        mark = me if is_maximizing else me.other()

        if is_maximizing:
            max_score = float('-inf')
            for index in moves:
                board[index] = mark
                won = self.win_checker.check_line(board, index) is not None
                score = self._minimax(board, me, depth + 1, False, won, alpha, beta)
                board[index] = None
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index in moves:
                board[index] = mark
                won = self.win_checker.check_line(board, index) is not None
                score = self._minimax(board, me, depth + 1, True, won, alpha, beta)
                board[index] = None
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
