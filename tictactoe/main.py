"""
Main entry point for TicTacToe.

Plays in a tkinter window by default, or in the terminal with --no-ui:
- One player: human against the minimax AI
- Two players: two humans taking turns on one board

Run `tictactoe --help` for the options.
"""

import argparse
import logging
from typing import Callable, List, Optional

from .config import GameConfig
from .logic.game_state import FIRST_PLAYER, GameResult, GameSession, Player
from .logic.move_validator import MoveValidator
from .logic.ai_player import AIPlayer

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. The player whose turn it is types a cell number (1-9)
    2. In one-player mode, the AI answers right away
    3. Repeat until someone wins or it's a draw
    4. Offer another game
    """

    def __init__(
        self,
        players: Optional[int] = None,
        human_player: Player = FIRST_PLAYER,
        config: Optional[GameConfig] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the console game.

        Args:
            players: 1 (against the AI) or 2. None asks at start.
            human_player: Which player the human controls in one-player mode.
            config: Game settings.
            input_func: Reads one line of input, given a prompt (default: input).
        """
        self.config = config or GameConfig()
        self.players = players
        self.human_player = human_player
        self.ai_player = human_player.other()
        self.input = input_func or input

        self.session = GameSession()
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.ai_player, win_score=self.config.WIN_SCORE)

        self.is_running = False

    def start(self):
        """Play games until the user stops."""
        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)

        self.is_running = True

        if self.players is None:
            self.players = self._ask_players()

        if self.players == 1:
            print(f"   You play: {self.human_player.symbol}")
            print(f"   AI plays: {self.ai_player.symbol}")

        while self.is_running:
            self._new_game()
            self._game_loop()

            if not self.is_running:
                break

            self._show_game_result()
            self.is_running = self._ask_yes_no("Play again? [y/N] ")

    def _ask_players(self) -> Optional[int]:
        while True:
            answer = self._read("ONE PLAYER or TWO PLAYER? [1/2] ")
            if answer is None:
                self.is_running = False
                return None
            if answer in ("1", "2"):
                return int(answer)
            print("Please answer 1 or 2.")

    def _new_game(self):
        """X always opens."""
        self.session.active_player = FIRST_PLAYER
        self.session.reset()
        print("\n" + self.session.render() + "\n")

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and self.session.in_play:
            if self.players == 1 and self.session.active_player == self.ai_player:
                self._ai_move()
            else:
                self._human_move()

    def _human_move(self):
        """Read and play one move for the human whose turn it is."""
        symbol = self.session.current_player_symbol()
        cells = " ".join(str(index + 1) for index in self.validator.get_valid_moves(self.session))
        answer = self._read(f"{symbol} to move ({cells}, hint, q): ")

        if answer is None or answer == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return

        if answer == "hint":
            self._show_hint()
            return

        try:
            index = int(answer) - 1
        except ValueError:
            print(f"'{answer}' is not a cell number.")
            return

        result = self.validator.validate_move(self.session, index)
        if not result.is_valid:
            print(result.error_message)
            return

        self._play(index)

    def _show_hint(self):
        """Print the AI score of every free cell and its pick for the human."""
        scores = AIPlayer(win_score=self.config.WIN_SCORE).score_moves(self.session)
        print("Scores: " + ", ".join(f"{index + 1}: {score}" for index, score in scores.items()))
        # max() keeps the first of equal scores, like best_move()
        best = max(scores, key=scores.get)
        print(f"Place {self.session.current_player_symbol()} on cell {best + 1}")

    def _ai_move(self):
        """Let the AI play its move."""
        move = self.ai.best_move(self.session)
        print(f">>> AI plays {self.ai_player.symbol} on cell {move + 1}")
        self._play(move)

    def _play(self, index: int) -> Optional[GameResult]:
        result = self.session.play(index)
        print("\n" + self.session.render() + "\n")
        return result

    def _show_game_result(self):
        """Show the final game result."""
        print("="*40)

        winner = self.session.winner
        if winner is None:
            print("   NO WINNER")
        else:
            print(f"   {winner.symbol} WINS")
            line = self.session.winning_line
            print(f"   Line: {', '.join(str(index + 1) for index in line)}")
            if self.players == 1:
                print("   You won!" if winner == self.human_player else "   AI wins!")

        print("="*40)

    def _ask_yes_no(self, prompt: str) -> bool:
        answer = self._read(prompt)
        return answer is not None and answer.startswith("y")

    def _read(self, prompt: str) -> Optional[str]:
        """Read a trimmed, lower-cased line; None at end of input."""
        try:
            return self.input(prompt).strip().lower()
        except EOFError:
            return None


def analyse(cells: str, config: Optional[GameConfig] = None) -> Optional[int]:
    """
    Print the AI's move for a written-out board, or its result if the
    game on it is already over.

    Args:
        cells: 9 cells, e.g. "XX.OO....".
        config: Game settings.

    Returns:
        The chosen cell index (0-8), or None for a finished board.
    """
    config = config or GameConfig()
    session = GameSession.from_cells(cells)
    ai = AIPlayer(win_score=config.WIN_SCORE)

    print(session.render() + "\n")

    result = session.result()
    if result is not None:
        print(f"Game over: {result.describe()}")
        return None

    move = ai.best_move(session)
    print(f"{session.current_player_symbol()} plays cell {move + 1} (index {move})")
    logger.info("Evaluated %d positions", ai.nodes_evaluated)
    return move


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tictactoe", description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--players",
        type=int,
        choices=[1, 2],
        default=GameConfig.DEFAULT_PLAYERS,
        help="1 = against the AI, 2 = two humans (asked if not given)"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (as X); one-player mode only"
    )
    parser.add_argument(
        "--board",
        metavar="CELLS",
        help='With --no-ui: print the AI move for a board like "XX.OO...." and exit'
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = GameConfig()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT
    )

    if args.ai_first and args.players == 2:
        parser.error("--ai-first needs one-player mode")

    if args.board is not None:
        if not args.no_ui:
            parser.error("--board needs --no-ui")
        try:
            analyse(args.board, config)
        except ValueError as e:
            parser.error(str(e))
        return

    human_first = config.HUMAN_FIRST and not args.ai_first
    human_player = FIRST_PLAYER if human_first else FIRST_PLAYER.other()

    # Launch UI by default
    if not args.no_ui:
        from .ui import TicTacToeUI
        ui = TicTacToeUI(config=config, players=args.players, human_player=human_player)
        ui.run()
        return

    game = ConsoleGame(players=args.players, human_player=human_player, config=config)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
