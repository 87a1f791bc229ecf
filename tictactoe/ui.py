"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (hovering an empty cell previews the next mark)
- ONE PLAYER / TWO PLAYER buttons to start
- The result, with the winning line highlighted
- A PLAY AGAIN? button once the game is over
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from .config import GameConfig
from .logic.game_state import FIRST_PLAYER, GameResult, GameSession, Player
from .logic.move_validator import MoveValidator
from .logic.ai_player import AIPlayer

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        players: Optional[int] = None,
        human_player: Player = FIRST_PLAYER
    ):
        """
        Initialize the UI.

        Args:
            config: Game settings.
            players: 1 or 2 to start right away, None to show the start buttons.
            human_player: Which player the human controls in one-player mode.
        """
        self.config = config or GameConfig()
        self.players = players
        self.human_player = human_player
        self.ai_player = human_player.other()

        self.session = GameSession()
        self.validator = MoveValidator()
        self.ai = AIPlayer(self.ai_player, win_score=self.config.WIN_SCORE)

        # Set while the AI reply is pending, so clicks are ignored
        self.ai_thinking = False

        self._create_ui()

        if players is None:
            self._show_start_buttons()
        else:
            self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.BACKGROUND)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        font = self.config.FONT_FAMILY
        style.configure('TFrame', background=self.config.BACKGROUND)
        style.configure('Title.TLabel', background=self.config.BACKGROUND,
                        font=(font, 16, 'bold'), foreground=self.config.TITLE_FG)
        style.configure('Status.TLabel', background=self.config.BACKGROUND,
                        font=(font, 12), foreground=self.config.STATUS_FG)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Top bar: start buttons or the result
        self.top_frame = ttk.Frame(main_frame)
        self.top_frame.pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack()

        self.board_cells: List[tk.Label] = []
        for index in range(9):
            cell = tk.Label(
                board_frame,
                text="",
                font=(font, self.config.CELL_FONT_SIZE, 'bold'),
                width=3,
                height=1,
                bg=self.config.CELL_BG,
                fg=self.config.CELL_FG,
                relief='ridge',
                borderwidth=2
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            cell.bind('<Enter>', lambda e, i=index: self._on_enter(i))
            cell.bind('<Leave>', lambda e, i=index: self._on_leave(i))
            cell.bind('<Button-1>', lambda e, i=index: self._on_click(i))
            self.board_cells.append(cell)

        # Bottom bar: second start button or PLAY AGAIN?
        self.bottom_frame = ttk.Frame(main_frame)
        self.bottom_frame.pack(pady=(10, 0))

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _make_button(self, parent, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            font=(self.config.FONT_FAMILY, 11, 'bold'),
            bg=self.config.BUTTON_BG,
            fg='white',
            width=16,
            command=command
        )

    def _clear_bars(self):
        for frame in (self.top_frame, self.bottom_frame):
            for child in frame.winfo_children():
                child.destroy()

    def _show_start_buttons(self):
        """Player selectors on start-up."""
        self._clear_bars()
        self._make_button(self.top_frame, "ONE PLAYER",
                          lambda: self._start(1)).pack()
        self._make_button(self.bottom_frame, "TWO PLAYER",
                          lambda: self._start(2)).pack()
        self.status_label.configure(text="Choose a mode")

    def _start(self, players: int):
        self.players = players
        self._new_game()

    def _new_game(self):
        """Clear the board and start accepting moves. X always opens."""
        self._clear_bars()
        self.ai_thinking = False
        self.session.active_player = FIRST_PLAYER
        self.session.reset()
        self._update_board_display()
        self._update_status()
        logger.debug("New %d-player game", self.players)

        if self._is_ai_turn():
            self._schedule_ai_move()

    def _is_ai_turn(self) -> bool:
        return (
            self.players == 1
            and self.session.in_play
            and self.session.active_player == self.ai_player
        )

    def _accepts_input(self, index: int) -> bool:
        """Same check the click handler uses before playing."""
        if self.ai_thinking:
            return False
        return self.validator.validate_move(self.session, index).is_valid

    def _on_enter(self, index: int):
        """Highlights a cell when hovered over."""
        if self._accepts_input(index):
            self.board_cells[index].configure(
                text=self.session.current_player_symbol(),
                fg=self.config.HOVER_FG
            )

    def _on_leave(self, index: int):
        """Clear cell highlighting."""
        if self._accepts_input(index):
            self.board_cells[index].configure(text="", fg=self.config.CELL_FG)

    def _on_click(self, index: int):
        if not self._accepts_input(index):
            return

        result = self.session.play(index)
        self._after_move(result)

        if self._is_ai_turn():
            self._schedule_ai_move()

    def _schedule_ai_move(self):
        self.ai_thinking = True
        self.status_label.configure(text="Thinking...")
        self.root.after(self.config.AI_REPLY_DELAY_MS, self._ai_move)

    def _ai_move(self):
        """Play the AI's move (runs on the UI thread)."""
        if not self._is_ai_turn():
            self.ai_thinking = False
            return

        move = self.ai.best_move(self.session)
        logger.debug("AI plays %d after %d positions", move, self.ai.nodes_evaluated)

        result = self.session.play(move)
        self.ai_thinking = False
        self._after_move(result)

    def _after_move(self, result: Optional[GameResult]):
        self._update_board_display()
        if result is None:
            self._update_status()
        else:
            self._show_game_result(result)

    def _update_board_display(self):
        """Update the board grid display."""
        line = self.session.winning_line or ()
        for index, cell in enumerate(self.board_cells):
            mark = self.session.cell_at(index)
            if index in line:
                cell.configure(bg=self.config.WIN_BG, fg=self.config.WIN_FG)
            else:
                cell.configure(bg=self.config.CELL_BG, fg=self.config.CELL_FG)
            cell.configure(text="" if mark is None else mark.symbol)

    def _update_status(self):
        """Update the status label."""
        symbol = self.session.current_player_symbol()
        if self.players == 1:
            who = "Your" if self.session.active_player == self.human_player else "AI's"
            self.status_label.configure(text=f"{who} turn ({symbol})")
        else:
            self.status_label.configure(text=f"{symbol} to move")

    def _show_game_result(self, result: GameResult):
        """Confirms the game is over: banner and PLAY AGAIN? button."""
        self._clear_bars()
        tk.Label(
            self.top_frame,
            text=result.describe(),
            font=(self.config.FONT_FAMILY, 16, 'bold'),
            bg=self.config.BACKGROUND,
            fg=self.config.TITLE_FG
        ).pack()
        self._make_button(self.bottom_frame, "PLAY AGAIN?", self._new_game).pack()
        self.status_label.configure(text="Game over")

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


if __name__ == "__main__":
    from .main import main
    main()
