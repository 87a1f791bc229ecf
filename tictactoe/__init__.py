"""
TicTacToe
=========
Tic-tac-toe for one or two players on a 3x3 board.
The computer opponent searches the full game tree with minimax,
so it never loses.

Play in a window (tkinter) or in the terminal: see `tictactoe --help`.
"""

__version__ = "1.0.0"
