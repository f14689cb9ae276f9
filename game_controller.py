"""
Game controller for the 2048 board engine.
Owns the single current board and logs every handled direction.
"""

import json
import os

from game_2048 import apply_move, boards_equal, initial_board, spawn_tile, validate_board


class GameController:
    """Holds the current board and applies moves to it."""

    def __init__(self, rows=4, cols=4, rng=None):
        self.rows = rows
        self.cols = cols
        self.rng = rng
        self._board = initial_board(rows, cols, rng)
        self.move_count = 0
        self.game_log = []
        self._log_state("INITIAL")

    @property
    def board(self):
        return [row[:] for row in self._board]

    def load_board(self, board):
        """
        Replace the current board, e.g. to resume from a log.

        Raises:
            ValueError: board is malformed or has different dimensions
        """
        validate_board(board)
        if (len(board), len(board[0])) != (self.rows, self.cols):
            raise ValueError(
                f"Board is {len(board)}x{len(board[0])}, controller expects {self.rows}x{self.cols}"
            )
        self._board = [row[:] for row in board]

    def handle_direction(self, direction):
        """
        Apply one move and spawn a tile if anything changed.

        Args:
            direction: One of 'left', 'right', 'up', 'down'

        Returns:
            True if the board changed, False for a no-op move
        """
        new_board = apply_move(direction, self._board)

        if boards_equal(self._board, new_board):
            self._log_state(direction, invalid_move=True)
            return False

        self._board = spawn_tile(new_board, self.rng)
        self.move_count += 1
        self._log_state(direction)
        return True

    def _log_state(self, action, invalid_move=False):
        log_entry = {
            "game_state": self.board,
            "action": action.upper(),
            "move_number": self.move_count,
        }
        if invalid_move:
            log_entry["invalid_move"] = True
        self.game_log.append(log_entry)

    def save_log(self, log_file):
        """Write the move log as JSON."""
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(log_file, 'w') as f:
            json.dump(self.game_log, f, indent=2)


def load_log(log_file):
    """Read a move log written by GameController.save_log."""
    with open(log_file, 'r') as f:
        return json.load(f)
