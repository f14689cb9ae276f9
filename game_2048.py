"""
Stateless 2048 Board Engine
Pure functional approach with no classes.

Cells hold exponents: 0 is an empty cell, k > 0 is a tile showing 2**k.
Every move is derived from a single left fusion through transpose/reverse.
"""

import random
from typing import List, Optional, Tuple


Row = List[int]
Board = List[Row]
Position = Tuple[int, int]

DIRECTIONS = ('left', 'right', 'up', 'down')


# Grid primitives

def transpose(board: Board) -> Board:
    """
    Swap rows and columns: result[i][j] == board[j][i].

    Args:
        board: Rectangular board

    Returns:
        New board with swapped dimensions (empty list when there are no columns)
    """
    if not board or not board[0]:
        return []
    return [[row[j] for row in board] for j in range(len(board[0]))]


def reverse_rows(board: Board) -> Board:
    """Mirror every row left to right."""
    return [row[::-1] for row in board]


def board_shape(board: Board) -> Tuple[int, int]:
    return len(board), len(board[0]) if board else 0


def validate_board(board: Board) -> None:
    """
    Reject boards the engine never produces itself.

    Raises:
        ValueError: empty board, zero columns, ragged rows or bad cell values
    """
    if not board:
        raise ValueError("Board must have at least one row")
    cols = len(board[0])
    if cols == 0:
        raise ValueError("Board must have at least one column")
    for i, row in enumerate(board):
        if len(row) != cols:
            raise ValueError(f"Row {i} has {len(row)} cells, expected {cols}")
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Invalid cell value {value!r} in row {i}")


# Fusion

def fuse_left(row: Row) -> Row:
    """
    Slide and merge a single row towards index 0.

    Gaps close first, then equal neighbours merge into one tile with the
    exponent incremented. A merged tile is never merged again in the same pass,
    so [1, 1, 1, 0] becomes [2, 1, 0, 0].

    Args:
        row: Row of exponents (any length, including 0 and 1)

    Returns:
        New row of the same length
    """
    tiles = [value for value in row if value != 0]

    fused = []
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            fused.append(tiles[i] + 1)
            i += 2
        else:
            fused.append(tiles[i])
            i += 1

    fused.extend([0] * (len(row) - len(fused)))
    return fused


# Directional moves

def move_left(board: Board) -> Board:
    return [fuse_left(row) for row in board]


def move_right(board: Board) -> Board:
    return reverse_rows(move_left(reverse_rows(board)))


def move_up(board: Board) -> Board:
    return transpose(move_left(transpose(board)))


def move_down(board: Board) -> Board:
    return transpose(reverse_rows(move_left(reverse_rows(transpose(board)))))


MOVES = {
    'left': move_left,
    'right': move_right,
    'up': move_up,
    'down': move_down,
}


def apply_move(direction: str, board: Board) -> Board:
    """
    Fuse the board in one direction without spawning a tile.

    Args:
        direction: One of 'left', 'right', 'up', 'down' (any case)
        board: Current board, left untouched

    Returns:
        New board of identical dimensions
    """
    move = MOVES.get(str(direction).lower())
    if move is None:
        raise ValueError(f"Invalid direction: {direction}. Must be 'left', 'right', 'up', or 'down'")
    validate_board(board)
    return move(board)


def boards_equal(a: Board, b: Board) -> bool:
    """True when a move left the board unchanged."""
    validate_board(a)
    validate_board(b)
    return a == b


# Board generation

def empty_board(rows: int, cols: int) -> Board:
    for name, size in (('rows', rows), ('cols', cols)):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"{name} must be a positive integer, got {size!r}")
    return [[0] * cols for _ in range(rows)]


def empty_cells(board: Board) -> List[Position]:
    """All empty positions in row-major order."""
    return [
        (i, j) for i, row in enumerate(board) for j, value in enumerate(row) if value == 0
    ]


def random_empty_cell(board: Board, rng=None) -> Optional[Position]:
    """
    Pick an empty position uniformly at random.

    Returns:
        (row, col) or None when the board is full
    """
    rng = rng or random
    cells = empty_cells(board)
    if not cells:
        return None
    return rng.choice(cells)


def random_tile_value(rng=None) -> int:
    """
    Exponent for a freshly spawned tile.

    A draw from 9..18 divided by 9 gives exponent 1 nine times out of ten and
    exponent 2 otherwise.
    """
    rng = rng or random
    return rng.randint(9, 18) // 9


def set_cell(board: Board, position: Position, value: int) -> Board:
    """Copy of the board with one cell replaced."""
    i, j = position
    new_board = [row[:] for row in board]
    new_board[i][j] = value
    return new_board


def spawn_tile(board: Board, rng=None) -> Board:
    """
    Place a new tile on a random empty cell.

    Args:
        board: Current board, left untouched
        rng: Optional random.Random for reproducible games

    Returns:
        New board with one more tile, or the same board when it is full
    """
    validate_board(board)
    position = random_empty_cell(board, rng)
    if position is None:
        return board
    return set_cell(board, position, random_tile_value(rng))


def initial_board(rows: int = 4, cols: int = 4, rng=None) -> Board:
    """Empty board seeded with two random tiles."""
    return spawn_tile(spawn_tile(empty_board(rows, cols), rng), rng)


# Display helpers

def tile_value(exponent: int) -> int:
    """Number shown on a tile (0 for an empty cell)."""
    return 2 ** exponent if exponent > 0 else 0


def display(board: Board) -> str:
    """
    Render the board as a markdown table of displayed tile values.

    Args:
        board: Board to display
    """
    res = ''
    for row in board:
        res += "| " + " | ".join(f"{tile_value(val) if val else '':^4}" for val in row) + " |\n"
    return res
