"""
Board Representation Helpers

Conversions between the bit-packed BoardState and the forms other layers
work with: (row, col) coordinates, a compact text layout, and numpy arrays.

Coordinates:
    - Row 0 = top row, Row 2 = bottom row
    - Column 0 = left, Column 2 = right
    - index = row * 3 + col

Layout notation (one character per cell, row-major):
    "XX.OO...."   or   "XX./OO./..."
    X = Cross, O = Nought, '.', '-' or ' ' = empty
    '/' and newlines between rows are ignored

2-Channel tensor:
    0: Noughts
    1: Crosses
    Each channel is a 3*3 binary mask where 1 indicates a claimed cell.
"""

import operator

import numpy as np
from typing import Tuple

from tictactoe_engine.board.bitboard import (
    NUM_CELLS,
    BoardState,
    CellValue,
    PlayerType,
    validate_index,
)
from tictactoe_engine.errors import InvalidBoard, InvalidIndex

BOARD_SIZE = 3

LAYOUT_SYMBOLS = {
    "X": CellValue.CROSS,
    "O": CellValue.NOUGHT,
    ".": CellValue.EMPTY,
    "-": CellValue.EMPTY,
    " ": CellValue.EMPTY,
}

# Characters allowed between rows
LAYOUT_SEPARATORS = "/\n\r\t"


def index_to_coordinates(index: int) -> Tuple[int, int]:
    """
    Convert a cell index to (row, column) coordinates.

    Args:
        index: Cell index (0-8), row-major

    Returns:
        Tuple of (row, col)
    """
    index = validate_index(index)
    return index // BOARD_SIZE, index % BOARD_SIZE


def coordinates_to_index(row: int, col: int) -> int:
    """
    Convert (row, column) coordinates to a cell index.

    Raises:
        InvalidIndex: If row or col is not an integer in 0..2
    """
    if isinstance(row, bool) or isinstance(col, bool):
        raise InvalidIndex((row, col))
    try:
        r, c = operator.index(row), operator.index(col)
    except TypeError:
        raise InvalidIndex((row, col)) from None
    if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
        raise InvalidIndex((row, col))
    return r * BOARD_SIZE + c


def parse_layout(text: str) -> BoardState:
    """
    Build a board from layout notation.

    Args:
        text: 9 cell characters, optionally split into rows by '/' or newlines

    Returns:
        BoardState with the described cells claimed

    Raises:
        InvalidBoard: On unknown characters or a wrong number of cells
    """
    cells = [ch for ch in text.upper() if ch not in LAYOUT_SEPARATORS]
    if len(cells) != NUM_CELLS:
        raise InvalidBoard(f"Layout must describe {NUM_CELLS} cells, got {len(cells)}: {text!r}")

    board = BoardState()
    for index, ch in enumerate(cells):
        value = LAYOUT_SYMBOLS.get(ch)
        if value is None:
            raise InvalidBoard(f"Unknown cell symbol {ch!r} in layout {text!r}")
        if value is CellValue.NOUGHT:
            board.mark(PlayerType.NOUGHT, index)
        elif value is CellValue.CROSS:
            board.mark(PlayerType.CROSS, index)
    return board


def format_layout(board: BoardState, row_separator: str = "") -> str:
    """
    Write a board in layout notation.

    Args:
        board: Board to format
        row_separator: Inserted between rows (e.g. "/")

    Returns:
        e.g. "XX.OO...." or "XX./OO./..."
    """
    symbols = ["." if value is CellValue.EMPTY else str(value) for value in board.decode()]
    rows = [
        "".join(symbols[start:start + BOARD_SIZE])
        for start in range(0, NUM_CELLS, BOARD_SIZE)
    ]
    return row_separator.join(rows)


def board_to_array(board: BoardState) -> np.ndarray:
    """
    Convert a board to a 3*3 grid of CellValue codes.

    Returns:
        numpy array of shape (3, 3), dtype int8 (0 empty, 1 nought, 2 cross)
    """
    values = np.array([int(v) for v in board.decode()], dtype=np.int8)
    return values.reshape(BOARD_SIZE, BOARD_SIZE)


def board_to_tensor(board: BoardState) -> np.ndarray:
    """
    Convert a board to a 2-channel tensor representation.

    Returns:
        numpy array of shape (2, 3, 3) with dtype float32
        - channel 0: noughts, channel 1: crosses
        - 1.0 where the player holds the cell, 0.0 elsewhere
    """
    grid = board_to_array(board)
    tensor = np.zeros((2, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0][grid == int(CellValue.NOUGHT)] = 1.0
    tensor[1][grid == int(CellValue.CROSS)] = 1.0
    return tensor


def tensor_to_board(tensor: np.ndarray) -> BoardState:
    """
    Convert a 2-channel tensor back to a BoardState.

    This is the inverse of board_to_tensor().

    Args:
        tensor: numpy array of shape (2, 3, 3)

    Returns:
        BoardState

    Raises:
        ValueError: If tensor has an invalid shape
        InvalidBoard: If a cell is set in both channels
    """
    if tensor.shape != (2, BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Invalid tensor shape: {tensor.shape}. Expected (2, 3, 3)")

    noughts_plane = tensor[0] > 0.5
    crosses_plane = tensor[1] > 0.5

    overlap = np.argwhere(noughts_plane & crosses_plane)
    if len(overlap):
        row, col = overlap[0]
        raise InvalidBoard(f"Both players on cell ({row}, {col})")

    board = BoardState()
    for row, col in np.argwhere(noughts_plane):
        board.mark(PlayerType.NOUGHT, coordinates_to_index(int(row), int(col)))
    for row, col in np.argwhere(crosses_plane):
        board.mark(PlayerType.CROSS, coordinates_to_index(int(row), int(col)))
    return board
